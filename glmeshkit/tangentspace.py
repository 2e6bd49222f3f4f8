"""Per-vertex tangent and bitangent computation for normal mapping."""

from __future__ import annotations

import numpy as np

__all__ = ["compute_tangent_basis"]


def _table(values, width: int, name: str) -> np.ndarray:
    array = np.asarray(values, dtype=np.float32)
    if array.size == 0:
        return array.reshape(0, width)
    if array.ndim != 2 or array.shape[1] != width:
        raise ValueError(f"{name} must be rows of {width} numbers")
    return array


def compute_tangent_basis(vertices, uvs, normals) -> tuple[np.ndarray, np.ndarray]:
    """Return (tangents, bitangents), one row per vertex of a flat triangle list.

    Each triangle's three vertices share the same raw tangent and bitangent.
    Tangents are then made orthogonal to the normal, normalised, and flipped
    where needed so that cross(normal, tangent) points along the bitangent.
    """
    positions = _table(vertices, 3, "vertices")
    tex = _table(uvs, 2, "uvs")
    norms = _table(normals, 3, "normals")
    if len(positions) % 3:
        raise ValueError("vertex count must be a multiple of 3")
    if not len(tex) == len(norms) == len(positions):
        raise ValueError("vertices, uvs and normals must have the same length")

    tri = positions.reshape(-1, 3, 3)
    tri_uv = tex.reshape(-1, 3, 2)
    delta_pos1 = tri[:, 1] - tri[:, 0]
    delta_pos2 = tri[:, 2] - tri[:, 0]
    delta_uv1 = tri_uv[:, 1] - tri_uv[:, 0]
    delta_uv2 = tri_uv[:, 2] - tri_uv[:, 0]

    with np.errstate(divide="ignore", invalid="ignore"):
        r = np.float32(1.0) / (
            delta_uv1[:, 0] * delta_uv2[:, 1] - delta_uv1[:, 1] * delta_uv2[:, 0]
        )
        tangent = (delta_pos1 * delta_uv2[:, 1:2] - delta_pos2 * delta_uv1[:, 1:2]) * r[:, None]
        bitangent = (delta_pos2 * delta_uv1[:, 0:1] - delta_pos1 * delta_uv2[:, 0:1]) * r[:, None]

        tangents = np.repeat(tangent, 3, axis=0).astype(np.float32)
        bitangents = np.repeat(bitangent, 3, axis=0).astype(np.float32)

        # Gram-Schmidt against the normal, then fix handedness.
        tangents = tangents - norms * np.sum(norms * tangents, axis=1, keepdims=True)
        tangents = tangents / np.linalg.norm(tangents, axis=1, keepdims=True)
        flip = np.sum(np.cross(norms, tangents) * bitangents, axis=1) < 0
    tangents[flip] *= np.float32(-1.0)
    return tangents.astype(np.float32), bitangents