"""Merge duplicate vertices into an indexed vertex buffer."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

__all__ = [
    "IndexedMesh",
    "IndexedTBNMesh",
    "is_near",
    "find_similar_vertex",
    "index_vbo_slow",
    "index_vbo",
    "index_vbo_tbn",
]

_EPSILON = np.float32(0.01)
_MAX_INDEX = 0xFFFF


@dataclass(eq=False)
class IndexedMesh:
    """Unique vertex attributes plus 16-bit indices that rebuild the triangles."""

    indices: np.ndarray
    vertices: np.ndarray
    uvs: np.ndarray
    normals: np.ndarray


@dataclass(eq=False)
class IndexedTBNMesh(IndexedMesh):
    """An indexed mesh that also carries accumulated tangents and bitangents."""

    tangents: np.ndarray
    bitangents: np.ndarray


def is_near(a: float, b: float) -> bool:
    """True if two values differ by less than 0.01."""
    return bool(abs(np.float32(a) - np.float32(b)) < _EPSILON)


def _table(values, width: int, name: str) -> np.ndarray:
    array = np.asarray(values, dtype=np.float32)
    if array.size == 0:
        return array.reshape(0, width)
    if array.ndim != 2 or array.shape[1] != width:
        raise ValueError(f"{name} must be rows of {width} numbers")
    return array


def _pack(vertices, uvs, normals) -> np.ndarray:
    columns = [
        _table(vertices, 3, "vertices"),
        _table(uvs, 2, "uvs"),
        _table(normals, 3, "normals"),
    ]
    if len({len(column) for column in columns}) != 1:
        raise ValueError("vertices, uvs and normals must have the same length")
    return np.hstack(columns)


def _first_near(row: np.ndarray, table: np.ndarray) -> int | None:
    if len(table) == 0:
        return None
    hits = np.flatnonzero(np.all(np.abs(table - row) < _EPSILON, axis=1))
    return int(hits[0]) if hits.size else None


def _check_index(index: int) -> None:
    if index > _MAX_INDEX:
        raise ValueError("too many distinct vertices for 16-bit indices")


def _indexed(indices: list[int], table: np.ndarray) -> IndexedMesh:
    return IndexedMesh(
        indices=np.array(indices, dtype=np.uint16),
        vertices=table[:, 0:3].copy(),
        uvs=table[:, 3:5].copy(),
        normals=table[:, 5:8].copy(),
    )


def find_similar_vertex(
    vertex: Sequence[float],
    uv: Sequence[float],
    normal: Sequence[float],
    out_vertices,
    out_uvs,
    out_normals,
) -> int | None:
    """Index of the first output vertex whose attributes are all near the given ones."""
    row = np.concatenate(
        [
            np.asarray(vertex, dtype=np.float32),
            np.asarray(uv, dtype=np.float32),
            np.asarray(normal, dtype=np.float32),
        ]
    )
    return _first_near(row, _pack(out_vertices, out_uvs, out_normals))


def index_vbo_slow(vertices, uvs, normals) -> IndexedMesh:
    """Index vertices, merging those whose attributes are all within 0.01."""
    packed = _pack(vertices, uvs, normals)
    unique = np.empty_like(packed)
    count = 0
    indices: list[int] = []
    for row in packed:
        found = _first_near(row, unique[:count])
        if found is None:
            _check_index(count)
            unique[count] = row
            found = count
            count += 1
        indices.append(found)
    return _indexed(indices, unique[:count])


def index_vbo(vertices, uvs, normals) -> IndexedMesh:
    """Index vertices, merging only those with bit-identical attributes."""
    packed = _pack(vertices, uvs, normals)
    seen: dict[bytes, int] = {}
    rows: list[np.ndarray] = []
    indices: list[int] = []
    for row in packed:
        key = row.tobytes()
        found = seen.get(key)
        if found is None:
            found = len(rows)
            _check_index(found)
            rows.append(row)
            seen[key] = found
        indices.append(found)
    table = np.array(rows, dtype=np.float32).reshape(-1, 8)
    return _indexed(indices, table)


def index_vbo_tbn(vertices, uvs, normals, tangents, bitangents) -> IndexedTBNMesh:
    """Index vertices like ``index_vbo_slow``, summing tangents of merged vertices."""
    packed = _pack(vertices, uvs, normals)
    in_tangents = _table(tangents, 3, "tangents")
    in_bitangents = _table(bitangents, 3, "bitangents")
    if not len(in_tangents) == len(in_bitangents) == len(packed):
        raise ValueError("tangents and bitangents must match the vertex count")

    unique = np.empty_like(packed)
    out_tangents = np.empty_like(in_tangents)
    out_bitangents = np.empty_like(in_bitangents)
    count = 0
    indices: list[int] = []
    for row, tangent, bitangent in zip(packed, in_tangents, in_bitangents):
        found = _first_near(row, unique[:count])
        if found is None:
            _check_index(count)
            unique[count] = row
            out_tangents[count] = tangent
            out_bitangents[count] = bitangent
            found = count
            count += 1
        else:
            out_tangents[found] += tangent
            out_bitangents[found] += bitangent
        indices.append(found)

    base = _indexed(indices, unique[:count])
    return IndexedTBNMesh(
        indices=base.indices,
        vertices=base.vertices,
        uvs=base.uvs,
        normals=base.normals,
        tangents=out_tangents[:count].copy(),
        bitangents=out_bitangents[:count].copy(),
    )