"""Geometry for drawing text with a 16x16 glyph atlas texture."""

from __future__ import annotations

import numpy as np

__all__ = ["glyph_uv", "text_quads"]

_GRID = 16
_CELL = np.float32(1.0) / np.float32(_GRID)


def _signed_code(character: str | int) -> int:
    code = ord(character) if isinstance(character, str) else int(character)
    if not 0 <= code <= 0xFF:
        raise ValueError("glyphs exist only for single-byte characters")
    # Atlas lookup uses a signed char, so bytes above 127 wrap negative.
    return code - 0x100 if code >= 0x80 else code


def glyph_uv(character: str | int) -> tuple[float, float]:
    """Top-left atlas coordinate of a character's cell in the 16x16 grid."""
    code = _signed_code(character)
    row = int(code / _GRID)  # truncating division, as for a C char
    column = code - row * _GRID
    return (
        float(np.float32(column) / np.float32(_GRID)),
        float(np.float32(row) / np.float32(_GRID)),
    )


def text_quads(text: str, x: int, y: int, size: int) -> tuple[np.ndarray, np.ndarray]:
    """Return (vertices, uvs) for two triangles per character of ``text``.

    Characters are squares of side ``size`` laid left to right from (x, y).
    """
    vertices: list[tuple[float, float]] = []
    uvs: list[tuple[float, float]] = []
    for i, character in enumerate(text):
        left = x + i * size
        right = left + size
        top = y + size
        up_left, up_right = (left, top), (right, top)
        down_right, down_left = (right, y), (left, y)
        vertices += [up_left, down_left, up_right, down_right, up_right, down_left]

        u, v = glyph_uv(character)
        u0, v0 = np.float32(u), np.float32(v)
        u1, v1 = u0 + _CELL, v0 + _CELL
        uv_up_left, uv_up_right = (u0, v0), (u1, v0)
        uv_down_right, uv_down_left = (u1, v1), (u0, v1)
        uvs += [uv_up_left, uv_down_left, uv_up_right, uv_down_right, uv_up_right, uv_down_left]

    return (
        np.array(vertices, dtype=np.float32).reshape(-1, 2),
        np.array(uvs, dtype=np.float32).reshape(-1, 2),
    )