"""A deliberately small Wavefront OBJ reader producing flat triangle lists."""

from __future__ import annotations

import re
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

import numpy as np

__all__ = ["ObjLoadError", "ObjMesh", "parse_obj", "load_obj"]

_CORNER = re.compile(r"([+-]?\d+)/([+-]?\d+)/([+-]?\d+)")


class ObjLoadError(Exception):
    """Raised when an OBJ file cannot be opened or understood."""


@dataclass(eq=False)
class ObjMesh:
    """Unindexed triangle data: three consecutive rows form one triangle."""

    vertices: np.ndarray
    uvs: np.ndarray
    normals: np.ndarray

    def __len__(self) -> int:
        return len(self.vertices)


def _floats(args: list[str], count: int, lineno: int, what: str) -> tuple[float, ...]:
    if len(args) < count:
        raise ObjLoadError(f"line {lineno}: {what} needs {count} numbers")
    try:
        return tuple(float(token) for token in args[:count])
    except ValueError as exc:
        raise ObjLoadError(f"line {lineno}: malformed {what}") from exc


def _face(args: list[str], lineno: int) -> list[tuple[int, int, int]]:
    corners = []
    for token in args[:3]:
        match = _CORNER.fullmatch(token)
        if match is None:
            break
        corners.append(tuple(int(part) for part in match.groups()))
    if len(corners) != 3:
        raise ObjLoadError(
            f"line {lineno}: face is not three v/vt/vn corners; "
            "try exporting with other options"
        )
    return corners


def _lookup(table: list[tuple[float, ...]], index: int, what: str) -> tuple[float, ...]:
    if not 1 <= index <= len(table):
        raise ObjLoadError(f"{what} index {index} out of range 1..{len(table)}")
    return table[index - 1]


def _array(rows: list[tuple[float, ...]], width: int) -> np.ndarray:
    return np.array(rows, dtype=np.float32).reshape(-1, width)


def parse_obj(text: str) -> ObjMesh:
    """Parse OBJ text with triangular v/vt/vn faces into flat triangle arrays.

    The V texture coordinate is negated, as suits DDS textures.
    Only the first three corners of each face are used.
    """
    positions: list[tuple[float, ...]] = []
    tex_coords: list[tuple[float, ...]] = []
    normals: list[tuple[float, ...]] = []
    corners: list[tuple[int, int, int]] = []

    for lineno, line in enumerate(text.splitlines(), start=1):
        fields = line.split()
        if not fields:
            continue
        head, args = fields[0], fields[1:]
        if head == "v":
            positions.append(_floats(args, 3, lineno, "vertex"))
        elif head == "vt":
            u, v = _floats(args, 2, lineno, "texture coordinate")
            tex_coords.append((u, -v))
        elif head == "vn":
            normals.append(_floats(args, 3, lineno, "normal"))
        elif head == "f":
            corners.extend(_face(args, lineno))

    out_vertices = [_lookup(positions, vi, "vertex") for vi, _, _ in corners]
    out_uvs = [_lookup(tex_coords, ti, "texture coordinate") for _, ti, _ in corners]
    out_normals = [_lookup(normals, ni, "normal") for _, _, ni in corners]
    return ObjMesh(_array(out_vertices, 3), _array(out_uvs, 2), _array(out_normals, 3))


def load_obj(path: str | PathLike[str]) -> ObjMesh:
    """Read and parse the OBJ file at ``path``."""
    try:
        text = Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise ObjLoadError(f"cannot open {path}") from exc
    return parse_obj(text)