"""Readers for uncompressed 24-bit BMP and DXT-compressed DDS images."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import Enum
from os import PathLike
from pathlib import Path

__all__ = [
    "TextureError",
    "BmpImage",
    "DdsFormat",
    "MipLevel",
    "DdsImage",
    "parse_bmp",
    "read_bmp",
    "parse_dds",
    "read_dds",
    "bmp_header",
]

BMP_HEADER_SIZE = 54
DDS_HEADER_SIZE = 124
_DDS_MAGIC = b"DDS "
_DDS_DATA_START = len(_DDS_MAGIC) + DDS_HEADER_SIZE
_BMP_PIXELS_PER_METRE = 0x0EC4


class TextureError(Exception):
    """Raised when an image file cannot be opened or is not in a supported form."""


@dataclass(frozen=True)
class BmpImage:
    """A 24-bit BMP image: ``data`` holds BGR pixels, bottom row first."""

    width: int
    height: int
    data: bytes


class DdsFormat(Enum):
    """S3TC block compression formats, keyed by their DDS four-character code."""

    DXT1 = 0x31545844
    DXT3 = 0x33545844
    DXT5 = 0x35545844

    @property
    def block_size(self) -> int:
        """Bytes per 4x4 pixel block."""
        return 8 if self is DdsFormat.DXT1 else 16

    @property
    def components(self) -> int:
        """Number of colour components the format stores."""
        return 3 if self is DdsFormat.DXT1 else 4

    @property
    def gl_internal_format(self) -> int:
        """The matching GL_COMPRESSED_RGBA_S3TC_*_EXT enumerant."""
        return {
            DdsFormat.DXT1: 0x83F1,
            DdsFormat.DXT3: 0x83F2,
            DdsFormat.DXT5: 0x83F3,
        }[self]


@dataclass(frozen=True)
class MipLevel:
    """One compressed mipmap level."""

    level: int
    width: int
    height: int
    data: bytes


@dataclass(frozen=True)
class DdsImage:
    """A DDS texture with its compressed mipmap chain."""

    width: int
    height: int
    format: DdsFormat
    mipmap_count: int
    levels: tuple[MipLevel, ...]


def _read(path: str | PathLike[str]) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise TextureError(f"{path} could not be opened") from exc


def parse_bmp(data: bytes) -> BmpImage:
    """Parse an uncompressed 24 bits-per-pixel BMP file.

    A zero image size in the header is taken as width * height * 3; the
    pixel data is taken to follow the 54-byte header directly.
    """
    header = bytes(data[:BMP_HEADER_SIZE])
    if len(header) != BMP_HEADER_SIZE or header[:2] != b"BM":
        raise TextureError("not a correct BMP file")
    (compression,) = struct.unpack_from("<i", header, 0x1E)
    (bits_per_pixel,) = struct.unpack_from("<i", header, 0x1C)
    if compression != 0 or bits_per_pixel != 24:
        raise TextureError("not a correct BMP file")

    (image_size,) = struct.unpack_from("<I", header, 0x22)
    (width,) = struct.unpack_from("<I", header, 0x12)
    (height,) = struct.unpack_from("<I", header, 0x16)
    if image_size == 0:
        image_size = width * height * 3

    pixels = bytes(data[BMP_HEADER_SIZE:BMP_HEADER_SIZE + image_size])
    if len(pixels) < image_size:
        raise TextureError("BMP pixel data is truncated")
    return BmpImage(width=width, height=height, data=pixels)


def read_bmp(path: str | PathLike[str]) -> BmpImage:
    """Read and parse the BMP file at ``path``."""
    return parse_bmp(_read(path))


def parse_dds(data: bytes) -> DdsImage:
    """Parse a DXT1, DXT3 or DXT5 DDS file into its mipmap levels."""
    if bytes(data[:4]) != _DDS_MAGIC:
        raise TextureError("not a DDS file")
    header = bytes(data[4:_DDS_DATA_START])
    if len(header) != DDS_HEADER_SIZE:
        raise TextureError("DDS header is truncated")

    height, width, linear_size = struct.unpack_from("<III", header, 8)
    (mipmap_count,) = struct.unpack_from("<I", header, 24)
    (four_cc,) = struct.unpack_from("<I", header, 80)

    try:
        fmt = DdsFormat(four_cc)
    except ValueError as exc:
        raise TextureError(f"unsupported DDS format 0x{four_cc:08X}") from exc

    buffer_size = linear_size * 2 if mipmap_count > 1 else linear_size
    buffer = bytes(data[_DDS_DATA_START:_DDS_DATA_START + buffer_size])

    levels: list[MipLevel] = []
    offset = 0
    level_width, level_height = width, height
    for level in range(mipmap_count):
        if not (level_width or level_height):
            break
        size = ((level_width + 3) // 4) * ((level_height + 3) // 4) * fmt.block_size
        chunk = buffer[offset:offset + size]
        if len(chunk) < size:
            raise TextureError(f"DDS mipmap level {level} is truncated")
        levels.append(MipLevel(level, level_width, level_height, chunk))
        offset += size
        # Non-power-of-two textures still need at least one pixel per side.
        level_width = max(level_width // 2, 1)
        level_height = max(level_height // 2, 1)

    return DdsImage(
        width=width,
        height=height,
        format=fmt,
        mipmap_count=mipmap_count,
        levels=tuple(levels),
    )


def read_dds(path: str | PathLike[str]) -> DdsImage:
    """Read and parse the DDS file at ``path``."""
    return parse_dds(_read(path))


def bmp_header(width: int, height: int) -> bytes:
    """The 54-byte header of an uncompressed 24-bit BMP of the given size."""
    if width < 0 or height < 0:
        raise ValueError("width and height must not be negative")
    image_size = width * height * 3
    return struct.pack(
        "<2sIIIIIIHHIIIIII",
        b"BM",
        BMP_HEADER_SIZE + image_size,
        0,
        BMP_HEADER_SIZE,
        40,
        width,
        height,
        1,
        24,
        0,
        image_size,
        _BMP_PIXELS_PER_METRE,
        _BMP_PIXELS_PER_METRE,
        0,
        0,
    )