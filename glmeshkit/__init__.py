"""OBJ loading, vertex indexing, tangent space, BMP/DDS parsing, text quads and picking helpers."""

__version__ = "0.1.0"

__all__ = [
    "objloader",
    "vboindexer",
    "tangentspace",
    "texture",
    "text2d",
    "picking",
    "colorpick",
]