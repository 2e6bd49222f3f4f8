"""Colour-coded picking: encode object ids as colours and decode read-back pixels."""

from __future__ import annotations

__all__ = ["BACKGROUND_ID", "picking_color", "picked_id", "pick_message"]

BACKGROUND_ID = 0x00FFFFFF
"""The id read back from a pixel cleared to full white."""

_MAX_ID = 0x00FFFFFF


def picking_color(index: int) -> tuple[float, float, float, float]:
    """RGBA colour in [0, 1] that encodes ``index`` in its red, green and blue bytes.

    Red holds the lowest byte, blue the highest; alpha is always 1.
    """
    index = int(index)
    if not 0 <= index <= _MAX_ID:
        raise ValueError(f"picking id must be in 0..{_MAX_ID}")
    red = index & 0xFF
    green = (index >> 8) & 0xFF
    blue = (index >> 16) & 0xFF
    return (red / 255.0, green / 255.0, blue / 255.0, 1.0)


def picked_id(red: int, green: int, blue: int) -> int:
    """The id encoded by a pixel's red, green and blue bytes."""
    channels = (int(red), int(green), int(blue))
    if any(not 0 <= channel <= 0xFF for channel in channels):
        raise ValueError("colour channels must be bytes in 0..255")
    r, g, b = channels
    return r + g * 256 + b * 256 * 256


def pick_message(picked: int) -> str:
    """Describe a picked id: ``"background"`` for full white, else ``"mesh <id>"``."""
    if picked == BACKGROUND_ID:
        return "background"
    return f"mesh {picked}"