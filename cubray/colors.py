"""Scene colour lines and packed RGBA values."""

from __future__ import annotations

from typing import Tuple

from .config import SceneError

_DIGITS = "0123456789"

Color = Tuple[int, int, int]


def parse_color(line: str) -> Color:
    """Parse a colour line such as ``F 220,100,0`` into an (r, g, b) triple.

    The first character is the key; blanks may follow it. Raises SceneError
    for a malformed line or a component above 255.
    """
    body = line[1:].lstrip(" ")
    commas = 0
    for index, char in enumerate(body):
        if char == ",":
            if index == 0 or index + 1 == len(body) or body[index + 1] == ",":
                raise SceneError("Invalid color (missing number)")
            commas += 1
        elif char not in _DIGITS:
            raise SceneError("Invalid color format")
    if commas != 2:
        raise SceneError("Invalid color format (comma error)")
    red, green, blue = (int(part) for part in body.split(","))
    if max(red, green, blue) > 255:
        raise SceneError("Invalid color value (255 max range)")
    return red, green, blue


def rgba(r: int, g: int, b: int) -> int:
    """Pack red, green and blue into the top three bytes; alpha is zero."""
    for name, value in (("red", r), ("green", g), ("blue", b)):
        if not 0 <= value <= 255:
            raise ValueError(f"{name} component out of range: {value}")
    return (r << 24) | (g << 16) | (b << 8)


def opaque(color: Color) -> int:
    """Pack an (r, g, b) triple with full alpha."""
    r, g, b = color
    return rgba(r, g, b) | 0xFF