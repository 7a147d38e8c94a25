"""Engine constants, compass directions and the scene error type."""

from __future__ import annotations

from enum import IntEnum

MAUVE = "\033[0;34m"
RED = "\033[0;31m"
END = "\033[m"

HEIGHT = 1200
WIDTH = 1600
FOV = 45
MINI_LENGTH = 500
TILE = 60
PI = 3.14159265
SPEED = 5
PROJ_PLANE = 1931.370852


class SceneError(Exception):
    """A scene file or its map is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class Direction(IntEnum):
    """A compass direction; the value indexes the texture paths."""

    EA = 0
    NO = 1
    WE = 2
    SO = 3

    @classmethod
    def from_letter(cls, letter: str) -> "Direction":
        """Return the direction for a map spawn letter: E, N, W or S."""
        try:
            return _LETTERS[letter]
        except (KeyError, TypeError):
            raise ValueError(f"not a direction letter: {letter!r}") from None

    def angle(self) -> float:
        """Facing angle in radians, y growing downwards (south is PI/2)."""
        return _ANGLES[self]


_LETTERS = {
    "E": Direction.EA,
    "N": Direction.NO,
    "W": Direction.WE,
    "S": Direction.SO,
}

_ANGLES = {
    Direction.EA: 0.0,
    Direction.SO: PI / 2,
    Direction.WE: PI,
    Direction.NO: 3 * PI / 2,
}