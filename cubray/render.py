"""Drawing the textured wall columns, ceiling and floor into a frame."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Mapping, Tuple

import numpy as np

from .colors import Color, opaque
from .config import HEIGHT, PI, PROJ_PLANE, TILE, WIDTH, Direction
from .grid import WALL, Grid
from .player import Player
from .raycast import cast_ray, fov_angles


class Quadrant(IntEnum):
    FIRST = 0
    SECOND = 1
    THIRD = 2
    FOURTH = 3


class _Orientation(Enum):
    VERTICAL = 0
    HORIZONTAL = 1


@dataclass(frozen=True, eq=False)
class Texture:
    """An image as packed 0xRRGGBBAA values, indexed [row, column]."""

    width: int
    height: int
    pixels: np.ndarray

    @classmethod
    def from_rgba(cls, width: int, height: int, data: bytes) -> "Texture":
        """Build a texture from row-major RGBA bytes."""
        if width <= 0 or height <= 0:
            raise ValueError(f"texture size must be positive, got {width}x{height}")
        raw = np.frombuffer(bytes(data), dtype=np.uint8)
        if raw.size != width * height * 4:
            raise ValueError(
                f"expected {width * height * 4} bytes of RGBA data, got {raw.size}"
            )
        channels = raw.reshape(height, width, 4).astype(np.uint32)
        packed = (
            (channels[..., 0] << 24)
            | (channels[..., 1] << 16)
            | (channels[..., 2] << 8)
            | channels[..., 3]
        )
        return cls(width=width, height=height, pixels=packed)

    def color_at(self, x: int, y: int) -> int:
        """Return the packed colour at column ``x``, row ``y``; 0 outside the image."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return 0
        return int(self.pixels[y, x])

    def _column(self, x: int, rows: np.ndarray) -> np.ndarray:
        out = np.zeros(rows.shape, dtype=np.uint32)
        if 0 <= x < self.width:
            inside = (rows >= 0) & (rows < self.height)
            out[inside] = self.pixels[rows[inside], x]
        return out


def _float32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def quadrant(angle: float) -> Quadrant:
    """Return the quadrant of an angle in single precision; anything else is FOURTH."""
    a = _float32(angle)
    if 0 <= a < PI / 2:
        return Quadrant.FIRST
    if PI / 2 <= a < PI:
        return Quadrant.SECOND
    if PI <= a < 3 * PI / 2:
        return Quadrant.THIRD
    return Quadrant.FOURTH


def _cdiv(a: int, b: int) -> int:
    return int(a / b)


def _cmod(a: int, b: int) -> int:
    return a - b * _cdiv(a, b)


def _zero_intersection(grid: Grid, angle: float, ray_x: float, ray_y: float) -> bool:
    shift = 1 if PI <= angle < 2 * PI else 0
    ix, iy = int(ray_x), int(ray_y)
    return (
        _cmod(ix, TILE) == 0
        and _cmod(iy + shift, TILE) == 0
        and grid.at(_cdiv(ix + shift, TILE), _cdiv(iy, TILE)) == WALL
        and grid.at(_cdiv(ix, TILE), _cdiv(iy, TILE)) == WALL
        and (
            grid.at(_cdiv(ix, TILE), _cdiv(iy + 1, TILE)) != WALL
            or grid.at(_cdiv(ix, TILE), _cdiv(iy - 1, TILE)) != WALL
        )
    )


def _orientation(grid: Grid, angle: float, ray_x: float, ray_y: float) -> _Orientation:
    if _zero_intersection(grid, angle, ray_x, ray_y) or _cmod(int(ray_x), TILE) != 0:
        return _Orientation.HORIZONTAL
    return _Orientation.VERTICAL


def wall_hit(grid: Grid, angle: float, hit_x: float, hit_y: float) -> Tuple[Direction, float]:
    """Decide which wall face a ray hit and where along the tile it landed.

    Returns the direction whose texture covers that face and the hit
    position within the tile, in pixels.
    """
    shift = 1 if PI / 2 <= angle < 3 * PI / 2 else 0
    q = quadrant(angle)
    ray_x = hit_x + shift
    if _orientation(grid, angle, ray_x, hit_y) is _Orientation.VERTICAL:
        side = Direction.EA if q in (Quadrant.FIRST, Quadrant.FOURTH) else Direction.WE
        return side, math.fmod(hit_y, TILE)
    side = Direction.SO if q in (Quadrant.FIRST, Quadrant.SECOND) else Direction.NO
    return side, math.fmod(ray_x - shift, TILE)


def column_span(distance: float) -> Tuple[int, int]:
    """Return the top and bottom screen rows of a wall seen at ``distance``."""
    if distance <= 0:
        raise ValueError(f"distance must be positive, got {distance}")
    wall_height = (TILE / distance) * PROJ_PLANE
    middle = HEIGHT // 2
    return int(middle - wall_height / 2), int(middle + wall_height / 2)


@dataclass(eq=False)
class Frame:
    """A screen image of packed 0xRRGGBBAA values, indexed [row, column]."""

    width: int = WIDTH
    height: int = HEIGHT
    pixels: np.ndarray = field(init=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"frame size must be positive, got {self.width}x{self.height}")
        self.pixels = np.zeros((self.height, self.width), dtype=np.uint32)

    def clear(self) -> None:
        """Set every pixel to transparent black."""
        self.pixels.fill(0)

    def draw_column(
        self,
        x: int,
        top: int,
        bottom: int,
        texture: Texture,
        texture_x: int,
        ceiling: int,
        floor: int,
    ) -> None:
        """Paint one screen column: ceiling above ``top``, texture to ``bottom``, floor below.

        The last row of the frame is left untouched.
        """
        if not 0 <= x < self.width:
            return
        ys = np.arange(self.height - 1)
        column = np.full(ys.shape, floor, dtype=np.uint32)
        column[ys < top] = ceiling
        wall = (ys >= top) & (ys <= bottom)
        if wall.any():
            span = bottom - top
            if span:
                rows = ((ys[wall] - top) / span * texture.height).astype(np.int64)
            else:
                rows = np.zeros(int(wall.sum()), dtype=np.int64)
            column[wall] = texture._column(texture_x, rows)
        self.pixels[: self.height - 1, x] = column


def render_scene(
    frame: Frame,
    grid: Grid,
    player: Player,
    textures: Mapping[Direction, Texture],
    ceiling: Color,
    floor: Color,
) -> Frame:
    """Clear ``frame`` and draw the view from ``player`` into it."""
    frame.clear()
    start_x, start_y = player.eye()
    ceiling_color = opaque(ceiling)
    floor_color = opaque(floor)
    angles = fov_angles(player.rotation, frame.width)
    for column, angle in enumerate(angles, start=1):
        hit_x, hit_y = cast_ray(grid, angle, start_x, start_y)
        distance = math.hypot(hit_x - start_x, hit_y - start_y)
        corrected = distance * math.cos(angle - player.rotation)
        top, bottom = column_span(corrected)
        side, offset = wall_hit(grid, angle, hit_x, hit_y)
        texture = textures[side]
        texture_x = int((offset / TILE) * texture.width)
        frame.draw_column(column, top, bottom, texture, texture_x, ceiling_color, floor_color)
    return frame