"""Marching rays through the grid and probing for nearby walls."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Tuple

from .config import FOV, PI, TILE, WIDTH
from .grid import WALL, Grid

COLLISION_DISTANCE = 20
FIELD_OF_VIEW = FOV * (PI / 180)


def cast_ray(grid: Grid, angle: float, start_x: float, start_y: float) -> Tuple[float, float]:
    """Step a unit at a time along ``angle`` until a wall cell is reached.

    Returns the first point inside a wall. Raises IndexError if the ray
    leaves the map without meeting a wall.
    """
    dx, dy = math.cos(angle), math.sin(angle)
    x, y = start_x, start_y
    while True:
        x += dx
        y += dy
        if grid.at(int(x / TILE), int(y / TILE)) == WALL:
            return x, y


@dataclass(frozen=True)
class Probe:
    """Distances to the walls ahead, right, behind and left of the viewer."""

    forward: float
    right: float
    back: float
    left: float

    def blocked(self) -> Tuple[bool, bool, bool, bool]:
        """Return (forward, right, back, left): True where a wall is too close to move."""
        return (
            self.forward < COLLISION_DISTANCE,
            self.right < COLLISION_DISTANCE,
            self.back < COLLISION_DISTANCE,
            self.left < COLLISION_DISTANCE,
        )


def probe_walls(grid: Grid, angle: float, start_x: float, start_y: float) -> Probe:
    """Cast four rays at right angles, starting with ``angle``, and measure them."""
    lengths = []
    for quarter in range(4):
        x, y = cast_ray(grid, angle + PI / 2 * quarter, start_x, start_y)
        lengths.append(math.hypot(x - start_x, y - start_y))
    return Probe(*lengths)


def fov_angles(rotation: float, count: int = WIDTH) -> List[float]:
    """Return the ray angle for each of ``count`` screen columns, left to right.

    Angles that pass a full turn are brought back by one turn.
    """
    if count <= 0:
        raise ValueError(f"column count must be positive, got {count}")
    angles = []
    for column in range(1, count + 1):
        angle = rotation - FIELD_OF_VIEW / 2 + (column / count) * FIELD_OF_VIEW
        if angle > 2 * PI:
            angle -= 2 * PI
        angles.append(angle)
    return angles