"""The viewer: spawn, keyboard-driven movement, wall collision and turning."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from .config import PI, SPEED, TILE, SceneError
from .grid import Grid
from .parser import Scene
from .raycast import Probe, probe_walls

TURN_STEP = 0.05


@dataclass(frozen=True)
class Controls:
    """Which movement and turning keys are held during a frame."""

    forward: bool = False
    back: bool = False
    left: bool = False
    right: bool = False
    turn_left: bool = False
    turn_right: bool = False


@dataclass
class Player:
    """Position as a map cell plus a whole-pixel offset, and a facing angle."""

    x: int
    y: int
    rotation: float
    offset_x: int = 0
    offset_y: int = 0

    @classmethod
    def spawn(cls, scene: Scene) -> "Player":
        """Place a player on the scene's spawn cell, facing its direction."""
        if scene.spawn is None:
            raise SceneError("No player in the map")
        x, y, direction = scene.spawn
        return cls(x=x, y=y, rotation=direction.angle())

    def eye(self) -> Tuple[float, float]:
        """Return the pixel point the player sees from: the centre of its cell plus offset."""
        return (
            float(self.x * TILE + self.offset_x + TILE // 2),
            float(self.y * TILE + self.offset_y + TILE // 2),
        )

    def _step(self, angle: float, sign: int = 1) -> None:
        # Offsets are whole pixels: each step is truncated toward zero.
        self.offset_x = int(self.offset_x + sign * math.cos(angle) * SPEED)
        self.offset_y = int(self.offset_y + sign * math.sin(angle) * SPEED)

    def update(self, controls: Controls, grid: Grid) -> Probe:
        """Move and turn for one frame; moves toward a wall closer than the limit are refused.

        Returns the wall probe the collision test was made with.
        """
        probe = probe_walls(grid, self.rotation, *self.eye())
        forward_blocked, right_blocked, back_blocked, left_blocked = probe.blocked()
        if controls.forward and not forward_blocked:
            self._step(self.rotation)
        if controls.back and not back_blocked:
            self._step(self.rotation, -1)
        if controls.left and not left_blocked:
            self._step(self.rotation - PI / 2)
        if controls.right and not right_blocked:
            self._step(self.rotation + PI / 2)
        self.rotate(controls.turn_left, controls.turn_right)
        return probe

    def rotate(self, left: bool, right: bool) -> None:
        """Turn by a fixed step and keep the angle within one turn."""
        if left:
            self.rotation -= TURN_STEP
        if right:
            self.rotation += TURN_STEP
        if self.rotation < 0:
            self.rotation += 2 * PI
        elif self.rotation > 2 * PI:
            self.rotation -= 2 * PI