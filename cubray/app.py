"""The game window, texture loading and the command-line entry point."""

from __future__ import annotations

import os
import sys
from typing import Dict, List, Optional, Sequence

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import numpy as np
import pygame

from .config import END, HEIGHT, MAUVE, RED, WIDTH, Direction, SceneError
from .parser import Scene, load_scene
from .player import Controls, Player
from .render import Frame, Texture, render_scene

TITLE = "cub3D"
FRAME_RATE = 60

_TEXTURE_ORDER = (
    (Direction.EA, "EAST"),
    (Direction.NO, "NORTH"),
    (Direction.WE, "WEST"),
    (Direction.SO, "SOUTH"),
)

_to_bytes = getattr(pygame.image, "tobytes", None) or pygame.image.tostring


def load_textures(scene: Scene) -> Dict[Direction, Texture]:
    """Load the four wall images named by the scene."""
    textures: Dict[Direction, Texture] = {}
    for direction, name in _TEXTURE_ORDER:
        try:
            surface = pygame.image.load(scene.paths[direction])
        except (pygame.error, OSError, KeyError) as exc:
            raise SceneError(f"Loading the {name} texture failed") from exc
        width, height = surface.get_size()
        textures[direction] = Texture.from_rgba(width, height, _to_bytes(surface, "RGBA"))
    return textures


def describe_map(scene: Scene) -> str:
    """Return a listing of the map's size and rows."""
    grid = scene.grid
    lines: List[str] = [
        f"height: {grid.height}",
        f"width:  {grid.width}",
        "map[y][x]:",
    ]
    lines.extend(f"{index:02d}  [{row}]" for index, row in enumerate(grid.rows))
    return "\n".join(lines)


def _controls(keys) -> Controls:
    return Controls(
        forward=bool(keys[pygame.K_w]),
        back=bool(keys[pygame.K_s]),
        left=bool(keys[pygame.K_a]),
        right=bool(keys[pygame.K_d]),
        turn_left=bool(keys[pygame.K_LEFT]),
        turn_right=bool(keys[pygame.K_RIGHT]),
    )


def _to_rgb(pixels: np.ndarray) -> np.ndarray:
    rgb = np.stack(
        ((pixels >> 24) & 0xFF, (pixels >> 16) & 0xFF, (pixels >> 8) & 0xFF), axis=-1
    ).astype(np.uint8)
    return rgb.transpose(1, 0, 2)


def run(scene: Scene) -> int:
    """Open the window and play until it is closed or Escape is pressed.

    Returns the number of frames drawn.
    """
    textures = load_textures(scene)
    player = Player.spawn(scene)
    frame = Frame(WIDTH, HEIGHT)
    frames = 0
    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(TITLE)
        clock = pygame.time.Clock()
        while True:
            if any(event.type == pygame.QUIT for event in pygame.event.get()):
                break
            keys = pygame.key.get_pressed()
            if keys[pygame.K_ESCAPE]:
                break
            render_scene(frame, scene.grid, player, textures, scene.ceiling, scene.floor)
            player.update(_controls(keys), scene.grid)
            pygame.surfarray.blit_array(screen, _to_rgb(frame.pixels))
            pygame.display.flip()
            frames += 1
            clock.tick(FRAME_RATE)
    finally:
        pygame.quit()
    return frames


def _report(message: str) -> None:
    sys.stdout.write(f"{RED}Error\n{END}{MAUVE}{message}\n{END}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load the scene named on the command line and play it."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        if not args:
            raise OSError("no map file given")
        with open(args[0], "rb"):
            pass
    except OSError:
        sys.stdout.write(f"Error\n{MAUVE}Map file not found\n{END}")
        return 0
    try:
        if len(args) != 1:
            raise SceneError("Invalid number of arguments")
        scene = load_scene(args[0])
        print(describe_map(scene))
        run(scene)
    except SceneError as exc:
        _report(exc.message)
        return 1
    print("Game ended")
    return 0