"""Reading ``.cub`` scene files into validated scenes."""

from __future__ import annotations

import os
import warnings
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Union

from .colors import Color, parse_color, rgba
from .config import Direction, SceneError
from .grid import WALL, Grid, Spawn
from .linereader import LineReader
from .textedit import trim, trim_tail

FLOOR_KEY = "F"
CEILING_KEY = "C"
EXTENSION = ".cub"

Key = Union[Direction, str]

_KEYS: Dict[str, Key] = {
    "EA": Direction.EA,
    "NO": Direction.NO,
    "WE": Direction.WE,
    "SO": Direction.SO,
    FLOOR_KEY: FLOOR_KEY,
    CEILING_KEY: CEILING_KEY,
}

_PATH_NAMES = (
    (Direction.EA, "east"),
    (Direction.NO, "north"),
    (Direction.WE, "west"),
    (Direction.SO, "south"),
)


@dataclass
class Scene:
    """Wall texture paths, floor and ceiling colours and the validated map."""

    paths: Dict[Direction, str]
    floor: Color
    ceiling: Color
    grid: Grid

    @property
    def floor_color(self) -> int:
        return rgba(*self.floor)

    @property
    def ceiling_color(self) -> int:
        return rgba(*self.ceiling)

    @property
    def spawn(self) -> Optional[Spawn]:
        return self.grid.spawn


def parse_key(line: str) -> Key:
    """Return the key that starts ``line``: a Direction, "F" or "C".

    Leading blanks are skipped; the key ends at the next blank.
    """
    word = line.lstrip(" ").split(" ", 1)[0]
    try:
        return _KEYS[word]
    except KeyError:
        raise SceneError("Invalid key in the .cub file") from None


def _readable(path: str) -> bool:
    return bool(path) and os.access(path, os.R_OK)


def _require_header(
    paths: Dict[Direction, str], floor: Optional[Color], ceiling: Optional[Color]
) -> None:
    for direction, name in _PATH_NAMES:
        if direction not in paths:
            raise SceneError(f"Missing {name} path in the .cub file")
    if floor is None:
        raise SceneError("Missing floor color in the .cub file")
    if ceiling is None:
        raise SceneError("Missing ceiling color in the .cub file")


def _set_color(current: Optional[Color], line: str) -> Color:
    color = parse_color(trim(line, " "))
    if current is not None:
        warnings.warn("color already set", UserWarning, stacklevel=3)
    return color


def parse_scene(
    lines: Iterable[str], path_exists: Optional[Callable[[str], bool]] = None
) -> Scene:
    """Parse the lines of a scene file.

    ``path_exists`` decides whether a texture path is usable; by default the
    file must be readable. Raises SceneError on any problem in the scene.
    """
    usable = path_exists or _readable
    trimmed: List[str] = [trim_tail(line, "\n ") for line in lines]
    if not trimmed:
        raise SceneError("Empty file")
    paths: Dict[Direction, str] = {}
    floor: Optional[Color] = None
    ceiling: Optional[Color] = None
    for index, line in enumerate(trimmed):
        body = line.lstrip(" ")
        if body.startswith(WALL):
            _require_header(paths, floor, ceiling)
            grid = Grid.from_lines(trimmed[index:])
            break
        if body.startswith("\n"):
            continue
        key = parse_key(body)
        if isinstance(key, Direction):
            path = trim(body[3:], " ")
            if not usable(path):
                raise SceneError("Invalid path in the .cub file")
            paths[key] = path
        elif key == FLOOR_KEY:
            floor = _set_color(floor, body)
        else:
            ceiling = _set_color(ceiling, body)
    else:
        raise SceneError("No map in the file")
    grid.validate()
    if grid.players == 0:
        raise SceneError("No player in the map")
    assert floor is not None and ceiling is not None
    return Scene(paths=paths, floor=floor, ceiling=ceiling, grid=grid)


def load_scene(path: Union[str, os.PathLike]) -> Scene:
    """Read and parse a ``.cub`` file."""
    name = os.fspath(path)
    try:
        stream = open(name, encoding="utf-8", errors="replace", newline="")
    except OSError as exc:
        raise SceneError("Map file not found") from exc
    with stream:
        if EXTENSION not in name:
            raise SceneError("Invalid file extension")
        lines = list(LineReader(stream))
    return parse_scene(lines)