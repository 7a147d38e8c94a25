"""The scene map: character checks, spawn lookup and the closed-map test."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from .config import Direction, SceneError

WALL = "1"
FLOOR = "0"
BLANK = " "
SPAWNS = "ENWS"
MAP_CHARS = frozenset(BLANK + WALL + FLOOR + SPAWNS)
_VISITED = "."

Spawn = Tuple[int, int, Direction]


def check_map_line(line: str) -> str:
    """Validate one map line and return it without its newline.

    Raises SceneError for an empty line or a character that has no place in a map.
    """
    if line == "":
        raise SceneError("Empty line in the map")
    row = line.split("\n", 1)[0]
    if any(char not in MAP_CHARS for char in row):
        raise SceneError("Invalid character in the map")
    return row


def find_player(rows: Sequence[Sequence[str]]) -> Optional[Spawn]:
    """Return (x, y, direction) of the last spawn letter in the map, or None."""
    spawn: Optional[Spawn] = None
    for y, row in enumerate(rows):
        for x, char in enumerate(row):
            if char in SPAWNS:
                spawn = (x, y, Direction.from_letter(char))
    return spawn


def has_open_floor(rows: Iterable[Sequence[str]]) -> bool:
    """Tell whether any row still holds an unvisited floor cell."""
    return any(FLOOR in row for row in rows)


def _count_players(rows: Iterable[str]) -> int:
    return sum(row.count(letter) for row in rows for letter in SPAWNS)


def _first_floor(cells: List[List[str]]) -> Tuple[int, int]:
    return next(
        (x, y)
        for y, row in enumerate(cells)
        for x, char in enumerate(row)
        if char == FLOOR
    )


@dataclass
class Grid:
    """A rectangular map; short rows are padded with blanks."""

    rows: List[str]
    spawn: Optional[Spawn] = None
    players: int = 0

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "Grid":
        """Build a grid from the map lines of a scene file."""
        rows = [check_map_line(line) for line in lines]
        if not rows:
            raise SceneError("No map in the file")
        width = max(len(row) for row in rows)
        return cls(
            rows=[row.ljust(width, BLANK) for row in rows],
            spawn=find_player(rows),
            players=_count_players(rows),
        )

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return max((len(row) for row in self.rows), default=0)

    def at(self, x: int, y: int) -> str:
        """Return the cell at column ``x``, row ``y``; IndexError outside the map."""
        if not (0 <= y < self.height and 0 <= x < self.width):
            raise IndexError(f"cell ({x}, {y}) is outside the map")
        return self.rows[y][x]

    def validate(self) -> None:
        """Check that every floor cell is enclosed, then turn blanks into walls.

        Raises SceneError when there is more than one spawn or the map leaks.
        """
        if self.players > 1:
            raise SceneError("Multiple players in the map")
        cells = [list(row) for row in self.rows]
        if self.spawn is None:
            start = (0, 0)
        else:
            start = (self.spawn[0] + 1, self.spawn[1] + 1)
        self._flood(cells, start)
        while has_open_floor(cells):
            self._flood(cells, _first_floor(cells))
        self.fill_blanks()

    def _flood(self, cells: List[List[str]], start: Tuple[int, int]) -> None:
        width, height = self.width, self.height
        stack = [start]
        while stack:
            x, y = stack.pop()
            if not (0 <= x < width and 0 <= y < height) or cells[y][x] == BLANK:
                raise SceneError("Map is not closed")
            if cells[y][x] == FLOOR:
                cells[y][x] = _VISITED
                stack.extend(((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)))

    def fill_blanks(self) -> None:
        """Replace every blank cell with a wall."""
        self.rows = [row.replace(BLANK, WALL) for row in self.rows]