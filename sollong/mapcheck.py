"""Loading and validation of ``.ber`` map files."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable
from dataclasses import dataclass
from os import PathLike

WALL = "1"
FLOOR = "0"
COIN = "C"
EXIT = "E"
PLAYER = "P"
ENEMY = "X"

_VISITED = "X"
_BLOCKERS = WALL + _VISITED
_UNREACHED = EXIT + COIN
_EXTENSION = ".ber"

_LINE_RE = re.compile(r"[^\n]*\n|[^\n]+")


class MapError(ValueError):
    """Raised when a map file name or its contents are not acceptable."""


@dataclass(frozen=True)
class Rules:
    """Size limits and allowed tiles of one edition of the game."""

    max_width: int
    max_height: int
    tiles: str


STANDARD = Rules(max_width=40, max_height=24, tiles="01CEP")
BONUS = Rules(max_width=160, max_height=128, tiles="01CEPX")


@dataclass(frozen=True)
class GameMap:
    """A validated map: its rows, coin count and player position (row, col)."""

    grid: tuple[str, ...]
    coins: int
    player: tuple[int, int]

    @property
    def width(self) -> int:
        return len(self.grid[0])

    @property
    def height(self) -> int:
        return len(self.grid)


def check_filename(path: str | PathLike[str]) -> str:
    """Return ``path`` as a string if it names a ``.ber`` file."""
    name = os.fspath(path)
    if len(name) <= len(_EXTENSION) or not name.endswith(_EXTENSION):
        raise MapError(f"not a {_EXTENSION} file name: {name!r}")
    return name


def measure(lines: Iterable[str], rules: Rules = STANDARD) -> tuple[int, int]:
    """Return (width, height) of a map given as lines that keep their newlines.

    The width is taken from the first non-empty line, less its line end.
    """
    width = 0
    height = 0
    for line in lines:
        height += 1
        if width == 0:
            width = len(line) - 1
        elif width <= 2 or width > rules.max_width:
            raise MapError(f"map width {width} is out of range")
    if height <= 2 or height > rules.max_height or (width <= 3 and height <= 3):
        raise MapError(f"map of {width}x{height} tiles is out of range")
    return width, height


def to_grid(data: str, width: int, height: int) -> tuple[str, ...]:
    """Cut ``data`` into ``height`` rows of ``width`` characters.

    One character (the line end) is skipped after each row. When the data
    runs out, the last character read stands in for the missing ones.
    """
    chars = iter(data)
    last: str | None = None
    rows = []
    for _ in range(height):
        row = []
        for _ in range(width):
            char = next(chars, None)
            if char is None:
                if last is None:
                    raise MapError("map data is empty")
                char = last
            last = char
            row.append(char)
        skipped = next(chars, None)
        if skipped is not None:
            last = skipped
        rows.append("".join(row))
    return tuple(rows)


def is_closed(grid: tuple[str, ...] | list[str]) -> bool:
    """Tell whether the map is surrounded by walls."""
    if not grid or not grid[0]:
        return False
    if any(row[0] != WALL or row[-1] != WALL for row in grid):
        return False
    return all(tile == WALL for tile in grid[0]) and all(
        tile == WALL for tile in grid[-1]
    )


def scan_tiles(
    grid: tuple[str, ...] | list[str], rules: Rules = STANDARD
) -> tuple[int, tuple[int, int]]:
    """Check the tiles and return (coin count, player position).

    Every tile must be allowed by ``rules``; there must be at least one
    coin, exactly one player and exactly one exit.
    """
    coins = 0
    for y, row in enumerate(grid):
        for x, tile in enumerate(row):
            if tile not in rules.tiles:
                raise MapError(f"unknown tile {tile!r} at row {y}, column {x}")
            if tile == COIN:
                coins += 1
    if coins == 0:
        raise MapError("map has no coins")
    players = [
        (y, x) for y, row in enumerate(grid) for x, tile in enumerate(row) if tile == PLAYER
    ]
    exits = sum(row.count(EXIT) for row in grid)
    if len(players) != 1 or exits != 1:
        raise MapError(
            f"map needs one player and one exit, has {len(players)} and {exits}"
        )
    return coins, players[-1]


def flood_fill(
    grid: tuple[str, ...] | list[str], start: tuple[int, int]
) -> tuple[str, ...]:
    """Return a copy of ``grid`` with every tile reachable from ``start`` marked.

    Walls and enemies block the way; reached tiles become ``X``.
    """
    cells = [list(row) for row in grid]
    y, x = start
    cells[y][x] = _VISITED
    pending = [start]
    while pending:
        y, x = pending.pop()
        for ny, nx in ((y, x + 1), (y, x - 1), (y + 1, x), (y - 1, x)):
            if 0 <= ny < len(cells) and 0 <= nx < len(cells[ny]):
                if cells[ny][nx] not in _BLOCKERS:
                    cells[ny][nx] = _VISITED
                    pending.append((ny, nx))
    return tuple("".join(row) for row in cells)


def all_reachable(grid: tuple[str, ...] | list[str], start: tuple[int, int]) -> bool:
    """Tell whether every coin and the exit can be reached from ``start``."""
    filled = flood_fill(grid, start)
    return not any(tile in _UNREACHED for row in filled for tile in row)


def parse_map(text: str, rules: Rules = STANDARD) -> GameMap:
    """Validate the text of a map file and return the map it describes."""
    width, height = measure(_LINE_RE.findall(text), rules)
    grid = to_grid(text, width, height)
    if not is_closed(grid):
        raise MapError("map is not surrounded by walls")
    coins, player = scan_tiles(grid, rules)
    if not all_reachable(grid, player):
        raise MapError("not every coin and the exit can be reached")
    return GameMap(grid=grid, coins=coins, player=player)


def load_map(path: str | PathLike[str], bonus: bool = False) -> GameMap:
    """Read and validate the ``.ber`` file at ``path``."""
    name = check_filename(path)
    try:
        with open(name, "rb") as handle:
            text = handle.read().decode("latin-1")
    except OSError as exc:
        raise MapError(f"cannot open {name}: {exc}") from exc
    return parse_map(text, BONUS if bonus else STANDARD)