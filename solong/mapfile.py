"""Loading and validating .ber map files."""

from __future__ import annotations

import io
import os
from collections import Counter
from dataclasses import dataclass
from typing import Sequence

from solong.linereader import read_lines

WALL = "1"
SPACE = "0"
COLLECTABLE = "C"
EXIT = "E"
PLAYER = "P"
_TILES = frozenset((WALL, SPACE, COLLECTABLE, EXIT, PLAYER))


class MapError(Exception):
    """A map file is missing or does not describe a valid map."""

    def __init__(self, message: str, *, error_header: bool = True) -> None:
        super().__init__(message)
        self.message = message
        self.error_header = error_header

    def report(self) -> str:
        """The text shown to the user for this error."""
        header = "Error\n" if self.error_header else ""
        return f"{header}{self.message}\n"


@dataclass(frozen=True)
class GameMap:
    """A validated map: rows of tiles, the player's (x, y) and the collectable count."""

    rows: tuple[str, ...]
    player: tuple[int, int]
    collectables: int

    @property
    def width(self) -> int:
        return len(self.rows[0])

    @property
    def height(self) -> int:
        return len(self.rows)


def check_extension(path: str | os.PathLike[str]) -> None:
    """Require a name ending in '.ber' with something before the extension."""
    name = os.fspath(path)
    if len(name) < 5:
        raise MapError("Invalid file name!!", error_header=False)
    if not name.endswith(".ber"):
        raise MapError("Invalid file extension!!", error_header=False)
    if name[-5] == "/":
        raise MapError("Invalid file name!!", error_header=False)


def check_dimensions(lines: Sequence[str]) -> list[str]:
    """Check that raw lines form a rectangle and return the rows without newlines.

    Every line but the last must carry a newline; the last must not.
    """
    if not lines:
        raise MapError("Invalid map size!!!")
    width = len(lines[0])
    if width < 4 or len(lines) < 3:
        raise MapError("Invalid map size!!!")
    if len(lines[-1]) != width - 1 or any(len(line) != width for line in lines[:-1]):
        raise MapError("Invalid map dimensions!!!")
    return [line[: width - 1] for line in lines]


def check_walls(rows: Sequence[str]) -> None:
    """Require the border of the map to be wall tiles."""
    if any(tile != WALL for tile in rows[0]):
        raise MapError("Invalid map walls!!!")
    if any(tile != WALL for tile in rows[-1]):
        raise MapError("Invalid map walls!!")
    if any(row[0] != WALL for row in rows):
        raise MapError("Invalid map walls!!!")
    if any(row[-1] != WALL for row in rows):
        raise MapError("Invalid map walls!!!")


def count_items(rows: Sequence[str]) -> tuple[tuple[int, int], int]:
    """Validate the tiles and return the player's (x, y) and the collectable count."""
    counts: Counter[str] = Counter()
    player: tuple[int, int] | None = None
    for y, row in enumerate(rows):
        for x, tile in enumerate(row):
            if tile not in _TILES:
                raise MapError("Invalid character in map!!!")
            counts[tile] += 1
            if tile == PLAYER and player is None:
                player = (x, y)
    if counts[PLAYER] != 1 or player is None:
        raise MapError("Invalid map,check player count!!!")
    if counts[EXIT] != 1:
        raise MapError("Invalid map, check exit count!!!")
    if counts[COLLECTABLE] < 1:
        raise MapError("Invalid map,check collectable count!!!")
    return player, counts[COLLECTABLE]


def check_reachable(rows: Sequence[str], player: tuple[int, int]) -> None:
    """Require every collectable and the exit to be reachable from the player.

    The exit can be stepped onto but not walked through.
    """
    total = sum(row.count(COLLECTABLE) for row in rows)
    found = 0
    exit_reached = False
    seen: set[tuple[int, int]] = set()
    stack = [player]
    while stack:
        x, y = stack.pop()
        if (x, y) in seen or not (0 <= y < len(rows) and 0 <= x < len(rows[y])):
            continue
        tile = rows[y][x]
        if tile == WALL:
            continue
        seen.add((x, y))
        if tile == EXIT:
            exit_reached = True
            continue
        if tile == COLLECTABLE:
            found += 1
        stack.extend(((x, y - 1), (x, y + 1), (x - 1, y), (x + 1, y)))
    if found != total or not exit_reached:
        raise MapError("Exit or Collectables arent reachable!!!")


def _build(lines: Sequence[str]) -> GameMap:
    if not lines:
        raise MapError("Empty map file!!!", error_header=False)
    rows = check_dimensions(lines)
    check_walls(rows)
    player, collectables = count_items(rows)
    check_reachable(rows, player)
    return GameMap(rows=tuple(rows), player=player, collectables=collectables)


def parse_map(text: str) -> GameMap:
    """Validate the text of a map and return it as a GameMap."""
    return _build(read_lines(io.StringIO(text)))


def load_map(path: str | os.PathLike[str]) -> GameMap:
    """Check the file name, read the map file and validate it."""
    check_extension(path)
    try:
        with open(path, encoding="latin-1", newline="") as stream:
            lines = read_lines(stream)
    except OSError as err:
        raise MapError("No such a file!!!", error_header=False) from err
    return _build(lines)