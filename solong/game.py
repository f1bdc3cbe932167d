"""Game state and the player's moves across a validated map."""

from __future__ import annotations

from enum import Enum

from solong.mapfile import COLLECTABLE, EXIT, PLAYER, SPACE, WALL, GameMap


class Direction(Enum):
    """A step on the grid, as (dx, dy)."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


class MoveResult(Enum):
    """What happened when the player tried to move."""

    BLOCKED = "blocked"
    MOVED = "moved"
    WON = "won"


class Game:
    """A game in progress on a copy of a map.

    The player picks up collectables by walking onto them. The exit stays
    closed until every collectable has been picked up; stepping onto the
    open exit wins the game.
    """

    def __init__(self, game_map: GameMap) -> None:
        self._rows = [list(row) for row in game_map.rows]
        self.player: tuple[int, int] = game_map.player
        self.remaining: int = game_map.collectables
        self.moves: int = 0
        self.facing: Direction = Direction.RIGHT
        self.finished: bool = False

    @property
    def width(self) -> int:
        return len(self._rows[0])

    @property
    def height(self) -> int:
        return len(self._rows)

    def tile_at(self, x: int, y: int) -> str:
        """The tile at column ``x`` and row ``y``."""
        if not (0 <= y < self.height and 0 <= x < self.width):
            raise IndexError(f"({x}, {y}) lies outside the map")
        return self._rows[y][x]

    def move(self, direction: Direction) -> MoveResult:
        """Try to move the player one tile in ``direction``."""
        if self.finished:
            raise RuntimeError("the game is already won")
        x, y = self.player
        nx, ny = x + direction.dx, y + direction.dy
        target = self.tile_at(nx, ny)
        if target == WALL:
            return MoveResult.BLOCKED
        if target == EXIT and self.remaining:
            return MoveResult.BLOCKED
        self.moves += 1
        if target == EXIT:
            self.finished = True
            return MoveResult.WON
        if target == COLLECTABLE:
            self.remaining -= 1
        self._rows[y][x] = SPACE
        self._rows[ny][nx] = PLAYER
        self.player = (nx, ny)
        self.facing = direction
        return MoveResult.MOVED