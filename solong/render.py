"""Textures, drawing and the interactive window."""

from __future__ import annotations

import os
from dataclasses import dataclass, fields

import pygame

from solong.game import Direction, Game, MoveResult
from solong.mapfile import COLLECTABLE, EXIT, PLAYER, SPACE, WALL
from solong.printf import printf

TILE = 32
TEXTURE_FILES = {
    "space": "spc.xpm",
    "wall": "wall.xpm",
    "up": "up.xpm",
    "down": "down.xpm",
    "left": "left.xpm",
    "right": "right.xpm",
    "portal": "portal.xpm",
    "closed": "closed.xpm",
    "power": "power.xpm",
}
_KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}


@dataclass
class Textures:
    """The images used for each kind of tile."""

    space: pygame.Surface
    wall: pygame.Surface
    up: pygame.Surface
    down: pygame.Surface
    left: pygame.Surface
    right: pygame.Surface
    portal: pygame.Surface
    closed: pygame.Surface
    power: pygame.Surface

    def player(self, direction: Direction) -> pygame.Surface:
        """The player image for the way it faces."""
        return {
            Direction.UP: self.up,
            Direction.DOWN: self.down,
            Direction.LEFT: self.left,
            Direction.RIGHT: self.right,
        }[direction]


def textures_exist(directory: str | os.PathLike[str] = "textures") -> bool:
    """True when every texture file is present in ``directory``."""
    return all(
        os.path.isfile(os.path.join(directory, name)) for name in TEXTURE_FILES.values()
    )


def load_textures(directory: str | os.PathLike[str] = "textures") -> Textures:
    """Load every texture from ``directory``."""
    images = {}
    for field in fields(Textures):
        path = os.path.join(directory, TEXTURE_FILES[field.name])
        if not os.path.isfile(path):
            raise FileNotFoundError(path)
        images[field.name] = pygame.image.load(path)
    return Textures(**images)


def direction_for_key(key: int) -> Direction | None:
    """The direction an arrow key stands for, or None for other keys."""
    return _KEY_DIRECTIONS.get(key)


def draw(surface: pygame.Surface, game: Game, textures: Textures) -> None:
    """Clear ``surface`` and draw every tile of the game on it."""
    surface.fill((0, 0, 0))
    for y in range(game.height):
        for x in range(game.width):
            tile = game.tile_at(x, y)
            if tile == EXIT:
                image = textures.closed if game.remaining else textures.portal
            elif tile == PLAYER:
                image = textures.player(game.facing)
            elif tile == COLLECTABLE:
                image = textures.power
            elif tile == WALL:
                image = textures.wall
            elif tile == SPACE:
                image = textures.space
            else:
                continue
            surface.blit(image, (x * TILE, y * TILE))


def run(game: Game, directory: str | os.PathLike[str] = "textures") -> None:
    """Open a window and play until the game is won or closed."""
    pygame.init()
    try:
        screen = pygame.display.set_mode((game.width * TILE, game.height * TILE))
        pygame.display.set_caption("so_long")
        textures = load_textures(directory)
        draw(screen, game, textures)
        pygame.display.flip()
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return
            if event.type != pygame.KEYDOWN:
                continue
            if event.key == pygame.K_ESCAPE:
                return
            direction = direction_for_key(event.key)
            if direction is not None:
                result = game.move(direction)
                if result is not MoveResult.BLOCKED:
                    printf("Moves = %d\n", game.moves)
                if result is MoveResult.WON:
                    printf("You Won!!!\n")
                    return
            draw(screen, game, textures)
            pygame.display.flip()
    finally:
        pygame.quit()