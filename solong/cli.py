"""Command line entry point: validate a map and play it."""

from __future__ import annotations

import sys
from typing import Sequence

import pygame

from solong.game import Game
from solong.mapfile import MapError, load_map
from solong.render import run, textures_exist

_TEXTURE_DIR = "textures"


def main(argv: Sequence[str] | None = None) -> int:
    """Play the map named on the command line; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        sys.stdout.write("Error\n")
        return 1
    if not textures_exist(_TEXTURE_DIR):
        sys.stdout.write("Error\nTexture(s) couldn't be found!!!\n")
        return 1
    try:
        game_map = load_map(args[0])
    except MapError as err:
        sys.stdout.write(err.report())
        return 1
    try:
        run(Game(game_map), _TEXTURE_DIR)
    except pygame.error:
        sys.stdout.write("Error\nCouldn't start window\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())