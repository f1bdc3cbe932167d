# solong

A small tile-based puzzle game. You steer a craft around a walled map,
pick up every power cell, and then fly into the portal to win. The portal
stays closed until all cells are collected.

## Installing

```
pip install .
```

The game window is drawn with pygame. To run the tests:

```
pip install .[test]
pytest
```

## Playing

```
solong maps/level1.ber
```

The command takes exactly one argument: the path to a map file whose name
ends in `.ber` and has something before the extension. It looks for its
textures in a `textures/` directory under the current working directory and
loads them with pygame. The files are `spc.xpm`, `wall.xpm`, `up.xpm`,
`down.xpm`, `left.xpm`, `right.xpm`, `portal.xpm`, `closed.xpm` and
`power.xpm`; if any is missing, the command prints
`Texture(s) couldn't be found!!!` and stops.

Controls:

- Arrow keys move the craft.
- Escape, or closing the window, quits.

Every move that is not blocked prints `Moves = N`. Stepping into the open
portal also prints `You Won!!!` and ends the game.

Problems are reported on standard output, most of them after an `Error`
line, and the command then exits with status 1.

## Map format

A map is plain text, one row per line, using these characters:

| Char | Meaning                    |
|------|----------------------------|
| `1`  | wall                       |
| `0`  | empty floor                |
| `P`  | player start (exactly one) |
| `E`  | exit portal (exactly one)  |
| `C`  | power cell (at least one)  |

Every line but the last ends with a newline; the last line has none, so a
file that ends with a newline is rejected as having wrong dimensions.

A map is rejected when any of these is true:

- the file is missing or empty;
- its rows are not all the same length;
- it has fewer than 3 columns or fewer than 3 rows;
- it is not fully enclosed by walls;
- it contains any other character;
- the player, exit or power-cell counts are wrong;
- any cell or the exit cannot be reached from the start (the exit can be
  stepped onto but not walked through).

Example:

```
1111111
1P0C0E1
1111111
```

## Using it as a library

```python
from solong.mapfile import load_map
from solong.game import Game, Direction, MoveResult

game = Game(load_map("maps/level1.ber"))
result = game.move(Direction.RIGHT)
if result is MoveResult.WON:
    print("won in", game.moves, "moves")
```

- `solong.mapfile.load_map(path)` checks the file name and reads and
  validates the map; `parse_map(text)` validates map text already in memory.
  Both return a `GameMap` (`rows`, `player` as `(x, y)`, `collectables`,
  `width`, `height`) and raise `MapError` on any failure. The separate checks
  are `check_extension`, `check_dimensions`, `check_walls`, `count_items` and
  `check_reachable`.
- `solong.game.Game` holds a game in progress: `move(direction)` returns
  `MoveResult.BLOCKED`, `MOVED` or `WON`; `tile_at(x, y)`, `player`,
  `remaining`, `moves`, `facing` and `finished` describe the state. Moving
  after the game is won raises `RuntimeError`.
- `solong.render` has `textures_exist`, `load_textures`, `direction_for_key`,
  `draw` and `run`, which opens the window and plays a `Game`.

The package also carries small helper modules used by, or alongside, the
game: `solong.linereader` (`LineReader`, `read_lines`: reading a stream line
by line), `solong.printf` (`format_printf`, `printf` with `%c %s %p %d %i %u
%x %X %%`), `solong.strtools`, `solong.charclass`, `solong.memory` and
`solong.fdout` (string, character, byte-buffer and file-descriptor helpers).