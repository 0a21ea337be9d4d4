# pixelfall

A small tile-based platformer. You start in a walled level, pick up every
coin, and walk onto the exit once it opens. Gravity pulls you down one tile
at a time, and you can jump one tile up while you are not already airborne.

## Installing

```
pip install .
```

This installs the game and its one dependency, `pygame`.

## Playing

```
pixelfall path/to/level.ber
```

Exactly one argument is expected: the path of a level file ending in `.ber`.

The game loads its images from a `texture` directory in the current working
directory, which must hold these files:

```
texture/wall/middle.xpm
texture/player/player_idle_right.xpm
texture/player/player_idle_left.xpm
texture/player/player_fall_right.xpm
texture/player/player_fall_left.xpm
texture/object/coins/coins_1.xpm
texture/object/coins/coins_2.xpm
texture/object/exit/exit.xpm
texture/object/exit/exit_open.xpm
texture/background/back.xpm
```

Each tile is 32 pixels square, and the window is sized to the level.

Controls:

| Key        | Action                                 |
|------------|----------------------------------------|
| Left/Right | move one tile (walls block the move)   |
| Up         | jump one tile, only when not airborne  |
| Down       | clear the airborne state               |
| Escape     | quit                                   |

Closing the window also quits. Walking over a coin collects it; once every
coin is collected the exit is drawn open, and standing on it ends the game.

When something goes wrong the command prints `Error`, a newline and a
message, and exits with status 255. Messages include `Too few arguments !`,
`Too much arguments !`, `Can't load textures: ...` and `Can't open the
window`, as well as the level errors below.

## Level files

A level is a plain-text grid, one row per line:

| Char | Meaning      |
|------|--------------|
| `1`  | wall         |
| `0`  | empty space  |
| `P`  | player start |
| `C`  | coin         |
| `E`  | exit         |

A level is rejected with one of these messages:

| Message                         | Cause                                        |
|---------------------------------|----------------------------------------------|
| `Map is not a .ber`             | the file name does not end in `.ber`         |
| `No file`                       | the file cannot be opened                    |
| `Not a valid character in map`  | any character other than the five above      |
| `Invalid map format`            | rows of different lengths                    |
| `Open map not allowed`          | the border is not entirely walls             |
| `No spawn point`                | no `P`                                       |
| `Map is not a rectangle`        | as many rows as columns                      |
| `Only one exit need`            | other than exactly one `E`                   |
| `Need at least one collectible` | no `C`                                       |

Example:

```
1111111111
1P0000C001
1011110001
1C000000E1
1111111111
```

## Using it as a library

The level loader and the game rules work without a window:

```python
from pixelfall.mapfile import load_map, MapError
from pixelfall.game import Game, Key

game = Game.from_map(load_map("level.ber"))
game.handle_key(Key.RIGHT)
game.tick()
print(game.x, game.y, game.collected, game.running, game.won)
```

- `pixelfall.mapfile`: `load_map(path)` and `parse_map(text)` return a
  `GameMap` (with `tile_at(x, y)`, `set_tile(x, y, tile)`, `width`,
  `height` and `collectibles`) or raise `MapError`; `check_extension(path)`
  checks the file name alone. Cells are `Tile` values.
- `pixelfall.game`: `Game.from_map(game_map)` starts a game on a copy of the
  map. `handle_key(key)` takes a `Key` (or its integer code), `tick()`
  advances one frame (gravity applies every `gravity_interval` ticks, 20000
  by default), `jump()` and `resize(height, width)` are also available.
  Player coordinates `x` and `y` are in pixels; `moves` counts key presses.
- `pixelfall.render`: `load_textures(texture_dir)` loads the images listed
  above, and `Renderer(game, textures)` offers `draw(surface)` and
  `window_size()`.
- `pixelfall.linereader`: `LineReader(stream, buffer_size)` with
  `next_line()`, plus `iter_lines(stream, buffer_size)` and
  `split_first_line(text)`.

The package also carries small helper modules: `pixelfall.charclass`
(ASCII classification and case conversion), `pixelfall.memory` (byte-buffer
fill, copy, move, search and compare), `pixelfall.textops` (`atoi`, `itoa`,
`split`, `strtrim`, `substr`, `strjoin`, `strnstr`, `strlcat`, `strlcpy`),
`pixelfall.output` (writing characters, strings and numbers to a stream) and
`pixelfall.printf` (`format_string` and `printf` with `%c %s %p %d %i %u %x
%X %%`).

## What it does not do

The move counter is kept in `Game.moves` but is not shown on screen, and
there is no score, level selection or saved progress. Textures are always
read from `./texture`; there is no option to point elsewhere.

## Tests

```
pip install .[test]
pytest
```