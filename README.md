# solong

A small tile-based puzzle game. You walk a player around a walled map,
pick up every coin, and then step onto the exit. The bonus mode adds
patrolling enemies and an animated coin: touch an enemy, or let one walk
into you, and you lose.

## Installing

```
pip install .
```

This pulls in `pygame`, which draws the game window.

## Playing

```
solong path/to/level.ber
solong --bonus path/to/level.ber
```

The map file name must contain `.ber`. Controls: `W` up, `A` left,
`S` down, `D` right, `Esc` quits. Closing the window quits too.

In the standard mode the move count is printed to standard output after
every movement key. In the bonus mode it is drawn in the top-left corner
of the window as `Count_Mouve : <n>`. Reaching the exit shows a "win"
image in the middle of the window; in bonus mode, meeting an enemy shows
a "lose" image. After either, movement keys are ignored.

Exit codes and messages:

| Situation                              | Output                                   | Exit code |
|----------------------------------------|------------------------------------------|-----------|
| not exactly one map path given         | nothing                                  | 1         |
| name does not contain `.ber`           | `Name map invalid !!!`                   | 1         |
| file cannot be opened                  | `Check your .ber file !!!`               | 0         |
| map fails a check                      | `Error` / `you have error in your map`   | 1         |
| game closed normally                   | nothing                                  | 0         |

## Map format

A map is a rectangle of characters, one row per line, with no trailing
newline after the last row:

| Char | Meaning            |
|------|--------------------|
| `1`  | wall               |
| `0`  | empty floor        |
| `P`  | player start       |
| `C`  | coin               |
| `E`  | exit               |
| `M`  | enemy (bonus only) |

A valid map:

- uses only the characters above (`M` only in bonus mode);
- has rows of equal length and no newline after the last row;
- has walls along the whole first and last rows and both side columns;
- has exactly one `P` and exactly one `E`;
- has at least one `C`, every coin reachable from the player;
- has an exit reachable from the player;
- in bonus mode, has at least one `M`.

Example:

```
1111111
1P0C0E1
1111111
```

## Textures

Tiles are drawn 106 pixels square. Textures are looked up relative to
the current directory, in `textures/` (standard mode) or
`so_long_bonus/textures/` (bonus mode), as `<name>.XPM` files: `floor`,
`box`, `player`, `player_2`, `coin3`, `door`, `win`, `lose`, `boom`, `BG`
and the coin frames `1` to `6`. Any texture that cannot be loaded is
replaced by a plain coloured square, so the game is playable without
them.

## Using it as a library

```python
from solong.maploader import load_map
from solong.validate import validate_map
from solong.pathfind import check_path
from solong.game import Game, Direction, Status

lines, width, height = load_map("level.ber")
coins = validate_map(lines, width, height, with_enemies=False)
check_path(lines, coins)

game = Game.from_lines(lines, bonus=False)
game.move(Direction.RIGHT)
print(game.rows(), game.moves, game.status is Status.WON)
```

`solong.cli.prepare_game(path, bonus)` does the loading and checking in
one call and returns a ready `Game`. All map problems raise
`solong.maploader.MapError` (or its subclass `MapNameError` for a bad
file name).

Other pieces:

- `solong.maploader`: `check_map_name`, `iter_lines` (buffered line
  reader), `measure_map`, `load_map`.
- `solong.validate`: `check_tiles`, `check_walls`, `validate_map`.
- `solong.pathfind`: `flood_fill` marks reachable floor with `A`;
  `check_path` checks the exit and coins.
- `solong.game`: `Game.key_press(keycode)`, `Game.tick()` (coin
  animation and enemy movement every 20 ticks in bonus mode),
  `Game.step_enemies()`.
- `solong.render`: `Renderer(game).draw(surface)` onto a pygame surface;
  `window_size(width, height)`.
- `solong.fmt`: `format_message` and `printf` with `%s %c %d %i %u %x %X
  %p %%`, wrapping integers as 32-bit (or 64-bit for `%p`) C values.

## What it does not do

The package ships no texture images and no sample maps; supply your own.
There is no level editor, sound or saved progress.

## Running the tests

```
pip install .[test]
pytest
```