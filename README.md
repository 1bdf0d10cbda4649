# solong

A small tile-based puzzle game played in the terminal. The player walks
around a map and picks up collectibles. The exit can be entered only after
every collectible has been picked up.

## Installing

```
pip install .
```

## Playing

```
solong maps/level1.ber
```

The command takes exactly one argument: the path to a map file whose name
ends in `.ber`. It prints `Error` and exits with status 1 in these cases:
the argument count is wrong, the name does not end in `.ber`, or the file
is missing, empty, or fails the checks listed below.

After a map is accepted, the command prints it with the player shown as
`P`. Then it reads key presses from standard input, one character at a
time. Standard input is line-buffered, so type the keys and press Enter.

| Key   | Action      |
|-------|-------------|
| `w`   | move up     |
| `s`   | move down   |
| `a`   | move left   |
| `d`   | move right  |
| `Esc` | quit        |

Each step that succeeds prints `your move:N` and then the map again.
Walls (`1`) block movement. Stepping onto a collectible picks it up.
Stepping onto the exit (`E`) works only once every collectible has been
picked up, and it ends the game. The command also stops when its input
runs out. In every case where play starts, it exits with status 0.

## Map format

A map is a plain text file made of rows. End every row with a newline,
including the last one. A row may use only these characters:

| Char | Meaning      |
|------|--------------|
| `1`  | wall         |
| `0`  | empty floor  |
| `C`  | collectible  |
| `E`  | exit         |
| `P`  | player start |

`solong.validation.validate_map` is used by the command. It rejects a map
when any of the following is true:

- the file contains an empty line;
- a character other than the ones above is used;
- a row is not exactly as wide as the first line;
- the border is not made of walls;
- there is not exactly one `P` and exactly one `E`;
- there is no `C`.

`validate_map` does not check whether the collectibles and the exit can be
reached. That check is available separately as
`solong.validation.check_paths(grid)`, which uses `flood_fill`.

Example:

```
1111111
1P0C0E1
1111111
```

## Using it as a library

```python
from solong.mapfile import MapError, load_map, find_player
from solong.validation import validate_map, check_paths, count_collectibles
from solong.game import Game, Key

try:
    grid = validate_map("maps/level1.ber")
except MapError as exc:
    print("bad map:", exc)
else:
    print(find_player(grid), count_collectibles(grid), check_paths(grid))

    game = Game.from_file("maps/level1.ber")
    game.press(Key.D)          # True if the player moved
    print("\n".join(game.render()))
    print(game.moves, game.collected, game.total, game.finished, game.won)
```

- `solong.mapfile` provides `load_map`, `read_lines`, `count_map_lines`,
  `first_line_size`, `find_player`, `Position` and `MapError`.
- `solong.validation` provides the individual checks: `check_valid_chars`,
  `check_all_lines`, `check_walls`, `check_player_and_exit`,
  `has_collectible`, `count_collectibles`, `flood_fill` and `check_paths`.
- `solong.game` provides `Game` (with `from_file`, `press` and `render`)
  and the `Key` codes.
- `solong.cli` provides `main`, `check_extension` and `check_nonempty`.

The package also includes some general helpers:

- `solong.textutils`: string and byte functions such as `split`,
  `strtrim`, `substr`, `strnstr`, `strncmp`, `strchr`, `strrchr`,
  `strmapi`, `memchr` and `memcmp`.
- `solong.chars`: character tests (`is_alpha`, `is_digit`, ...),
  `to_lower`/`to_upper`, `atoi`, `itoa`, and the stream writers
  `put_char`, `put_str`, `put_endl` and `put_nbr`.
- `solong.linkedlist`: a `LinkedList` made of `Node` objects.

## What it does not do

There is no graphical window, no textures and no real-time keyboard
handling. The game is shown as text. Keys are read from standard input as
line-buffered characters.

## Running the tests

```
pip install .[test]
pytest
```