# wolfmaze

A small tile-based maze game. You walk the player through a walled maze,
pick up every collectible, and then step onto the exit to win. Each
step is counted and the count is printed to the terminal.

## Installing

```
pip install .
```

The game window is drawn with pygame.

## Playing

```
wolfmaze path/to/level.ber
```

The command takes exactly one argument: a map file whose name ends in
`.ber` and has a name before the extension. On any error a red
`Error: ...` message is written to standard error and the command exits
with status 1.

Controls:

| Key               | Action      |
|-------------------|-------------|
| `W` / Up arrow    | move up     |
| `S` / Down arrow  | move down   |
| `A` / Left arrow  | move left   |
| `D` / Right arrow | move right  |
| `Esc`             | quit        |

Closing the window also ends the game.

The exit stays closed until every collectible has been picked up. If
you walk onto it too early you are told to collect everything first;
stepping onto a closed exit is not counted as a move. Once all items
are collected, stepping onto the exit prints the move count and a
winning message, and the game ends.

### Textures

Textures are loaded from `./textures/`, relative to the directory you
start the game from. These files must all be present:

```
floor.xpm  wall.xpm  collectible.xpm  exit.xpm  exit_open.xpm
player_looking_direct.xpm  player_looking_left.xpm
player_looking_right.xpm   player_looking_back.xpm
in_top_of_exit.xpm
```

Each tile is 40 by 40 pixels. No textures ship with the package.

## Map format

A map is a rectangle of these characters, one row per line:

| Char | Meaning      |
|------|--------------|
| `1`  | wall         |
| `0`  | floor        |
| `P`  | player start |
| `C`  | collectible  |
| `E`  | exit         |

Example:

```
1111111
1P0C0E1
1111111
```

A map is rejected when:

- the file cannot be opened;
- it starts with an empty line, contains an empty line, or ends with a newline;
- its rows are not all the same length;
- it is not fully enclosed by walls, or it is made of walls only;
- it holds a character outside `01PCE`;
- it has no player, more than one player, more than one exit, or no collectible;
- some collectible or the exit cannot be reached from the player's start.

## Using the library

The map loader and game rules can be used without opening a window:

```python
from wolfmaze.mapfile import parse_map
from wolfmaze.game import Game, MoveResult

game_map = parse_map("1111111\n1P0C0E1\n1111111")
game = Game(game_map)
assert game.move(1, 0) is MoveResult.MOVED
print(game.position, game.moves, game.collectibles)
```

- `wolfmaze.mapfile`: `read_map`, `parse_map`, `load_map`,
  `check_file_extension` and `check_accessibility`; `GameMap` holds the
  rows, player and exit positions and the collectible count. Every
  invalid map raises `MapError`.
- `wolfmaze.game`: `Game.move(dx, dy)` returns a `MoveResult`
  (`BLOCKED`, `MOVED`, `EXIT_LOCKED` or `WON`); `direction_for_key` maps
  X11 key symbols or key names such as `"w"` or `"up"` to a step.
- `wolfmaze.render`: `Renderer` lists the texture layers to draw
  (`layers()`), loads textures, draws onto a pygame surface and runs the
  window.
- `wolfmaze.cli`: `main(argv=None)`, the `wolfmaze` command.

Small helper modules come with it: `wolfmaze.chars` (character tests,
`atoi`, `itoa`), `wolfmaze.memory` (byte-buffer operations),
`wolfmaze.textops` (string operations with C-library semantics),
`wolfmaze.linked` (a singly linked list) and `wolfmaze.output`
(writing to streams and `cformat`/`cprintf` with the conversions
`c d i s u x X p %`).

## Running the tests

```
pip install ".[test]"
pytest
```