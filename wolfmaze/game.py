"""Game state and player movement through a validated maze."""

from __future__ import annotations

from enum import Enum
from typing import Optional, TextIO, Union

from wolfmaze.mapfile import COLLECTIBLE, EXIT, FLOOR, PLAYER, WALL, GameMap, Position
from wolfmaze.output import cprintf

Direction = tuple[int, int]

UP: Direction = (0, -1)
DOWN: Direction = (0, 1)
LEFT: Direction = (-1, 0)
RIGHT: Direction = (1, 0)

ESCAPE_KEYS = frozenset({65307, "escape"})

_KEY_DIRECTIONS: dict[Union[int, str], Direction] = {
    119: UP,
    65362: UP,
    "w": UP,
    "up": UP,
    115: DOWN,
    65364: DOWN,
    "s": DOWN,
    "down": DOWN,
    97: LEFT,
    65361: LEFT,
    "a": LEFT,
    "left": LEFT,
    100: RIGHT,
    65363: RIGHT,
    "d": RIGHT,
    "right": RIGHT,
}

_COLLECT_FIRST = "\033[1;36mCollect all items before exiting!\033[0m\n"
_MOVES = "\033[1;36mMoves: %d\033[0m\n"
_WON = "\033[1;36mMoves: %d\nYou won, nice one!\033[0m\n"


class MoveResult(Enum):
    """What happened when the player tried to move."""

    BLOCKED = "blocked"
    MOVED = "moved"
    EXIT_LOCKED = "exit_locked"
    WON = "won"


def direction_for_key(key: Union[int, str]) -> Optional[Direction]:
    """Return the (dx, dy) step bound to *key*, or None.

    Keys are X11 key symbols or key names such as ``"w"`` or ``"up"``.
    """
    if isinstance(key, str):
        key = key.lower()
    return _KEY_DIRECTIONS.get(key)


class Game:
    """A maze being played: the grid, the player and the score."""

    def __init__(self, game_map: GameMap, stream: Optional[TextIO] = None) -> None:
        if game_map.player is None:
            raise ValueError("the map has no player")
        self.grid: list[list[str]] = [list(row) for row in game_map.rows]
        self.width = game_map.width
        self.height = game_map.height
        self.player_x, self.player_y = game_map.player
        self.exit: Optional[Position] = game_map.exit
        self.collectibles = game_map.collectibles
        self.moves = 0
        self.last_dx = 0
        self.last_dy = 1
        self.finished = False
        self.stream = stream

    @property
    def position(self) -> Position:
        """The player's (x, y) position."""
        return (self.player_x, self.player_y)

    @property
    def facing(self) -> Direction:
        """The direction of the last successful step."""
        return (self.last_dx, self.last_dy)

    def tile_at(self, x: int, y: int) -> str:
        """Return the current symbol at column *x*, row *y*."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"position ({x}, {y}) is outside the map")
        return self.grid[y][x]

    def move(self, dx: int, dy: int) -> MoveResult:
        """Try to move the player by (dx, dy) and report the outcome."""
        new_x, new_y = self.player_x + dx, self.player_y + dy
        target = self.tile_at(new_x, new_y)
        if target == WALL:
            return MoveResult.BLOCKED
        if target == EXIT:
            if self.collectibles == 0:
                cprintf(_WON, self.moves, stream=self.stream)
                self.finished = True
                return MoveResult.WON
            cprintf(_COLLECT_FIRST, stream=self.stream)
            self.player_x, self.player_y = new_x, new_y
            result = MoveResult.EXIT_LOCKED
        else:
            self._step(new_x, new_y)
            result = MoveResult.MOVED
        self.last_dx, self.last_dy = dx, dy
        return result

    def _step(self, new_x: int, new_y: int) -> None:
        self.moves += 1
        cprintf(_MOVES, self.moves, stream=self.stream)
        if self.grid[new_y][new_x] == COLLECTIBLE:
            self.collectibles -= 1
        if self.grid[self.player_y][self.player_x] != EXIT:
            self.grid[self.player_y][self.player_x] = FLOOR
        if self.grid[new_y][new_x] != EXIT:
            self.grid[new_y][new_x] = PLAYER
        self.player_x, self.player_y = new_x, new_y