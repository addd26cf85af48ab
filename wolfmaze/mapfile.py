"""Loading and validating ``.ber`` maze maps."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from os import PathLike
from typing import Optional, Union

WALL = "1"
FLOOR = "0"
PLAYER = "P"
COLLECTIBLE = "C"
EXIT = "E"
SYMBOLS = frozenset(WALL + FLOOR + PLAYER + COLLECTIBLE + EXIT)

TILE_SIZE = 40
MAP_SUFFIX = ".ber"

Position = tuple[int, int]


class MapError(ValueError):
    """Raised when a map file cannot be read or does not describe a playable maze."""


@dataclass(frozen=True)
class GameMap:
    """A rectangular maze, one string per row."""

    rows: tuple[str, ...]
    player: Optional[Position]
    exit: Optional[Position]
    collectibles: int

    @property
    def width(self) -> int:
        """Number of tiles in each row."""
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        """Number of rows."""
        return len(self.rows)

    def tile(self, x: int, y: int) -> str:
        """Return the symbol at column *x*, row *y*."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"position ({x}, {y}) is outside the map")
        return self.rows[y][x]


def check_file_extension(filename: str) -> None:
    """Require a file name ending in ``.ber`` with a non-empty base name."""
    base_missing = len(filename) < 5 or filename[-5] == "/"
    if base_missing or not filename.endswith(MAP_SUFFIX):
        raise MapError("File (must be .ber with a name)")


def has_empty_lines(text: str) -> bool:
    """True when *text* holds two newlines in a row."""
    return "\n\n" in text


def read_map(path: Union[str, PathLike]) -> str:
    """Return the contents of a map file, one character per byte."""
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        raise MapError("Cannot open file") from exc
    return data.decode("latin-1")


def _split_rows(text: str) -> list[str]:
    if text.startswith("\n") or text.endswith("\n"):
        raise MapError("Empty line in map")
    rows = text.split("\n")
    width = len(rows[0])
    for row in rows:
        if len(row) != width:
            raise MapError("Empty line in map" if not row else "Uneven map lines")
    return rows


def _check_walls(rows: list[str]) -> None:
    width = len(rows[0])
    if width == 0:
        raise MapError("Invalid walls")
    if any(ch != WALL for ch in rows[0] + rows[-1]):
        raise MapError("Invalid walls")
    if any(row[0] != WALL or row[-1] != WALL for row in rows):
        raise MapError("Invalid walls")


def _count_elements(rows: list[str]) -> tuple[Optional[Position], Optional[Position], int]:
    player: Optional[Position] = None
    exit_pos: Optional[Position] = None
    collectibles = 0
    for y, row in enumerate(rows):
        for x, ch in enumerate(row):
            if ch not in SYMBOLS:
                raise MapError(f"Foreign character '{ch}' found")
            if ch == COLLECTIBLE:
                collectibles += 1
            elif ch == PLAYER:
                if player is not None:
                    raise MapError("Multiple players found")
                player = (x, y)
            elif ch == EXIT:
                if exit_pos is not None:
                    raise MapError("Multiple exits found")
                exit_pos = (x, y)
    return player, exit_pos, collectibles


def check_accessibility(game_map: GameMap) -> None:
    """Require every collectible and the exit to be reachable from the player."""
    if game_map.player is None:
        raise MapError("No player found")
    seen = {game_map.player}
    queue = deque([game_map.player])
    remaining = game_map.collectibles
    exit_found = False
    while queue:
        x, y = queue.popleft()
        tile = game_map.tile(x, y)
        if tile == COLLECTIBLE:
            remaining -= 1
        elif tile == EXIT:
            exit_found = True
        for nx, ny in ((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)):
            if (nx, ny) in seen:
                continue
            if not (0 <= nx < game_map.width and 0 <= ny < game_map.height):
                continue
            if game_map.tile(nx, ny) == WALL:
                continue
            seen.add((nx, ny))
            queue.append((nx, ny))
    if remaining > 0 or not exit_found:
        raise MapError("Unreachable items/exit")


def parse_map(text: str) -> GameMap:
    """Validate map text and return the maze it describes."""
    rows = _split_rows(text)
    _check_walls(rows)
    if all(ch == WALL for row in rows for ch in row):
        raise MapError("Map is all walls")
    player, exit_pos, collectibles = _count_elements(rows)
    if player is None:
        raise MapError("No player found")
    if collectibles < 1:
        raise MapError("No collectibles found")
    game_map = GameMap(
        rows=tuple(rows), player=player, exit=exit_pos, collectibles=collectibles
    )
    check_accessibility(game_map)
    return game_map


def load_map(path: Union[str, PathLike]) -> GameMap:
    """Read and validate the map stored at *path*."""
    return parse_map(read_map(path))