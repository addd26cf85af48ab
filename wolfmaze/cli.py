"""Command line entry point: load a map and play it."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Optional

from wolfmaze.game import Game
from wolfmaze.mapfile import MapError, check_file_extension, load_map
from wolfmaze.output import put_str
from wolfmaze.render import Renderer


def _error(message: str) -> int:
    put_str(f"\033[1;31mError: {message}\033[0m\n", sys.stderr)
    return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play the map named by the single argument; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        return _error("Invalid number of arguments")
    path = args[0]
    try:
        check_file_extension(path)
        game_map = load_map(path)
    except MapError as exc:
        return _error(str(exc))
    put_str("\033[1;36mGame Launched Successfully\033[0m\n", sys.stdout)
    try:
        Renderer(Game(game_map)).run()
    except (RuntimeError, OSError) as exc:
        return _error(str(exc))
    return 0


if __name__ == "__main__":
    sys.exit(main())