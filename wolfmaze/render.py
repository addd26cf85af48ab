"""Drawing a game onto a pygame window."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Union

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from wolfmaze.game import ESCAPE_KEYS, Game, MoveResult, direction_for_key  # noqa: E402
from wolfmaze.mapfile import COLLECTIBLE, EXIT, TILE_SIZE, WALL  # noqa: E402

TEXTURE_FILES = {
    "floor": "floor.xpm",
    "wall": "wall.xpm",
    "collectible": "collectible.xpm",
    "exit": "exit.xpm",
    "player_looking_direct": "player_looking_direct.xpm",
    "player_looking_left": "player_looking_left.xpm",
    "player_looking_right": "player_looking_right.xpm",
    "player_looking_back": "player_looking_back.xpm",
    "in_top_of_exit": "in_top_of_exit.xpm",
    "exit_open": "exit_open.xpm",
}

_FACING_TEXTURES = {
    (1, 0): "player_looking_right",
    (-1, 0): "player_looking_left",
    (0, 1): "player_looking_direct",
    (0, -1): "player_looking_back",
}

Layer = tuple[str, tuple[int, int]]


class Renderer:
    """Draws a :class:`Game` tile by tile and runs its window."""

    def __init__(self, game: Game, texture_dir: Union[str, os.PathLike] = "textures") -> None:
        self.game = game
        self.texture_dir = Path(texture_dir)
        self.textures: dict[str, pygame.Surface] = {}

    @property
    def size(self) -> tuple[int, int]:
        """Window size in pixels."""
        return (self.game.width * TILE_SIZE, self.game.height * TILE_SIZE)

    def player_texture(self) -> Optional[str]:
        """Texture for the player, or None while standing on a locked exit."""
        game = self.game
        if game.position == game.exit and game.collectibles > 0:
            return None
        if game.last_dx in (1, -1):
            return _FACING_TEXTURES[(game.last_dx, 0)]
        return _FACING_TEXTURES.get((0, game.last_dy), "player_looking_direct")

    def _exit_layers(self, x: int, y: int) -> list[str]:
        game = self.game
        locked = game.collectibles > 0
        names = ["exit" if locked else "exit_open"]
        if game.position == (x, y) and locked:
            names.append("in_top_of_exit")
        return names

    def layers(self) -> list[Layer]:
        """Texture names and pixel positions to draw, bottom layer first."""
        game = self.game
        drawn: list[Layer] = []
        for y, row in enumerate(game.grid):
            for x, tile in enumerate(row):
                pos = (x * TILE_SIZE, y * TILE_SIZE)
                drawn.append(("floor", pos))
                if tile == WALL:
                    drawn.append(("wall", pos))
                elif tile == COLLECTIBLE:
                    drawn.append(("collectible", pos))
                elif tile == EXIT:
                    drawn.extend((name, pos) for name in self._exit_layers(x, y))
                if (x, y) == game.position:
                    texture = self.player_texture()
                    if texture is not None:
                        drawn.append((texture, pos))
        return drawn

    def load_textures(self) -> dict[str, pygame.Surface]:
        """Load every texture image from the texture directory."""
        converting = pygame.display.get_init() and pygame.display.get_surface() is not None
        loaded = {}
        for name, filename in TEXTURE_FILES.items():
            path = self.texture_dir / filename
            if not path.is_file():
                raise FileNotFoundError(f"Missing texture file: {path}")
            image = pygame.image.load(str(path))
            loaded[name] = image.convert_alpha() if converting else image
        self.textures = loaded
        return loaded

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the whole map onto *surface*."""
        for name, pos in self.layers():
            texture = self.textures.get(name)
            if texture is None:
                raise RuntimeError(f"Missing texture: {name}")
            surface.blit(texture, pos)

    def _handle_key(self, key: Union[int, str]) -> bool:
        """Apply a key press; return False when the game should stop."""
        if isinstance(key, str):
            key = key.lower()
        if key in ESCAPE_KEYS:
            return False
        direction = direction_for_key(key)
        if direction is not None and self.game.move(*direction) is MoveResult.WON:
            return False
        return True

    def run(self) -> None:
        """Open the window and play until it is closed or the game is won."""
        pygame.init()
        try:
            try:
                screen = pygame.display.set_mode(self.size)
            except pygame.error as exc:
                raise RuntimeError("Window creation failed") from exc
            pygame.display.set_caption("wolfmaze")
            self.load_textures()
            clock = pygame.time.Clock()
            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.KEYDOWN:
                        running = self._handle_key(pygame.key.name(event.key))
                    if not running:
                        break
                self.draw(screen)
                pygame.display.flip()
                clock.tick(60)
        finally:
            pygame.quit()