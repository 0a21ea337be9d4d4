"""Drawing the game with pygame."""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, Union

import pygame

from pixelfall.game import TEXTURE_SIZE, Direction, Game
from pixelfall.mapfile import Tile

TEXTURE_FILES = {
    "wall": "wall/middle.xpm",
    "player_right": "player/player_idle_right.xpm",
    "player_left": "player/player_idle_left.xpm",
    "coin": "object/coins/coins_1.xpm",
    "coin_2": "object/coins/coins_2.xpm",
    "exit": "object/exit/exit.xpm",
    "fall_right": "player/player_fall_right.xpm",
    "fall_left": "player/player_fall_left.xpm",
    "exit_open": "object/exit/exit_open.xpm",
    "background": "background/back.xpm",
}


def load_textures(texture_dir: Union[str, Path]) -> dict[str, pygame.Surface]:
    """Load every game texture from ``texture_dir``."""
    base = Path(texture_dir)
    textures = {}
    for name, relative in TEXTURE_FILES.items():
        path = base / relative
        if not path.is_file():
            raise FileNotFoundError(f"missing texture {path}")
        textures[name] = pygame.image.load(str(path))
    return textures


class Renderer:
    """Draws a game's map and player onto a surface."""

    def __init__(self, game: Game, textures: Mapping[str, pygame.Surface]) -> None:
        missing = sorted(set(TEXTURE_FILES) - set(textures))
        if missing:
            raise ValueError(f"missing textures: {', '.join(missing)}")
        self.game = game
        self.textures = dict(textures)

    def window_size(self) -> tuple[int, int]:
        """The window size as ``(width, height)`` in pixels."""
        return self.game.window_width, self.game.window_height

    def _tile_texture(self, tile: Tile) -> pygame.Surface:
        if tile is Tile.WALL:
            return self.textures["wall"]
        if tile is Tile.COIN:
            return self.textures["coin"]
        if tile is Tile.EXIT:
            return self.textures["exit_open" if self.game.all_collected else "exit"]
        return self.textures["background"]

    def _player_texture(self) -> pygame.Surface:
        left = self.game.direction is Direction.LEFT
        if self.game.jumping:
            return self.textures["fall_left" if left else "fall_right"]
        return self.textures["player_left" if left else "player_right"]

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the whole scene onto ``surface``."""
        for y, row in enumerate(self.game.game_map.tiles):
            for x, tile in enumerate(row):
                surface.blit(self._tile_texture(tile), (x * TEXTURE_SIZE, y * TEXTURE_SIZE))
        surface.blit(self._player_texture(), (self.game.x, self.game.y))