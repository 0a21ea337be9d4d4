"""Game state: player movement, gravity, coin collection and the exit."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Union

from pixelfall.mapfile import GameMap, Tile

TEXTURE_SIZE = 32
GRAVITY_INTERVAL = 20000


class Key(IntEnum):
    """Key codes the game reacts to (X11 keysyms)."""

    ESCAPE = 65307
    LEFT = 65361
    UP = 65362
    RIGHT = 65363
    DOWN = 65364


class Direction(IntEnum):
    """The way the player faces."""

    NONE = 0
    RIGHT = 4
    LEFT = 6


@dataclass
class Game:
    """A running game on a map. Player coordinates are in pixels."""

    game_map: GameMap
    x: int
    y: int
    exit_x: Optional[int] = None
    exit_y: Optional[int] = None
    old_x: int = 0
    old_y: int = 0
    window_width: int = 0
    window_height: int = 0
    direction: Direction = Direction.NONE
    moves: int = 0
    jumping: bool = False
    frame: int = 0
    collected: int = 0
    running: bool = True
    won: bool = False
    gravity_interval: int = GRAVITY_INTERVAL

    @classmethod
    def from_map(cls, game_map: GameMap) -> "Game":
        """Start a game on a private copy of ``game_map``."""
        tiles = [list(row) for row in game_map.tiles]
        board = GameMap(tiles=tiles, collectibles=game_map.collectibles)
        player: Optional[tuple[int, int]] = None
        exit_pos: tuple[Optional[int], Optional[int]] = (None, None)
        for y, row in enumerate(tiles):
            for x, tile in enumerate(row):
                if tile is Tile.PLAYER:
                    player = (x * TEXTURE_SIZE, y * TEXTURE_SIZE)
                elif tile is Tile.EXIT:
                    exit_pos = (x, y)
        if player is None:
            raise ValueError("map has no spawn point")
        px, py = player
        return cls(
            game_map=board,
            x=px,
            y=py,
            exit_x=exit_pos[0],
            exit_y=exit_pos[1],
            old_x=px,
            old_y=py,
            window_width=board.width * TEXTURE_SIZE,
            window_height=board.height * TEXTURE_SIZE,
        )

    @property
    def all_collected(self) -> bool:
        """True once every coin on the map has been picked up."""
        return self.collected == self.game_map.collectibles

    def _tile_at_pixel(self, x: int, y: int) -> Tile:
        return self.game_map.tile_at(x // TEXTURE_SIZE, y // TEXTURE_SIZE)

    def handle_key(self, key: Union[Key, int]) -> None:
        """React to a key press."""
        if not self.running:
            return
        self.old_x, self.old_y = self.x, self.y
        self.moves += 1
        if key == Key.ESCAPE:
            self.running = False
            return
        if key == Key.UP:
            self.jump()
        elif key == Key.DOWN:
            self.jumping = False
        elif key == Key.RIGHT:
            self.direction = Direction.RIGHT
            self.x += TEXTURE_SIZE
        elif key == Key.LEFT:
            self.direction = Direction.LEFT
            self.x -= TEXTURE_SIZE
        self._settle()

    def jump(self) -> None:
        """Move up one tile unless already in the air."""
        if not self.jumping:
            self.jumping = True
            self.frame = 0
            self.y -= TEXTURE_SIZE

    def tick(self) -> None:
        """Advance one frame: exit check, gravity and coin pickup."""
        if not self.running:
            return
        self.frame += 1
        here = self._tile_at_pixel(self.x, self.y)
        if here is not Tile.WALL:
            self.old_x, self.old_y = self.x, self.y
        if here is Tile.EXIT and self.all_collected:
            self.won = True
            self.running = False
            return
        if self.frame == self.gravity_interval:
            self.frame = 0
            below = self.game_map.tile_at(
                self.x // TEXTURE_SIZE, self.y // TEXTURE_SIZE + 1
            )
            if below is not Tile.WALL:
                self.jumping = True
                self.y += TEXTURE_SIZE
            else:
                self.jumping = False
        self._settle()

    def resize(self, height: int, width: int) -> None:
        """Record a new window size."""
        self.window_width = width
        self.window_height = height

    def _settle(self) -> None:
        if self._tile_at_pixel(self.x, self.y) is Tile.WALL:
            self.x, self.y = self.old_x, self.old_y
        tx, ty = self.old_x // TEXTURE_SIZE, self.old_y // TEXTURE_SIZE
        if self.game_map.tile_at(tx, ty) is Tile.COIN:
            self.game_map.set_tile(tx, ty, Tile.EMPTY)
            self.collected += 1