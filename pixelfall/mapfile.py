"""Loading and validating ``.ber`` map files."""

from __future__ import annotations

import io
import os
from collections import Counter
from dataclasses import dataclass
from enum import IntEnum

from pixelfall.linereader import iter_lines

MAP_EXTENSION = ".ber"
_READ_CHUNK = 4096


class MapError(Exception):
    """Raised when a map file is missing or malformed."""


class Tile(IntEnum):
    """Kinds of map cell."""

    WALL = 1
    PLAYER = 2
    COIN = 3
    EXIT = 4
    EMPTY = 5


_TILE_FOR_CHAR = {
    "1": Tile.WALL,
    "0": Tile.EMPTY,
    "P": Tile.PLAYER,
    "C": Tile.COIN,
    "E": Tile.EXIT,
}


@dataclass
class GameMap:
    """A validated grid of tiles, indexed as ``tiles[y][x]``."""

    tiles: list[list[Tile]]
    collectibles: int

    @property
    def width(self) -> int:
        return len(self.tiles[0]) if self.tiles else 0

    @property
    def height(self) -> int:
        return len(self.tiles)

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"position ({x}, {y}) is outside the map")

    def tile_at(self, x: int, y: int) -> Tile:
        """Return the tile in column ``x`` of row ``y``."""
        self._check(x, y)
        return self.tiles[y][x]

    def set_tile(self, x: int, y: int, tile: Tile) -> None:
        """Replace the tile in column ``x`` of row ``y``."""
        self._check(x, y)
        self.tiles[y][x] = Tile(tile)


def check_extension(path: str) -> None:
    """Raise MapError unless ``path`` names a ``.ber`` file."""
    path = os.fspath(path)
    if len(path) <= len(MAP_EXTENSION) or not path.endswith(MAP_EXTENSION):
        raise MapError("Map is not a .ber")


def _read_rows(text: str) -> tuple[list[str], int, Counter]:
    rows: list[str] = []
    width = 0
    counts: Counter = Counter()
    for line in iter_lines(io.StringIO(text), _READ_CHUNK):
        row = line[:-1] if line.endswith("\n") else line
        if any(ch not in _TILE_FOR_CHAR for ch in row):
            raise MapError("Not a valid character in map")
        counts.update(row)
        if width not in (0, len(row)):
            raise MapError("Invalid map format")
        width = len(row)
        rows.append(row)
    return rows, width, counts


def _check_walls(rows: list[str], width: int) -> None:
    last_row = len(rows) - 1
    for y, row in enumerate(rows):
        for x in range(width):
            cell = row[x] if x < len(row) else None
            on_border = y in (0, last_row) or x in (0, width - 1)
            if on_border and cell != "1":
                raise MapError("Open map not allowed")


def parse_map(text: str) -> GameMap:
    """Validate map text and build a GameMap from it."""
    rows, width, counts = _read_rows(text)
    height = len(rows)
    _check_walls(rows, width)
    if counts["P"] == 0:
        raise MapError("No spawn point")
    if width == height:
        raise MapError("Map is not a rectangle")
    if counts["E"] != 1:
        raise MapError("Only one exit need")
    if counts["C"] < 1:
        raise MapError("Need at least one collectible")
    tiles = [[_TILE_FOR_CHAR[ch] for ch in row] for row in rows]
    return GameMap(tiles=tiles, collectibles=counts["C"])


def load_map(path: str) -> GameMap:
    """Read, validate and parse the map file at ``path``."""
    check_extension(path)
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            text = handle.read()
    except OSError:
        raise MapError("No file") from None
    return parse_map(text)