"""A parsed level: map grid, texture settings and player."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from cubcast.player import PlayerData
from cubcast.tiles import Tile


@dataclass
class Textures:
    """Texture paths for the four walls and the floor and ceiling settings."""

    north: str = ""
    east: str = ""
    south: str = ""
    west: str = ""
    floor: str = ""
    ceiling: str = ""


@dataclass
class Level:
    """The map rows, textures and player of one level."""

    grid: list[str]
    textures: Textures = field(default_factory=Textures)
    player: Optional[PlayerData] = None

    def tile_at(self, x: int, y: int) -> str:
        """Return the tile character at column ``x``, row ``y``; outside the map is empty."""
        if y < 0 or y >= len(self.grid):
            return Tile.EMPTY.value
        row = self.grid[y]
        if x < 0 or x >= len(row):
            return Tile.EMPTY.value
        return row[x]

    def is_wall(self, x: int, y: int) -> bool:
        """Return True if the tile at ``(x, y)`` is a wall."""
        return self.tile_at(x, y) == Tile.WALL