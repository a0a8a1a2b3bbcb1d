"""Player position, facing and camera plane."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Optional

from cubcast.tiles import Tile, is_player

TURN_SPEED = 0.05
MOVE_SPEED = 0.1
PLANE_LENGTH = 0.66

_DIRECTIONS = {
    Tile.NORTH: (0.0, -1.0, PLANE_LENGTH, 0.0),
    Tile.EAST: (1.0, 0.0, 0.0, PLANE_LENGTH),
    Tile.SOUTH: (0.0, 1.0, -PLANE_LENGTH, 0.0),
    Tile.WEST: (-1.0, 0.0, 0.0, -PLANE_LENGTH),
}


@dataclass
class PlayerData:
    """Position in map units, facing direction and camera plane."""

    x: float
    y: float
    dir_x: float
    dir_y: float
    plane_x: float
    plane_y: float

    def rotate(self, angle: float) -> None:
        """Rotate the direction and the camera plane by ``angle`` radians."""
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        self.dir_x, self.dir_y = (
            self.dir_x * cos_a - self.dir_y * sin_a,
            self.dir_x * sin_a + self.dir_y * cos_a,
        )
        self.plane_x, self.plane_y = (
            self.plane_x * cos_a - self.plane_y * sin_a,
            self.plane_x * sin_a + self.plane_y * cos_a,
        )

    def move(self, forward: float, strafe: float = 0.0) -> None:
        """Move along the facing direction and sideways (positive strafe is to the right)."""
        self.x += self.dir_x * forward - self.dir_y * strafe
        self.y += self.dir_y * forward + self.dir_x * strafe


def starting_direction(tile: str) -> tuple[float, float, float, float]:
    """Return ``(dir_x, dir_y, plane_x, plane_y)`` for a player tile."""
    if not is_player(tile):
        raise ValueError(f"not a player tile: {tile!r}")
    return _DIRECTIONS[Tile(tile)]


def retrieve_player(grid: Iterable[str]) -> Optional[PlayerData]:
    """Create the player from the first player tile in row-major order, or return None."""
    if grid is None:
        return None
    for y, row in enumerate(grid):
        for x, tile in enumerate(row):
            if is_player(tile):
                dir_x, dir_y, plane_x, plane_y = starting_direction(tile)
                return PlayerData(x + 0.5, y + 0.5, dir_x, dir_y, plane_x, plane_y)
    return None