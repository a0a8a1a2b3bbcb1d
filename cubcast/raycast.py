"""Grid ray casting (DDA) for the wall view and the minimap rays."""

from __future__ import annotations

from dataclasses import dataclass, replace

from cubcast.image import RECT_SIZE, Image, draw_line, draw_vertical
from cubcast.level import Level
from cubcast.player import PlayerData

EPSILON = 1e-10
FAR = 1e30
TOTAL_RAYS = 1920
PERCENTAGE_RAYS = 10
IMG_HEIGHT = 1080.0
IMG_WIDTH = 1920.0

VERTICAL_WALL_COLOR = 0xFF00FFFF
HORIZONTAL_WALL_COLOR = 0xFFFF00FF
MINIMAP_RAY_COLOR = 0xFFD6FFCF

Vector = tuple[float, float]


@dataclass(frozen=True)
class RayHit:
    """Where one ray met a wall.

    ``side`` is 0 when a vertical grid line (x boundary) was crossed last and 1
    for a horizontal one.
    """

    map_x: int
    map_y: int
    side: int
    perp_dist: float
    raydir: Vector
    intersection: Vector


def calculate_raydir(player: PlayerData, x: int, width: int) -> Vector:
    """Return the direction of the ray for screen column ``x`` of ``width`` columns."""
    camera_x = 2.0 * x / float(width) - 1.0
    return (
        player.dir_x + player.plane_x * camera_x,
        player.dir_y + player.plane_y * camera_x,
    )


def calculate_delta(raydir: Vector) -> Vector:
    """Return the ray length needed to cross one grid cell along x and along y."""
    dx, dy = raydir
    delta_x = FAR if abs(dx) < EPSILON else abs(1 / dx)
    delta_y = FAR if abs(dy) < EPSILON else abs(1 / dy)
    return delta_x, delta_y


def cast_ray(level: Level, player: PlayerData, x: int, width: int) -> RayHit:
    """Step a ray through the grid until it enters a wall tile.

    Raises ValueError if the ray leaves the map without hitting a wall.
    """
    raydir = calculate_raydir(player, x, width)
    delta_x, delta_y = calculate_delta(raydir)
    map_x, map_y = int(player.x), int(player.y)
    if raydir[0] < 0:
        step_x = -1
        side_x = (player.x - map_x) * delta_x
    else:
        step_x = 1
        side_x = (map_x + 1.0 - player.x) * delta_x
    if raydir[1] < 0:
        step_y = -1
        side_y = (player.y - map_y) * delta_y
    else:
        step_y = 1
        side_y = (map_y + 1.0 - player.y) * delta_y

    rows = len(level.grid)
    columns = max((len(row) for row in level.grid), default=0)
    side = -1
    while True:
        if side_x < side_y:
            side_x += delta_x
            map_x += step_x
            side = 0
        else:
            side_y += delta_y
            map_y += step_y
            side = 1
        if not (0 <= map_y < rows and 0 <= map_x < columns):
            raise ValueError(f"ray for column {x} left the map at ({map_x}, {map_y})")
        if level.is_wall(map_x, map_y):
            break

    if side == 0:
        perp = (map_x - player.x + (1 - step_x) // 2) / raydir[0]
    else:
        perp = (map_y - player.y + (1 - step_y) // 2) / raydir[1]
    intersection = (player.x + raydir[0] * perp, player.y + raydir[1] * perp)
    return RayHit(map_x, map_y, side, perp, raydir, intersection)


def draw_wall(img: Image, perp_dist: float, side: int, x: int) -> None:
    """Draw the wall slice for column ``x`` at perpendicular distance ``perp_dist``."""
    if perp_dist > 0:
        line_height = int(IMG_HEIGHT / perp_dist)
        draw_start = int(-(line_height // 2) + IMG_HEIGHT / 2)
        draw_end = int(line_height // 2 + IMG_HEIGHT / 2)
    else:
        draw_start, draw_end = 0, int(IMG_HEIGHT) - 1
    draw_start = max(draw_start, 0)
    if draw_end >= IMG_HEIGHT:
        draw_end = int(IMG_HEIGHT) - 1
    color = VERTICAL_WALL_COLOR if side == 0 else HORIZONTAL_WALL_COLOR
    draw_vertical(img, x, draw_start, draw_end, color)


def raycast_dda(level: Level, minimap: Image, frame: Image) -> list[RayHit]:
    """Cast one ray per column, drawing walls into ``frame`` and some rays into ``minimap``."""
    if level.player is None:
        raise ValueError("level has no player")
    player = replace(level.player)
    width = minimap.width
    column_step = max(width // TOTAL_RAYS, 1)
    ray_every = 100 // PERCENTAGE_RAYS
    hits: list[RayHit] = []
    for x in range(0, width, column_step):
        hit = cast_ray(level, player, x, width)
        hits.append(hit)
        if x % ray_every == 0:
            start = (int(player.x * RECT_SIZE), int(player.y * RECT_SIZE))
            end = (
                int(hit.intersection[0] * RECT_SIZE),
                int(hit.intersection[1] * RECT_SIZE),
            )
            draw_line(minimap, start, end, MINIMAP_RAY_COLOR)
        draw_wall(frame, hit.perp_dist, hit.side, x)
    return hits