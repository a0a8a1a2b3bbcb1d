import math

import pytest

from cubcast.image import Image
from cubcast.level import Level
from cubcast.player import PlayerData, retrieve_player
from cubcast.raycast import (
    FAR,
    HORIZONTAL_WALL_COLOR,
    MINIMAP_RAY_COLOR,
    VERTICAL_WALL_COLOR,
    cast_ray,
    calculate_delta,
    calculate_raydir,
    draw_wall,
    raycast_dda,
)

ROOM = [
    "11111",
    "10001",
    "10N01",
    "10001",
    "11111",
]


def make_level(grid=ROOM):
    level = Level(grid=list(grid))
    level.player = retrieve_player(level.grid)
    return level


def column(img, x):
    return [y for y in range(img.height) if img.get_pixel(x, y) != 0]


def test_raydir_center_is_direction():
    player = make_level().player
    assert calculate_raydir(player, 50, 100) == (player.dir_x, player.dir_y)


def test_raydir_edges_add_plane():
    player = make_level().player
    left = calculate_raydir(player, 0, 100)
    assert left == pytest.approx((player.dir_x - player.plane_x, player.dir_y - player.plane_y))


def test_delta_zero_component_is_far():
    assert calculate_delta((0.0, -1.0)) == (FAR, 1.0)
    assert calculate_delta((-0.5, 0.25)) == pytest.approx((2.0, 4.0))


def test_center_ray_hits_wall_consistently():
    level = make_level()
    player = level.player
    hit = cast_ray(level, player, 50, 100)
    assert level.is_wall(hit.map_x, hit.map_y)
    assert hit.side == 1
    assert hit.map_x == int(player.x)
    assert hit.intersection[1] == pytest.approx(hit.map_y + 1)
    assert hit.intersection == pytest.approx(
        (player.x + hit.raydir[0] * hit.perp_dist, player.y + hit.raydir[1] * hit.perp_dist)
    )


def test_symmetric_room_gives_equal_distances():
    level = make_level()
    north = cast_ray(level, level.player, 50, 100)
    turned = PlayerData(**vars(level.player))
    turned.rotate(math.pi)
    south = cast_ray(level, turned, 50, 100)
    assert north.perp_dist == pytest.approx(south.perp_dist)
    assert north.map_y + south.map_y == len(ROOM) - 1


def test_side_zero_hit_when_facing_east():
    level = make_level()
    player = PlayerData(2.5, 2.5, 1.0, 0.0, 0.0, 0.66)
    hit = cast_ray(level, player, 50, 100)
    assert hit.side == 0
    assert level.is_wall(hit.map_x, hit.map_y)
    assert hit.intersection[0] == pytest.approx(hit.map_x)


def test_open_map_raises():
    level = make_level(["0N0"])
    with pytest.raises(ValueError):
        cast_ray(level, level.player, 1, 2)


def test_wall_at_unit_distance_fills_column():
    img = Image(3, 1080)
    draw_wall(img, 1.0, 0, 1)
    assert column(img, 1) == list(range(1080))
    assert img.get_pixel(1, 0) == VERTICAL_WALL_COLOR


def test_farther_wall_is_shorter_and_centered():
    near = Image(1, 1080)
    far = Image(1, 1080)
    draw_wall(near, 2.0, 1, 0)
    draw_wall(far, 4.0, 1, 0)
    near_rows = column(near, 0)
    far_rows = column(far, 0)
    assert len(far_rows) < len(near_rows)
    assert set(far_rows) < set(near_rows)
    assert near_rows[0] + near_rows[-1] == 1080
    assert near.get_pixel(0, 540) == HORIZONTAL_WALL_COLOR


def test_raycast_dda_draws_every_column():
    level = make_level()
    minimap = Image(100, 80)
    frame = Image(100, 1080)
    hits = raycast_dda(level, minimap, frame)
    assert len(hits) == 100
    assert all(column(frame, x) for x in range(frame.width))
    assert MINIMAP_RAY_COLOR in minimap.pixels
    assert level.player.x == 2.5 and level.player.y == 2.5


def test_raycast_dda_requires_player():
    level = Level(grid=list(ROOM))
    with pytest.raises(ValueError):
        raycast_dda(level, Image(10, 10), Image(10, 1080))