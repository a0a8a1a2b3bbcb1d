import pytest

from cubcast.level import Level, Textures
from cubcast.player import retrieve_player

GRID = ["1111", "10N1", "1111"]


def test_tile_at_inside_map():
    level = Level(GRID)
    assert level.tile_at(1, 1) == "0"
    assert level.tile_at(2, 1) == "N"
    assert level.tile_at(0, 0) == "1"


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (4, 1), (0, 3), (10, 10)])
def test_tile_at_outside_map_is_empty(x, y):
    assert Level(GRID).tile_at(x, y) == " "


def test_tile_at_short_row_is_empty_past_end():
    level = Level(["11111", "101", "11111"])
    assert level.tile_at(4, 1) == " "
    assert level.tile_at(4, 0) == "1"


def test_is_wall():
    level = Level(GRID)
    assert level.is_wall(0, 1) is True
    assert level.is_wall(1, 1) is False
    assert level.is_wall(2, 1) is False
    assert level.is_wall(-1, -1) is False


def test_textures_default_empty():
    textures = Textures()
    assert (textures.north, textures.floor, textures.ceiling) == ("", "", "")


def test_level_holds_player_and_textures():
    textures = Textures(north="./north.xpm", floor="220,100,0")
    level = Level(GRID, textures, retrieve_player(GRID))
    assert level.textures.north == "./north.xpm"
    assert level.textures.floor == "220,100,0"
    assert (level.player.x, level.player.y) == (2.5, 1.5)
    assert level.tile_at(int(level.player.x), int(level.player.y)) == "N"


def test_default_level_has_no_player():
    level = Level(GRID)
    assert level.player is None
    assert level.textures == Textures()