import math

import pytest

from cubcast.player import PlayerData, retrieve_player, starting_direction


def _player(tile="E"):
    dir_x, dir_y, plane_x, plane_y = starting_direction(tile)
    return PlayerData(2.5, 3.5, dir_x, dir_y, plane_x, plane_y)


def test_starting_directions_match_source():
    assert starting_direction("N") == (0.0, -1.0, 0.66, 0.0)
    assert starting_direction("E") == (1.0, 0.0, 0.0, 0.66)
    assert starting_direction("S") == (0.0, 1.0, -0.66, 0.0)
    assert starting_direction("W") == (-1.0, 0.0, 0.0, -0.66)


@pytest.mark.parametrize("tile", ["0", "1", " ", "X"])
def test_starting_direction_rejects_non_player(tile):
    with pytest.raises(ValueError):
        starting_direction(tile)


def test_retrieve_player_centres_on_tile():
    player = retrieve_player(["111", "1N1", "111"])
    assert (player.x, player.y) == (1.5, 1.5)
    assert (player.dir_x, player.dir_y) == (0.0, -1.0)


def test_retrieve_player_first_in_row_major_order():
    player = retrieve_player(["1111", "10W1", "1E01", "1111"])
    assert (player.x, player.y) == (2.5, 1.5)
    assert player.dir_x == -1.0


def test_retrieve_player_missing_returns_none():
    assert retrieve_player(["111", "101", "111"]) is None
    assert retrieve_player(None) is None


def test_rotation_keeps_lengths():
    player = _player("N")
    player.rotate(0.7)
    assert math.hypot(player.dir_x, player.dir_y) == pytest.approx(1.0)
    assert math.hypot(player.plane_x, player.plane_y) == pytest.approx(0.66)


def test_rotation_inverse_restores_state():
    player = _player("W")
    player.rotate(0.05)
    player.rotate(-0.05)
    expected = _player("W")
    assert player.dir_x == pytest.approx(expected.dir_x)
    assert player.dir_y == pytest.approx(expected.dir_y)
    assert player.plane_x == pytest.approx(expected.plane_x)
    assert player.plane_y == pytest.approx(expected.plane_y)


def test_quarter_turn_from_east_faces_south():
    player = _player("E")
    player.rotate(math.pi / 2)
    south = starting_direction("S")
    assert player.dir_x == pytest.approx(south[0], abs=1e-12)
    assert player.dir_y == pytest.approx(south[1])
    assert player.plane_x == pytest.approx(south[2])
    assert player.plane_y == pytest.approx(south[3], abs=1e-12)


def test_rotation_keeps_plane_perpendicular():
    player = _player("S")
    player.rotate(1.3)
    dot = player.dir_x * player.plane_x + player.dir_y * player.plane_y
    assert dot == pytest.approx(0.0, abs=1e-12)


def test_move_forward_follows_direction():
    player = _player("E")
    player.move(0.1)
    assert player.x == pytest.approx(2.6)
    assert player.y == pytest.approx(3.5)


def test_move_forward_and_back_returns():
    player = _player("N")
    player.rotate(0.4)
    player.move(0.1)
    player.move(-0.1)
    assert player.x == pytest.approx(2.5)
    assert player.y == pytest.approx(3.5)


def test_strafe_is_perpendicular_to_direction():
    player = _player("N")
    player.rotate(0.9)
    start_x, start_y = player.x, player.y
    player.move(0.0, 0.1)
    dx, dy = player.x - start_x, player.y - start_y
    assert dx * player.dir_x + dy * player.dir_y == pytest.approx(0.0, abs=1e-12)
    assert math.hypot(dx, dy) == pytest.approx(0.1)


def test_strafe_right_moves_towards_plane():
    player = _player("N")
    player.move(0.0, 0.1)
    assert player.x > 2.5
    assert player.y == pytest.approx(3.5)