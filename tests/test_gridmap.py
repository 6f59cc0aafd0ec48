import math

import pytest

from raycube.gridmap import find_player, start_angle, validate_map
from raycube.scene import SceneError

CLOSED = ["11111", "1N001", "11111"]


def test_find_player_position_and_replacement():
    x, y, orientation, rows = find_player(CLOSED)
    assert (x, y, orientation) == (1, 1, "N")
    assert rows[1][x] == "0"
    assert CLOSED[1][1] == "N"
    assert rows[0] == CLOSED[0] and rows[2] == CLOSED[2]


@pytest.mark.parametrize("letter", ["N", "S", "E", "W"])
def test_find_player_each_orientation(letter):
    grid = ["1111", "10" + letter + "1", "1111"]
    x, y, orientation, rows = find_player(grid)
    assert orientation == letter
    assert grid[y][x] == letter
    assert letter not in "".join(rows)


def test_find_player_none():
    with pytest.raises(SceneError, match="PLAYERS FAIL"):
        find_player(["111", "101", "111"])


def test_find_player_two():
    with pytest.raises(SceneError, match="PLAYERS FAIL"):
        find_player(["1111", "1NS1", "1111"])


def test_find_player_ignores_first_row_and_column():
    with pytest.raises(SceneError, match="PLAYERS FAIL"):
        find_player(["1N1", "N01", "111"])


def test_start_angles():
    assert start_angle("N") == pytest.approx(3 * (math.pi / 2))
    assert start_angle("S") == pytest.approx(math.pi / 2)
    assert start_angle("E") == 0
    assert start_angle("W") == pytest.approx(math.pi)


def test_start_angle_unknown():
    with pytest.raises(ValueError):
        start_angle("Q")


def test_validate_closed_map():
    _, _, _, rows = find_player(CLOSED)
    cells = validate_map(rows, len(rows[0]) + 1, False)
    assert sorted(cells) == sorted(
        (x, y) for y, row in enumerate(rows) for x, c in enumerate(row) if c == "0"
    )


def test_validate_invalid_character():
    with pytest.raises(SceneError, match="INVALID CHARACTERS"):
        validate_map(["111", "1x1", "111"], 4, False)


def test_validate_door_needs_bonus():
    rows = ["1111", "1021", "1111"]
    with pytest.raises(SceneError, match="INVALID CHARACTERS"):
        validate_map(rows, 5, False)
    assert (2, 1) in validate_map(rows, 5, True)


def test_validate_door_on_edge_is_open():
    with pytest.raises(SceneError, match="OPEN AREA"):
        validate_map(["1211", "1001", "1111"], 5, True)


def test_validate_space_next_to_floor():
    with pytest.raises(SceneError, match="OPEN AREA"):
        validate_map(["1111", "10 1", "1111"], 5, False)


def test_validate_floor_on_last_row():
    with pytest.raises(SceneError, match="OPEN AREA"):
        validate_map(["111", "101", "101"], 4, False)


def test_validate_column_bound():
    with pytest.raises(SceneError, match="OPEN AREA"):
        validate_map(["111", "101", "111"], 1, False)


def test_validate_spaces_outside_walls_are_fine():
    rows = ["  111", "  101", "  111"]
    assert validate_map(rows, 6, False) == [(3, 1)]