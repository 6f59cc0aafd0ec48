import math

import pytest

from raycube.player import MOVE_SPEED, ROTATE_SPEED, Key, Player, spawn_player
from raycube.raycast import TILE_SIZE

ROOM = ["11111", "10001", "10001", "10001", "11111"]


def test_spawn_player_centers_in_tile():
    player = spawn_player(2, 3, 0.5)
    assert player.x == 2 * TILE_SIZE + TILE_SIZE // 2
    assert player.y == 3 * TILE_SIZE + TILE_SIZE // 2
    assert player.angle == 0.5
    assert (player.forward, player.left, player.right, player.turn) == (0, False, False, 0)


def test_rotate_right_and_left():
    player = Player(x=0, y=0, angle=1.0, turn=1)
    player.rotate()
    assert player.angle == pytest.approx(1.0 + ROTATE_SPEED)
    player.turn = -1
    player.rotate()
    assert player.angle == pytest.approx(1.0)


def test_rotate_wraps_angle():
    player = Player(x=0, y=0, angle=0.0, turn=-1)
    player.rotate()
    assert player.angle == pytest.approx(2 * math.pi - ROTATE_SPEED)
    player.angle = 2 * math.pi - ROTATE_SPEED / 2
    player.turn = 1
    player.rotate()
    assert 0 <= player.angle < 2 * math.pi


def test_press_and_release_keys():
    player = Player(x=0, y=0, angle=0.0)
    assert player.press(Key.W) is False
    assert player.forward == 1
    player.press(Key.S)
    assert player.forward == -1
    player.release(Key.W)
    assert player.forward == 0
    player.press(Key.A)
    player.press(Key.D)
    assert player.left and player.right
    player.release(Key.A)
    player.release(Key.D)
    assert not player.left and not player.right
    player.press(Key.LEFT)
    assert player.turn == -1
    player.press(Key.RIGHT)
    assert player.turn == 1
    player.release(Key.LEFT)
    assert player.turn == 0


def test_escape_requests_quit():
    player = Player(x=0, y=0, angle=0.0)
    assert player.press(Key.ESCAPE) is True


def test_step_forward_east():
    player = spawn_player(2, 2, 0.0)
    start_x, start_y = player.x, player.y
    player.press(Key.W)
    player.step(ROOM, 5)
    assert player.x == start_x + MOVE_SPEED
    assert player.y == start_y


def test_step_backward_reverses_forward():
    player = spawn_player(2, 2, 0.7)
    start = (player.x, player.y)
    player.press(Key.W)
    player.step(ROOM, 5)
    player.press(Key.S)
    player.step(ROOM, 5)
    assert (player.x, player.y) == start


def test_strafe_right_moves_perpendicular():
    player = spawn_player(2, 2, 0.0)
    start_x, start_y = player.x, player.y
    player.press(Key.D)
    player.step(ROOM, 5)
    assert player.x == start_x
    assert player.y == start_y + MOVE_SPEED


def test_collision_stops_at_wall():
    start_x = 4 * TILE_SIZE - 2
    blocked = Player(x=start_x, y=2 * TILE_SIZE + TILE_SIZE // 2, angle=0.0, forward=1)
    blocked.step(ROOM, 5, collide=True)
    assert blocked.x == start_x
    free = Player(x=start_x, y=2 * TILE_SIZE + TILE_SIZE // 2, angle=0.0, forward=1)
    free.step(ROOM, 5, collide=False)
    assert free.x == start_x + MOVE_SPEED


def test_map_bounds_limit_movement():
    edge = 5 * TILE_SIZE - 1
    player = Player(x=edge, y=TILE_SIZE, angle=0.0, forward=1)
    player.step(ROOM, 5)
    assert player.x == edge
    player = Player(x=1, y=TILE_SIZE, angle=math.pi, forward=1)
    player.step(ROOM, 5)
    assert player.x == 1