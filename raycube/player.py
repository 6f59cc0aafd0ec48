"""Player state, key handling and movement."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass

from raycube.raycast import TILE_SIZE

MOVE_SPEED = 2
ROTATE_SPEED = 0.05


class Key(enum.Enum):
    """Keys the game reacts to."""

    W = "w"
    A = "a"
    S = "s"
    D = "d"
    LEFT = "left"
    RIGHT = "right"
    ESCAPE = "escape"


def _round(value: float) -> int:
    """Round half away from zero."""
    magnitude = math.floor(abs(value) + 0.5)
    return magnitude if value >= 0 else -magnitude


def _cell(value: int) -> int:
    """Tile index of a pixel coordinate, truncating toward zero."""
    return int(value / TILE_SIZE)


def _is_wall(rows: list[str], y: int, x: int) -> bool:
    row_index = _cell(y)
    col_index = _cell(x)
    if not 0 <= row_index < len(rows):
        return False
    row = rows[row_index]
    return 0 <= col_index < len(row) and row[col_index] == "1"


@dataclass
class Player:
    """Position in pixels, view angle in radians and the keys held down."""

    x: int
    y: int
    angle: float
    forward: int = 0
    left: bool = False
    right: bool = False
    turn: int = 0

    def rotate(self) -> None:
        """Turn by one step in the held direction, keeping the angle in range."""
        if self.turn == 1:
            self.angle += ROTATE_SPEED
            if self.angle > 2 * math.pi:
                self.angle -= 2 * math.pi
        elif self.turn == -1:
            self.angle -= ROTATE_SPEED
            if self.angle < 0:
                self.angle += 2 * math.pi

    def press(self, key: Key) -> bool:
        """Register a key press; return True when it asks to quit."""
        if key is Key.A:
            self.left = True
        elif key is Key.D:
            self.right = True
        elif key is Key.S:
            self.forward = -1
        elif key is Key.W:
            self.forward = 1
        elif key is Key.LEFT:
            self.turn = -1
        elif key is Key.RIGHT:
            self.turn = 1
        elif key is Key.ESCAPE:
            return True
        return False

    def release(self, key: Key) -> None:
        """Register a key release."""
        if key is Key.D:
            self.right = False
        elif key is Key.A:
            self.left = False
        elif key in (Key.S, Key.W):
            self.forward = 0
        elif key in (Key.LEFT, Key.RIGHT):
            self.turn = 0

    def step(self, rows: list[str], columns: int, collide: bool = False) -> None:
        """Advance one frame: rotate, then move within the map bounds.

        With ``collide`` the player also stops at wall cells.
        """
        self.rotate()
        move_x = 0.0
        move_y = 0.0
        sin_a = math.sin(self.angle)
        cos_a = math.cos(self.angle)
        if self.right:
            move_x += -sin_a * MOVE_SPEED
            move_y += cos_a * MOVE_SPEED
        if self.left:
            move_x += sin_a * MOVE_SPEED
            move_y += -cos_a * MOVE_SPEED
        if self.forward:
            move_x += cos_a * MOVE_SPEED * self.forward
            move_y += sin_a * MOVE_SPEED * self.forward
        new_x = _round(self.x + move_x)
        new_y = _round(self.y + move_y)
        if 0 <= new_x <= columns * TILE_SIZE and not (
            collide
            and (_is_wall(rows, self.y, new_x) or _is_wall(rows, self.y, new_x - 1))
        ):
            self.x = new_x
        if 0 <= new_y <= len(rows) * TILE_SIZE and not (
            collide
            and (_is_wall(rows, new_y, self.x) or _is_wall(rows, new_y - 1, self.x))
        ):
            self.y = new_y


def spawn_player(tile_x: int, tile_y: int, angle: float) -> Player:
    """Place a player at the centre of the given tile."""
    return Player(
        x=tile_x * TILE_SIZE + TILE_SIZE // 2,
        y=tile_y * TILE_SIZE + TILE_SIZE // 2,
        angle=angle,
    )