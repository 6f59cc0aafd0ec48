"""Casting rays through a tile grid and measuring what they hit."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, replace

TILE_SIZE = 32
SCREEN_WIDTH = 1024
SCREEN_HEIGHT = 768
FOV = 1.15192


class Side(enum.Enum):
    """Which face of a wall cell a ray struck."""

    NORTH = 0
    SOUTH = 1
    WEST = 2
    EAST = 3


@dataclass(frozen=True)
class Hit:
    """Where a ray stopped, how far it travelled and what it struck."""

    distance: float
    x: float
    y: float
    side: Side
    door: bool = False


def sign(n: float) -> int:
    """Return 1, -1 or 0 according to the sign of ``n``."""
    if n > 0:
        return 1
    if n < 0:
        return -1
    return 0


def _probe(rows: list[str], columns: int, x: float, y: float) -> tuple[bool, bool]:
    """Return ``(stop, door)`` for the cell containing the point ``(x, y)``."""
    if not (math.isfinite(x) and math.isfinite(y)):
        return True, False
    cell_x = math.floor(x / TILE_SIZE)
    cell_y = math.floor(y / TILE_SIZE)
    if cell_y < 0 or cell_y >= len(rows) or cell_x < 0 or cell_x >= columns:
        return True, False
    row = rows[cell_y]
    cell = row[cell_x] if cell_x < len(row) else ""
    if cell == "1":
        return True, False
    if cell == "2":
        return True, True
    return False, False


def _vertical(
    rows: list[str], columns: int, x: float, y: float, angle: float
) -> tuple[float, float, float, bool]:
    """Follow the ray across vertical grid lines."""
    direction = sign(math.cos(angle))
    if direction == 0:
        return math.inf, x, y, False
    tangent = math.tan(angle)
    step_x = TILE_SIZE * direction
    step_y = TILE_SIZE * tangent * direction
    hit_x = math.floor(x / TILE_SIZE) * TILE_SIZE
    if math.cos(angle) >= 0:
        hit_x += TILE_SIZE
    hit_y = y + (hit_x - x) * tangent
    while True:
        stop, door = _probe(rows, columns, hit_x + direction, hit_y)
        if stop:
            break
        hit_x += step_x
        hit_y += step_y
    return math.hypot(hit_x - x, hit_y - y), hit_x, hit_y, door


def _horizontal(
    rows: list[str], columns: int, x: float, y: float, angle: float
) -> tuple[float, float, float, bool]:
    """Follow the ray across horizontal grid lines."""
    direction = sign(math.sin(angle))
    tangent = math.tan(angle)
    if direction == 0 or tangent == 0:
        return math.inf, x, y, False
    step_x = TILE_SIZE / tangent * direction
    step_y = TILE_SIZE * direction
    hit_y = math.floor(y / TILE_SIZE) * TILE_SIZE
    if math.sin(angle) >= 0:
        hit_y += TILE_SIZE
    hit_x = x + (hit_y - y) / tangent
    while True:
        stop, door = _probe(rows, columns, hit_x, hit_y + direction)
        if stop:
            break
        hit_x += step_x
        hit_y += step_y
    return math.hypot(hit_x - x, hit_y - y), hit_x, hit_y, door


def cast_ray(rows: list[str], columns: int, x: float, y: float, angle: float) -> Hit:
    """Cast one ray from ``(x, y)``; the distance is not fish-eye corrected."""
    v_distance, v_x, v_y, v_door = _vertical(rows, columns, x, y, angle)
    h_distance, h_x, h_y, h_door = _horizontal(rows, columns, x, y, angle)
    if v_distance <= h_distance:
        side = Side.EAST if sign(math.cos(angle)) == 1 else Side.WEST
        return Hit(v_distance, v_x, v_y, side, v_door)
    side = Side.NORTH if sign(math.sin(angle)) == 1 else Side.SOUTH
    return Hit(h_distance, h_x, h_y, side, h_door)


def cast_view(rows: list[str], columns: int, x: float, y: float, angle: float) -> list[Hit]:
    """Cast one ray per screen column across the field of view.

    Distances are corrected for the angle between each ray and the view
    direction.
    """
    increment = FOV / SCREEN_WIDTH
    ray_angle = angle - FOV / 2
    hits = []
    for _ in range(SCREEN_WIDTH):
        hit = cast_ray(rows, columns, x, y, ray_angle)
        corrected = hit.distance * math.cos(abs(ray_angle - angle))
        hits.append(replace(hit, distance=corrected))
        ray_angle += increment
    return hits


def texture_column(hit: Hit, texture_width: int) -> float:
    """Horizontal texture coordinate of a hit, scaled by ``TILE_SIZE``."""
    if hit.side is Side.SOUTH:
        column = math.fmod(hit.x, TILE_SIZE)
    elif hit.side is Side.NORTH:
        column = TILE_SIZE - math.fmod(hit.x, TILE_SIZE)
    elif hit.side is Side.WEST:
        column = TILE_SIZE - math.fmod(hit.y, TILE_SIZE)
    else:
        column = math.fmod(hit.y, TILE_SIZE)
    return column * texture_width


def wall_height(distance: float) -> int:
    """Projected height in pixels of a wall at ``distance``.

    A wall at zero distance is treated as one a single unit away.
    """
    if distance <= 0:
        return SCREEN_HEIGHT * TILE_SIZE
    return int(SCREEN_HEIGHT * TILE_SIZE / distance)