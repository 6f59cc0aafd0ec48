"""Locating the player in a map grid and checking that the grid is closed."""

from __future__ import annotations

import math

from raycube.scene import SceneError

_ORIENTATIONS = "NSEW"
_ANGLES = {
    "N": 3 * (math.pi / 2),
    "S": math.pi / 2,
    "E": 0.0,
    "W": math.pi,
}


def find_player(rows: list[str]) -> tuple[int, int, str, list[str]]:
    """Find the single start cell.

    Returns ``(x, y, orientation, rows)`` where ``rows`` is a copy of the
    grid with the start cell replaced by floor. The first row and the first
    column are never searched.
    """
    found = []
    for y, row in enumerate(rows[1:], start=1):
        for x, cell in enumerate(row[1:], start=1):
            if cell in _ORIENTATIONS:
                found.append((x, y, cell))
    if len(found) != 1:
        raise SceneError("ERROR! PLAYERS FAIL...")
    x, y, orientation = found[0]
    updated = list(rows)
    updated[y] = rows[y][:x] + "0" + rows[y][x + 1:]
    return x, y, orientation, updated


def start_angle(orientation: str) -> float:
    """Viewing angle in radians for a start orientation letter."""
    try:
        return _ANGLES[orientation]
    except KeyError:
        raise ValueError(f"unknown orientation: {orientation!r}") from None


def _at(rows: list[str], y: int, x: int) -> str:
    if 0 <= y < len(rows) and 0 <= x < len(rows[y]):
        return rows[y][x]
    return ""


def _is_enclosed(rows: list[str], columns: int, y: int, x: int) -> bool:
    if x <= 0 or y <= 0 or x >= columns or y >= len(rows) - 1:
        return False
    below = _at(rows, y + 1, x)
    right = _at(rows, y, x + 1)
    return not (
        below in ("", " ")
        or _at(rows, y - 1, x) == " "
        or right in ("", " ")
        or _at(rows, y, x - 1) == " "
    )


def validate_map(rows: list[str], columns: int, allow_doors: bool) -> list[tuple[int, int]]:
    """Check characters and closure; return the ``(x, y)`` of walkable cells."""
    allowed = "01 2" if allow_doors else "01 "
    walkable = "02" if allow_doors else "0"
    cells = []
    for y, row in enumerate(rows):
        for x, cell in enumerate(row):
            if cell not in allowed:
                raise SceneError("ERROR! MAP HAS INVALID CHARACTERS...")
            if cell in walkable:
                if not _is_enclosed(rows, columns, y, x):
                    raise SceneError("ERROR! MAP HAS OPEN AREA...")
                cells.append((x, y))
    return cells