"""Reading and validating ``.cub`` scene description files."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable

_EXTENSION = ".cub"
_TEXTURE_KEYS = ("NO", "SO", "WE", "EA")
_COLOR_KEYS = ("C", "F")


class SceneError(ValueError):
    """Raised when a scene file or one of its parts is malformed."""


@dataclass
class Scene:
    """Texture paths, colours and the padded grid of a parsed scene."""

    north: str
    south: str
    west: str
    east: str
    floor: str
    ceiling: str
    rows: list[str]
    columns: int

    @property
    def floor_color(self) -> int:
        """Floor colour as a 0xRRGGBBAA integer."""
        return parse_color(self.floor)

    @property
    def ceiling_color(self) -> int:
        """Ceiling colour as a 0xRRGGBBAA integer."""
        return parse_color(self.ceiling)


def check_extension(path: str) -> str:
    """Return ``path`` if the text after its last dot is exactly ``.cub``."""
    dot = path.rfind(".")
    if dot == -1 or path[dot:] != _EXTENSION:
        raise SceneError("ERROR! WRONG FILE EXTENSION...")
    return path


def _is_digits(text: str) -> bool:
    return bool(text) and all(ch in "0123456789" for ch in text)


def parse_color(text: str) -> int:
    """Turn ``"R,G,B"`` into a 0xRRGGBBAA integer with full alpha."""
    if text.count(",") != 2:
        raise SceneError("ERROR! COLORS FAIL...")
    parts = [part for part in text.split(",") if part]
    channels = [int(part) if _is_digits(part) else -1 for part in parts[:3]]
    channels += [-1] * (3 - len(channels))
    if any(value < 0 or value > 255 for value in channels):
        raise SceneError("ERROR! RGB FAIL...")
    red, green, blue = channels
    return (red << 24) | (green << 16) | (blue << 8) | 0xFF


def _is_blank(line: str) -> bool:
    return line == "" or line.startswith("\n")


def _skip_blank(lines: list[str], index: int) -> int:
    while index < len(lines) and _is_blank(lines[index]):
        index += 1
    return index


def _tokens(line: str) -> list[str]:
    return [token for token in line.strip(" \n").split(" ") if token]


def _read_entries(
    lines: list[str],
    index: int,
    keys: tuple[str, ...],
    found: dict[str, str],
    kind: str,
) -> int:
    """Read ``len(keys)`` ``KEY value`` lines into ``found``; return the next index."""
    index = _skip_blank(lines, index)
    if index >= len(lines):
        raise SceneError(f"ERROR! {kind} EMPTY")
    taken = 0
    while index < len(lines) and taken != len(keys):
        tokens = _tokens(lines[index])
        index += 1
        if len(tokens) < 2 or tokens[0] not in keys:
            raise SceneError(f"ERROR! {kind} FAIL...")
        key = tokens[0]
        if key in found or len(tokens) > 2:
            raise SceneError("ERROR! FORMAT ERROR IN TEXTURE OR COLOR...")
        found[key] = tokens[1]
        taken += 1
    if any(key not in found for key in keys):
        label = "TEXTURE" if kind == "TEXTURES" else "COLORS"
        raise SceneError(f"ERROR! MISSING SOME {label} PATH...")
    return index


def _read_map(lines: list[str], index: int) -> tuple[list[str], int]:
    index = _skip_blank(lines, index)
    if index >= len(lines):
        raise SceneError("ERROR! MAP EMPTY")
    if lines[index].lstrip(" ")[:1] != "1":
        raise SceneError("ERROR! INVALID MAP...")
    raw = lines[index:]
    columns = max(len(line) for line in raw)
    rows = [line.strip("\n") for line in raw]
    width = max(len(row) for row in rows)
    return [row.ljust(width) for row in rows], columns


def parse_scene(lines: Iterable[str]) -> Scene:
    """Parse the lines of a scene file, each keeping its line ending."""
    lines = list(lines)
    if not lines:
        raise SceneError("ERROR! FILE EMPTY...")
    found: dict[str, str] = {}
    first = _skip_blank(lines, 0)
    if first < len(lines) and lines[first][:1] in ("F", "C"):
        index = _read_entries(lines, first, _COLOR_KEYS, found, "COLORS")
        index = _read_entries(lines, index, _TEXTURE_KEYS, found, "TEXTURES")
    else:
        index = _read_entries(lines, first, _TEXTURE_KEYS, found, "TEXTURES")
        index = _read_entries(lines, index, _COLOR_KEYS, found, "COLORS")
    rows, columns = _read_map(lines, index)
    return Scene(
        north=found["NO"],
        south=found["SO"],
        west=found["WE"],
        east=found["EA"],
        floor=found["F"],
        ceiling=found["C"],
        rows=rows,
        columns=columns,
    )


def load_scene(path: str | os.PathLike[str]) -> Scene:
    """Read and parse the scene file at ``path``."""
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as handle:
            lines = handle.readlines()
    except OSError as exc:
        raise SceneError("ERROR! FILE DOESN'T EXIST...") from exc
    return parse_scene(lines)