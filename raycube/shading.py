"""Texture sampling and distance shading of wall columns."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from raycube.raycast import SCREEN_HEIGHT, TILE_SIZE, wall_height

_RATIO = SCREEN_HEIGHT * TILE_SIZE


@dataclass(frozen=True)
class Texture:
    """A texture whose pixels are RGBA bytes read as little-endian words."""

    width: int
    height: int
    pixels: tuple[int, ...]

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("texture dimensions must be positive")
        if len(self.pixels) != self.width * self.height:
            raise ValueError("pixel count does not match texture size")
        object.__setattr__(self, "pixels", tuple(self.pixels))

    @classmethod
    def from_rgba(cls, width: int, height: int, data: bytes) -> "Texture":
        """Build a texture from ``width * height`` RGBA byte quadruples."""
        if width <= 0 or height <= 0 or len(data) != width * height * 4:
            raise ValueError("RGBA data does not match texture size")
        return cls(width, height, struct.unpack(f"<{width * height}I", data))

    def pixel(self, column: int, row: int) -> int:
        """Stored word at ``(column, row)``, clamped to the texture."""
        column = min(max(column, 0), self.width - 1)
        row = min(max(row, 0), self.height - 1)
        return self.pixels[row * self.width + column]


def reverse_bytes(value: int) -> int:
    """Swap the byte order of a 32-bit word."""
    return int.from_bytes((value & 0xFFFFFFFF).to_bytes(4, "little"), "big")


def apply_shadow(color: int, shadow: float) -> int:
    """Scale the red, green and blue channels of 0xRRGGBBAA by ``shadow``."""
    red = int(((color >> 24) & 0xFF) * shadow) & 0xFF
    green = int(((color >> 16) & 0xFF) * shadow) & 0xFF
    blue = int(((color >> 8) & 0xFF) * shadow) & 0xFF
    alpha = color & 0xFF
    return (red << 24) | (green << 16) | (blue << 8) | alpha


def shade_factor(distance: float) -> float:
    """Brightness multiplier for a wall at ``distance``."""
    return 1.0 / (1.0 + distance * 0.005)


def texel_color(texture: Texture, distance: float, row: int, column: float) -> int:
    """Shaded 0xRRGGBBAA colour for wall pixel ``row`` of a strip.

    ``column`` is the scaled value from ``texture_column``.
    """
    texture_row = int(distance * texture.height * row / _RATIO)
    texture_col = int(column) // TILE_SIZE
    color = reverse_bytes(texture.pixel(texture_col, texture_row))
    return apply_shadow(color, shade_factor(distance))


def wall_strip(texture: Texture, distance: float, column: float) -> list[tuple[int, int]]:
    """Screen rows and colours of one wall column as ``(y, color)`` pairs."""
    size = wall_height(distance)
    tex_column = int(column)
    first = 0
    if size > SCREEN_HEIGHT:
        first = (size - SCREEN_HEIGHT) // 2
        size = SCREEN_HEIGHT
    start = (SCREEN_HEIGHT - size) // 2
    return [
        (start + offset, texel_color(texture, distance, first + offset, tex_column))
        for offset in range(size)
    ]