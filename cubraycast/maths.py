"""Angle helpers, colour packing, number reading and map lookups."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Sequence

BLOCK = 10
"""Side length of one map cell in world units."""


class Hit(IntEnum):
    """What lies at a point of the map."""

    OUTSIDE = -1
    EMPTY = 0
    WALL = 1
    SPRITE = 2


def deg_to_rad(deg: float) -> float:
    return deg * (math.pi / 180)


def rad_to_deg(rad: float) -> float:
    return rad * (180 / math.pi)


def within_rad(rad: float) -> float:
    """Bring an angle into [0, 2*pi)."""
    while rad >= 2 * math.pi:
        rad -= 2 * math.pi
    while rad < 0:
        rad += 2 * math.pi
    return rad


def calculate_distance(x1: float, x2: float, y1: float, y2: float) -> float:
    """Euclidean distance between (x1, y1) and (x2, y2)."""
    return math.hypot(x1 - x2, y1 - y2)


def create_trgb(t: int, r: int, g: int, b: int) -> int:
    """Pack transparency and colour channels into a 32-bit value."""
    return ((t << 24) | (r << 16) | (g << 8) | b) & 0xFFFFFFFF


def atoi_cub(text: str, pos: int) -> tuple[int, int]:
    """Read an unsigned decimal number at ``pos``.

    Returns the value and the position just after the digits.
    """
    end = pos
    while end < len(text) and text[end] == "0":
        end += 1
    value = 0
    while end < len(text) and "0" <= text[end] <= "9":
        value = value * 10 + ord(text[end]) - ord("0")
        end += 1
    return value, end


def hit_a_wall(x: float, y: float, grid: Sequence[Sequence[str]]) -> Hit:
    """Classify the map cell containing world point (x, y)."""
    if x < 0 or y < 0:
        return Hit.WALL
    if not (math.isfinite(x) and math.isfinite(y)):
        return Hit.OUTSIDE
    lin = int(y / BLOCK)
    col = int(x / BLOCK)
    if lin >= len(grid) or col >= len(grid[lin]):
        return Hit.OUTSIDE
    cell = grid[lin][col]
    if cell == "0":
        return Hit.EMPTY
    if cell in ("1", "x"):
        return Hit.WALL
    if cell == "2":
        return Hit.SPRITE
    return Hit.OUTSIDE


def clamp_resolution(
    width: int, height: int, screen_width: int, screen_height: int
) -> tuple[int, int]:
    """Shrink a resolution so that it fits on the screen."""
    return min(width, screen_width), min(height, screen_height)