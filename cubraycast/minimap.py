"""Overlay of the map and the player in the top-left corner of a frame."""

from __future__ import annotations

import math
from typing import Sequence

from .image import Image
from .maths import BLOCK
from .state import Player, SceneConfig

_WALL_COLOR = 0x00999999
_FLOOR_COLOR = 0x00FFFFFF
_SPRITE_COLOR = 0x000000FF
_PLAYER_COLOR = 0x00FF0000

_CELL_COLORS = {"1": _WALL_COLOR, "x": _WALL_COLOR, "0": _FLOOR_COLOR, "2": _SPRITE_COLOR}


def _draw_cells(frame: Image, grid: Sequence[Sequence[str]], tile: int) -> None:
    lines = len(grid)
    cols = len(grid[0])
    for i in range(tile * lines):
        row = grid[i // tile]
        for j in range(tile * cols):
            color = _CELL_COLORS.get(row[j // tile])
            if color is not None:
                frame.put_pixel(j, i, color)


def _draw_player(frame: Image, grid: Sequence[Sequence[str]], player: Player, tile: int) -> None:
    ratio = tile / BLOCK
    reach = math.sqrt(tile)
    width = BLOCK * len(grid[0])
    height = BLOCK * len(grid)
    xs = range(max(0, math.floor(player.x - reach)), min(width, math.ceil(player.x + reach) + 1))
    ys = range(max(0, math.floor(player.y - reach)), min(height, math.ceil(player.y + reach) + 1))
    for x in xs:
        if (player.x - x) ** 2 >= tile:
            continue
        for y in ys:
            if (player.y - y) ** 2 >= tile:
                continue
            i = int(y * ratio)
            while i <= (y + 1) * ratio:
                j = int(x * ratio)
                while j <= (x + 1) * ratio:
                    frame.put_pixel(j, i, _PLAYER_COLOR)
                    j += 1
                i += 1


def draw_minimap(
    frame: Image, config: SceneConfig, grid: Sequence[Sequence[str]], player: Player
) -> Image:
    """Draw the map, scaled to about a fifth of the screen, and the player on it."""
    lines = len(grid)
    cols = len(grid[0])
    tile = max((config.width // 5) // cols, (config.height // 5) // lines)
    if tile > 0:
        _draw_cells(frame, grid, tile)
        _draw_player(frame, grid, player, tile)
    return frame