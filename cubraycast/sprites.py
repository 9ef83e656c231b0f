"""Locating sprites on the map and drawing them over the walls."""

from __future__ import annotations

import math
from typing import List, Optional, Sequence

from .image import Image, Textures
from .maths import BLOCK, Hit, calculate_distance, hit_a_wall, within_rad
from .state import Player, SceneConfig, Sprite


def find_sprites(grid: Sequence[Sequence[str]]) -> List[Sprite]:
    """One sprite for each sprite cell of the map, in reading order."""
    return [
        Sprite(x_i=col, y_i=lin, x_d=float(col * BLOCK + BLOCK // 2),
               y_d=float(lin * BLOCK + BLOCK // 2))
        for lin, row in enumerate(grid)
        for col in range(len(row))
        if hit_a_wall(col * BLOCK, lin * BLOCK, grid) == Hit.SPRITE
    ]


def mark_sprite_hit(sprites: Sequence[Sprite], player: Player, x: float, y: float) -> bool:
    """Mark the sprite in the cell holding (x, y) as seen; False if none was newly seen."""
    col = int(x / BLOCK)
    lin = int(y / BLOCK)
    for sprite in sprites:
        if sprite.x_i == col and sprite.y_i == lin and not sprite.visible:
            sprite.visible = True
            sprite.dist = calculate_distance(player.x, sprite.x_d, player.y, sprite.y_d)
            return True
    return False


def pop_farthest(sprites: Sequence[Sprite]) -> Optional[Sprite]:
    """Take the farthest visible sprite out of the visible set and return it."""
    best: Optional[Sprite] = None
    for sprite in sprites:
        if sprite.visible and sprite.dist > (best.dist if best else 0):
            best = sprite
    if best is not None:
        best.visible = False
    return best


def _project(sprite: Sprite, player: Player, config: SceneConfig) -> bool:
    sprite.x_toplayer = sprite.x_d - player.x
    sprite.y_toplayer = sprite.y_d - player.y
    sprite.angle = within_rad(player.angle + math.atan2(sprite.y_toplayer, sprite.x_toplayer))
    corrected = sprite.dist * math.cos(sprite.angle)
    if corrected <= 0:
        return False
    sprite.height = player.dist_plan / corrected * BLOCK
    sprite.length = sprite.height
    sprite.first_x = (
        config.width // 2 + player.dist_plan * math.tan(sprite.angle) - sprite.length / 2
    )
    return True


def _draw_stripe(
    frame: Image, sprite: Sprite, col: int, start_x: float,
    config: SceneConfig, texture: Image,
) -> None:
    x_color = int(col * (texture.width / sprite.length))
    start_y = int(config.height // 2 - sprite.height / 2)
    k = max(0, -start_y)
    x = int(start_x + col)
    while k < sprite.height and start_y + k < config.height:
        y_color = int(k * (texture.height / sprite.height))
        color = texture.get_pixel(x_color, y_color)
        if color != config.sprite_key_color:
            frame.put_pixel(x, start_y + k, color)
        k += 1


def render_sprites(
    frame: Image,
    sprites: Sequence[Sprite],
    player: Player,
    rays: Sequence[float],
    config: SceneConfig,
    textures: Textures,
) -> None:
    """Draw the visible sprites from farthest to nearest, hidden behind nearer walls."""
    while (sprite := pop_farthest(sprites)) is not None:
        if not _project(sprite, player, config):
            continue
        start_x = sprite.first_x
        k = 0 if start_x >= 0 else math.ceil(-start_x)
        while start_x + k < config.width and k < sprite.length:
            if sprite.dist < rays[int(start_x + k)]:
                _draw_stripe(frame, sprite, k, start_x, config, textures.sprite)
            k += 1