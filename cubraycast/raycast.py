"""Casting one ray per screen column and drawing walls, ceiling and floor."""

from __future__ import annotations

import math
from typing import List, Optional, Sequence, Tuple

from .image import Image, Textures
from .mapgrid import Grid
from .maths import BLOCK, Hit, calculate_distance, create_trgb, hit_a_wall, within_rad
from .scene import Scene
from .sprites import mark_sprite_hit, render_sprites
from .state import Player, Ray, SceneConfig, Sprite

Point = Tuple[float, float]


def _orient(ray: Ray) -> None:
    if ray.angle < math.pi:
        ray.fac_up, ray.fac_down = 1, -1
    elif ray.angle > math.pi:
        ray.fac_up, ray.fac_down = -1, 1
    if ray.angle < math.pi / 2 or ray.angle > 3 * math.pi / 2:
        ray.fac_right, ray.fac_left = 1, -1
    elif math.pi / 2 < ray.angle < 3 * math.pi / 2:
        ray.fac_right, ray.fac_left = -1, 1


def _walk(
    start: Point, step: Point, offset: Point, grid: Grid,
    sprites: Sequence[Sprite], player: Player,
) -> Optional[Point]:
    """Step along grid lines until a wall is met; sprites passed are marked."""
    x, y = start
    x_step, y_step = step
    dx, dy = offset
    limit_x = BLOCK * len(grid[0])
    limit_y = BLOCK * len(grid)
    while 0 <= x - dx and x < limit_x and 0 <= y - dy and y < limit_y:
        res = hit_a_wall(x - dx, y - dy, grid)
        if res == Hit.WALL:
            return x, y
        if res == Hit.SPRITE:
            mark_sprite_hit(sprites, player, x - dx, y - dy)
        x += x_step
        y += y_step
    return None


def _horizontal(ray: Ray, player: Player, grid: Grid, sprites: Sequence[Sprite]) -> Optional[Point]:
    tan_a = math.tan(ray.angle)
    if tan_a == 0:
        return None
    y_int = float(int(player.y / BLOCK) * BLOCK)
    if ray.fac_down == 1:
        y_int += BLOCK
    x_int = player.x + (player.y - y_int) / tan_a
    y_step = -BLOCK if ray.fac_up == 1 else BLOCK
    x_step = BLOCK / tan_a
    if (ray.fac_left == 1 and x_step > 0) or (ray.fac_right == 1 and x_step < 0):
        x_step = -x_step
    offset = 1 if ray.fac_up == 1 else 0
    return _walk((x_int, y_int), (x_step, y_step), (0, offset), grid, sprites, player)


def _vertical(ray: Ray, player: Player, grid: Grid, sprites: Sequence[Sprite]) -> Optional[Point]:
    tan_a = math.tan(ray.angle)
    x_int = float(int(player.x / BLOCK) * BLOCK)
    if ray.fac_right == 1:
        x_int += BLOCK
    y_int = player.y + (player.x - x_int) * tan_a
    x_step = -BLOCK if ray.fac_left == 1 else BLOCK
    y_step = BLOCK * tan_a
    if (ray.fac_up == 1 and y_step > 0) or (ray.fac_down == 1 and y_step < 0):
        y_step = -y_step
    offset = 1 if ray.fac_left == 1 else 0
    return _walk((x_int, y_int), (x_step, y_step), (offset, 0), grid, sprites, player)


def _wall_texture(ray: Ray, textures: Textures) -> Image:
    if ray.hit_vert == 1:
        if ray.fac_left == 1 or ray.angle == math.pi:
            return textures.west
        return textures.east
    if ray.fac_up == 1 or ray.angle == math.pi / 2:
        return textures.north
    return textures.south


def _texture_column(ray: Ray, texture: Image) -> int:
    scale = texture.width // BLOCK
    if ray.hit_vert == 1:
        tronc = int(ray.y_hit / BLOCK)
        if ray.angle < math.pi / 2 or ray.angle > 3 * math.pi / 2:
            return int((ray.y_hit - BLOCK * tronc) * scale)
        return int((BLOCK * (tronc + 1) - ray.y_hit) * scale)
    tronc = int(ray.x_hit / BLOCK)
    if 0 < ray.angle < math.pi:
        return int((ray.x_hit - BLOCK * tronc) * scale)
    return int((BLOCK * (tronc + 1) - ray.x_hit) * scale)


def _draw_wall(frame: Image, config: SceneConfig, ray: Ray, j: int, start: int, texture: Image) -> None:
    x_color = _texture_column(ray, texture)
    k = max(0, -start)
    while k < ray.height and j < config.height:
        if start + k >= config.height:
            return
        y_color = int(k * (texture.height / ray.height))
        frame.put_pixel(ray.column_id, j, texture.get_pixel(x_color, y_color))
        k += 1
        j += 1


def _draw_column(frame: Image, config: SceneConfig, ray: Ray, start: int, texture: Image) -> None:
    ceiling = create_trgb(0, *config.ceiling)
    floor = create_trgb(0, *config.floor)
    top = max(0, min(start, config.height))
    for j in range(top):
        frame.put_pixel(ray.column_id, j, ceiling)
    _draw_wall(frame, config, ray, top, start, texture)
    bottom = int(top + ray.height)
    for j in range(max(bottom, 0), config.height):
        frame.put_pixel(ray.column_id, j, floor)


def cast_ray(
    frame: Image, scene: Scene, player: Player, sprites: Sequence[Sprite],
    textures: Textures, ray: Ray,
) -> Ray:
    """Cast ``ray`` from the player, record its wall hit and draw its column."""
    ray.reset()
    _orient(ray)
    grid = scene.grid
    h_hit = _horizontal(ray, player, grid, sprites)
    v_hit = _vertical(ray, player, grid, sprites)
    h_dist = calculate_distance(h_hit[0], player.x, h_hit[1], player.y) if h_hit else 0.0
    v_dist = calculate_distance(v_hit[0], player.x, v_hit[1], player.y) if v_hit else 0.0
    if v_hit and (not h_hit or h_dist >= v_dist):
        (ray.x_hit, ray.y_hit), ray.dist, ray.hit_vert = v_hit, v_dist, 1
    elif h_hit:
        (ray.x_hit, ray.y_hit), ray.dist, ray.hit_vert = h_hit, h_dist, -1
    else:
        return ray
    corrected = ray.dist * math.cos(ray.angle - player.angle)
    if corrected <= 0:
        return ray
    config = scene.config
    ray.height = BLOCK / corrected * player.dist_plan
    start = int(config.height // 2 - ray.height / 2)
    _draw_column(frame, config, ray, start, _wall_texture(ray, textures))
    return ray


def cast_all_rays(
    frame: Image, scene: Scene, player: Player, sprites: Sequence[Sprite],
    textures: Textures,
) -> List[float]:
    """Render a whole frame and return the wall distance of every column."""
    count = scene.config.width
    rays: List[float] = []
    for column in range(count):
        angle = within_rad(player.angle + math.atan((count // 2 - column) / player.dist_plan))
        ray = cast_ray(frame, scene, player, sprites, textures, Ray(angle=angle, column_id=column))
        rays.append(ray.dist)
    render_sprites(frame, sprites, player, rays, scene.config, textures)
    for sprite in sprites:
        sprite.reset()
    return rays