import pytest

from cubraycast.image import Image, Textures
from cubraycast.maths import BLOCK, calculate_distance
from cubraycast.sprites import find_sprites, mark_sprite_hit, pop_farthest, render_sprites
from cubraycast.state import Player, SceneConfig, Sprite

GRID = [list("11111"), list("10201"), list("12001"), list("11111")]


def _player():
    config = SceneConfig(width=40, height=30, player_dir="E", player_col=1, player_lin=1)
    return config, Player.spawn(config)


def test_find_sprites_positions():
    sprites = find_sprites(GRID)
    assert [(s.x_i, s.y_i) for s in sprites] == [(2, 1), (1, 2)]
    for s in sprites:
        assert s.x_d == s.x_i * BLOCK + BLOCK // 2
        assert s.y_d == s.y_i * BLOCK + BLOCK // 2
        assert not s.visible


def test_mark_sprite_hit():
    _, player = _player()
    sprites = find_sprites(GRID)
    assert mark_sprite_hit(sprites, player, 2 * BLOCK + 1, BLOCK + 3)
    first = sprites[0]
    assert first.visible
    assert first.dist == pytest.approx(
        calculate_distance(player.x, first.x_d, player.y, first.y_d)
    )
    assert not mark_sprite_hit(sprites, player, 2 * BLOCK + 1, BLOCK + 3)
    assert not mark_sprite_hit(sprites, player, 3 * BLOCK + 1, BLOCK + 3)


def test_pop_farthest_order():
    sprites = [
        Sprite(0, 0, 5.0, 5.0, visible=True, dist=3.0),
        Sprite(1, 0, 15.0, 5.0, visible=True, dist=7.0),
        Sprite(2, 0, 25.0, 5.0, visible=False, dist=9.0),
    ]
    assert pop_farthest(sprites) is sprites[1]
    assert not sprites[1].visible
    assert pop_farthest(sprites) is sprites[0]
    assert pop_farthest(sprites) is None


def _frame_and_textures(sprite_color):
    wall = Image(4, 4)
    sprite = Image(4, 4)
    for x in range(4):
        for y in range(4):
            sprite.put_pixel(x, y, sprite_color)
    return Image(40, 30), Textures(wall, wall, wall, wall, sprite)


def _visible_sprite(player):
    sprite = Sprite(3, 1, 35.0, 15.0)
    sprite.visible = True
    sprite.dist = calculate_distance(player.x, sprite.x_d, player.y, sprite.y_d)
    return sprite


def test_render_sprite_in_front():
    config, player = _player()
    frame, textures = _frame_and_textures(0x0000FF00)
    sprite = _visible_sprite(player)
    render_sprites(frame, [sprite], player, [1000.0] * 40, config, textures)
    assert frame.get_pixel(20, 15) == 0x0000FF00
    assert frame.get_pixel(0, 0) == 0
    assert not sprite.visible


def test_render_sprite_hidden_by_wall():
    config, player = _player()
    frame, textures = _frame_and_textures(0x0000FF00)
    render_sprites(frame, [_visible_sprite(player)], player, [1.0] * 40, config, textures)
    assert set(frame.pixels) == {0}


def test_render_sprite_key_color_is_transparent():
    config, player = _player()
    config.sprite_key_color = 0x0000FF00
    frame, textures = _frame_and_textures(0x0000FF00)
    render_sprites(frame, [_visible_sprite(player)], player, [1000.0] * 40, config, textures)
    assert set(frame.pixels) == {0}