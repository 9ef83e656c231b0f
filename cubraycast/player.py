"""Player movement and keyboard intent."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Sequence

from .maths import Hit, hit_a_wall, within_rad
from .state import Player


class Key(IntEnum):
    """Key codes the game reacts to."""

    W = 119
    S = 115
    A = 97
    D = 100
    LEFT = 65361
    RIGHT = 65363
    ESCAPE = 65307


def next_position(player: Player) -> tuple[float, float]:
    """Where the player would stand after one step of its current walk intent.

    Walking forward or backward takes precedence over strafing.
    """
    step = player.speed_walk
    if player.dir_walk_bf in (1, -1):
        sign = player.dir_walk_bf
        return (
            player.x + sign * math.cos(player.angle) * step,
            player.y - sign * math.sin(player.angle) * step,
        )
    if player.dir_walk_lr in (1, -1):
        sign = player.dir_walk_lr
        side = within_rad(player.angle + math.pi / 2)
        return (
            player.x + sign * math.cos(side) * step,
            player.y - sign * math.sin(side) * step,
        )
    return player.x, player.y


def update_player(player: Player, grid: Sequence[Sequence[str]]) -> Player:
    """Turn the player, then move it unless the new position is not open floor."""
    player.angle = within_rad(player.angle + player.dir_turn * player.speed_ang)
    x, y = next_position(player)
    if hit_a_wall(x, y, grid) == Hit.EMPTY:
        player.x, player.y = x, y
    return player


def key_press(player: Player, key: int) -> bool:
    """Record the intent of a pressed key; False when the game should stop."""
    if key == Key.W:
        player.dir_walk_bf = 1
    elif key == Key.S:
        player.dir_walk_bf = -1
    elif key == Key.A:
        player.dir_walk_lr = 1
    elif key == Key.D:
        player.dir_walk_lr = -1
    elif key == Key.LEFT:
        player.dir_turn = 1
    elif key == Key.RIGHT:
        player.dir_turn = -1
    elif key == Key.ESCAPE:
        return False
    return True


def key_release(player: Player, key: int) -> bool:
    """Clear the intent of a released key."""
    if key in (Key.W, Key.S):
        player.dir_walk_bf = 0
    elif key in (Key.A, Key.D):
        player.dir_walk_lr = 0
    elif key in (Key.LEFT, Key.RIGHT):
        player.dir_turn = 0
    return True