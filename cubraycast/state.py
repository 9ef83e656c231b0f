"""Scene settings and the mutable state of the player, rays and sprites."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .maths import BLOCK, deg_to_rad

Color = tuple[int, int, int]


@dataclass
class SceneConfig:
    """Everything read from the element lines and the map of a scene."""

    width: int = 0
    height: int = 0
    north: str | None = None
    south: str | None = None
    west: str | None = None
    east: str | None = None
    sprite: str | None = None
    floor: Color | None = None
    ceiling: Color | None = None
    player_dir: str | None = None
    player_col: int = -1
    player_lin: int = -1
    map_cols: int = -1
    map_lines: int = -1
    sprite_count: int = 0
    sprite_key_color: int = 0

    @property
    def has_resolution(self) -> bool:
        return self.width > 0 and self.height > 0

    @property
    def is_complete(self) -> bool:
        """True once every element (R, NO, SO, WE, EA, S, F, C) has been given."""
        return (
            self.has_resolution
            and self.floor is not None
            and self.ceiling is not None
            and None not in (self.north, self.south, self.west, self.east, self.sprite)
        )


def initial_angle(direction: str | None) -> float:
    """Starting view angle for a spawn letter."""
    if direction == "S":
        return (3 * math.pi) / 2 + 0.01
    if direction == "W":
        return math.pi + 0.01
    if direction == "N":
        return math.pi / 2 + 0.01
    return 0.01


@dataclass
class Player:
    """Position, heading and current movement intent of the player."""

    x: float
    y: float
    angle: float
    dist_plan: float
    dir_turn: int = 0
    dir_walk_bf: int = 0
    dir_walk_lr: int = 0
    fov: float = math.pi / 3
    speed_ang: float = deg_to_rad(2)
    speed_walk: float = 0.3

    @classmethod
    def spawn(cls, config: SceneConfig) -> "Player":
        """Place the player at the centre of its spawn cell."""
        fov = math.pi / 3
        return cls(
            x=float(config.player_col * BLOCK + BLOCK // 2),
            y=float(config.player_lin * BLOCK + BLOCK // 2),
            angle=initial_angle(config.player_dir),
            dist_plan=(config.width // 2) / math.tan(fov / 2),
            fov=fov,
        )


@dataclass
class Sprite:
    """A sprite standing in a map cell, with its per-frame projection."""

    x_i: int
    y_i: int
    x_d: float
    y_d: float
    visible: bool = False
    dist: float = 0.0
    angle: float = 0.0
    height: float = 0.0
    length: float = 0.0
    first_x: float = 0.0
    x_toplayer: float = 0.0
    y_toplayer: float = 0.0

    def reset(self) -> None:
        """Forget the projection computed for the last frame."""
        self.dist = 0.0
        self.angle = 0.0
        self.height = 0.0
        self.length = 0.0
        self.visible = False


@dataclass
class Ray:
    """One ray cast for a screen column."""

    angle: float = 0.0
    column_id: int = 0
    res: int = 1
    x_hit: float = 0.0
    y_hit: float = 0.0
    dist: float = 0.0
    height: float = 0.0
    fac_down: int = 0
    fac_up: int = 0
    fac_right: int = 0
    fac_left: int = 0
    hit_vert: int = 0

    def reset(self) -> None:
        """Clear hit data and orientation, keeping angle and column."""
        self.res = 1
        self.x_hit = 0.0
        self.y_hit = 0.0
        self.dist = 0.0
        self.height = 0.0
        self.fac_up = 0
        self.fac_down = 0
        self.fac_right = 0
        self.fac_left = 0
        self.hit_vert = 0