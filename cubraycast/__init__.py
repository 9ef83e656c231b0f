"""Raycasting engine for .cub scenes: parsing, rendering, BMP output and a pygame window."""

__version__ = "0.1.0"

__all__ = [
    "args",
    "errors",
    "game",
    "image",
    "mapgrid",
    "maths",
    "minimap",
    "player",
    "raycast",
    "scene",
    "sprites",
    "state",
]