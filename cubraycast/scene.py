"""Parsing a ``.cub`` scene: element lines followed by the map."""

from __future__ import annotations

from dataclasses import dataclass, field

from .args import check_scene_path, check_texture_extension, check_texture_readable
from .errors import ParsingError
from .mapgrid import Grid, check_walls, find_player, map_creation
from .maths import atoi_cub
from .state import Color, SceneConfig

# Prefix, config attribute, and length of the identifier before its spaces.
_TEXTURES = (
    ("NO ", "north", 2),
    ("SO ", "south", 2),
    ("EA ", "east", 2),
    ("WE ", "west", 2),
    ("S ", "sprite", 1),
)


@dataclass
class Scene:
    """A fully parsed scene: its settings and its closed map grid."""

    config: SceneConfig
    grid: Grid = field(default_factory=list)


def read_scene_text(path: str) -> str:
    """Check the scene file name and return the whole file as text."""
    check_scene_path(path)
    try:
        with open(path, encoding="latin-1", newline="") as handle:
            return handle.read()
    except OSError:
        raise ParsingError(9) from None


def skip_space_comma(text: str, pos: int, tour: int) -> int:
    """Skip the separator before a number and return the position of its first digit.

    On the first number (``tour`` 1) the separator must be spaces only; on
    later ones (``tour`` 2) it must hold exactly one comma. Raises
    ``ValueError`` when the separator is missing or wrong.
    """
    i = pos
    commas = 0
    while i < len(text) and text[i] in " ,":
        if text[i] == ",":
            commas += 1
        i += 1
    if (
        i == pos
        or (tour == 1 and commas != 0)
        or (tour == 2 and commas != 1)
        or i >= len(text)
        or not "0" <= text[i] <= "9"
    ):
        raise ValueError(f"bad separator at position {pos}")
    return i


def skip_space_path(text: str, pos: int) -> tuple[int, int]:
    """Skip the spaces before a texture path and return its (start, end) positions."""
    start = pos
    while start < len(text) and text[start] == " ":
        start += 1
    if start == pos:
        raise ParsingError(11)
    end = start
    dots = 0
    while end < len(text) and " " < text[end] <= "~":
        if text[end] == "." and end != start:
            dots += 1
        end += 1
    if end == start or dots > 1:
        raise ParsingError(11)
    return start, end


def _read_numbers(text: str, pos: int, tours: tuple[int, ...], code: int) -> tuple[list[int], int]:
    values = []
    i = pos
    try:
        for tour in tours:
            i = skip_space_comma(text, i, tour)
            value, i = atoi_cub(text, i)
            values.append(value)
    except ValueError:
        raise ParsingError(code) from None
    return values, i


def _parse_resolution(text: str, pos: int, config: SceneConfig) -> int:
    (width, height), end = _read_numbers(text, pos + 1, (1, 1), 13)
    if width <= 2 or height <= 2:
        raise ParsingError(13)
    config.width, config.height = width, height
    return end


def _parse_color(text: str, pos: int, code: int) -> tuple[Color, int]:
    values, end = _read_numbers(text, pos + 1, (1, 2, 2), code)
    if not all(0 <= v <= 255 for v in values):
        raise ParsingError(code)
    r, g, b = values
    return (r, g, b), end


def _parse_texture(text: str, pos: int, skip: int) -> tuple[str, int]:
    start, end = skip_space_path(text, pos + skip)
    path = text[start:end]
    if not check_texture_extension(path) or not check_texture_readable(path):
        raise ParsingError(12)
    return path, end


def _parse_element(text: str, pos: int, config: SceneConfig) -> int:
    if text.startswith("R ", pos) and not config.has_resolution:
        return _parse_resolution(text, pos, config)
    if text.startswith("F ", pos) and config.floor is None:
        config.floor, end = _parse_color(text, pos, 14)
        return end
    if text.startswith("C ", pos) and config.ceiling is None:
        config.ceiling, end = _parse_color(text, pos, 15)
        return end
    for prefix, name, skip in _TEXTURES:
        if text.startswith(prefix, pos) and getattr(config, name) is None:
            path, end = _parse_texture(text, pos, skip)
            setattr(config, name, path)
            return end
    raise ParsingError(4)


def parse_elements(text: str) -> tuple[SceneConfig, int]:
    """Read element lines until all are given or the text ends.

    Returns the settings read so far and the position just after the last
    element.
    """
    config = SceneConfig()
    i = 0
    while i < len(text):
        if text[i] in " \n":
            i += 1
        else:
            i = _parse_element(text, i, config)
        if config.is_complete:
            break
    return config, i


def check_walls_texture(config: SceneConfig) -> SceneConfig:
    """Reject scenes where one wall texture path starts with another."""
    pairs = (
        (config.north, config.south),
        (config.north, config.east),
        (config.north, config.west),
        (config.south, config.east),
        (config.south, config.west),
        (config.east, config.west),
    )
    if any((second or "").startswith(first or "") for first, second in pairs):
        raise ParsingError(17)
    return config


def parse_scene_text(text: str) -> Scene:
    """Parse a whole scene description into settings and a checked map."""
    config, pos = parse_elements(text)
    if not config.is_complete:
        raise ParsingError(4)
    check_walls_texture(config)
    grid = map_creation(text, pos)
    config.player_dir, config.player_lin, config.player_col = find_player(grid)
    check_walls(grid)
    config.map_lines = len(grid)
    config.map_cols = len(grid[0])
    return Scene(config=config, grid=grid)


def parse_scene(path: str) -> Scene:
    """Read and parse the scene file at ``path``."""
    return parse_scene_text(read_scene_text(path))