"""Checks on the command line and on texture paths."""

from __future__ import annotations

from typing import Sequence

from .errors import ParsingError

_SAVE_FLAG = "--save"


def check_scene_path(path: str) -> str:
    """Ensure ``path`` names a ``.cub`` file with a single dot."""
    if path.count(".") != 1 or len(path) < 5 or not path.endswith(".cub"):
        raise ParsingError(2)
    return path


def check_save_flag(arg: str) -> bool:
    """Ensure the optional argument is exactly ``--save``."""
    if arg != _SAVE_FLAG:
        raise ParsingError(3)
    return True


def check_arguments(argv: Sequence[str]) -> tuple[str, bool]:
    """Validate the arguments after the program name.

    Returns the scene path and whether a screenshot was requested.
    """
    if not 1 <= len(argv) <= 2:
        raise ParsingError(1)
    scene = check_scene_path(argv[0])
    save = len(argv) == 2 and check_save_flag(argv[1])
    return scene, save


def check_texture_extension(path: str) -> bool:
    """True when ``path`` ends in ``.xpm`` and holds one dot past its first character."""
    dots = path[1:].count(".")
    return dots == 1 and len(path) >= 5 and path.endswith(".xpm")


def check_texture_readable(path: str) -> bool:
    """True when ``path`` can be opened and read to the end."""
    try:
        with open(path, "rb") as handle:
            while handle.read(4096):
                pass
    except OSError:
        return False
    return True