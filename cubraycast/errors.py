"""Exceptions raised while checking arguments, parsing scenes, displaying and saving."""

from __future__ import annotations

_UNDEFINED = "Error not yet defined."

_PARSING_MESSAGES = {
    1: "Wrong number of arguments.",
    2: "The 2nd argument is not a .cub.",
    3: "The 3rd argument is not valid.",
    4: "Parsing: wrong inputs for at least one element.",
    5: "Parsing: resolution is too low for the map inputs.",
    7: "Parsing: map inputs are incorrect.",
    8: "Parsing: player first position is not correct.",
    9: "Parsing: opening, reading or closing error with the .cub.",
    10: "Parsing: error occurs while allocating memory (malloc).",
    11: "Parsing: wrong inputs for at least one texture path.",
    12: "Parsing: error occurs when opening/reading a texture path.",
    13: "Parsing: wrong inputs for resolution.",
    14: "Parsing: wrong inputs for floor.",
    15: "Parsing: wrong inputs for ceiling.",
    16: "Parsing: map is too small.",
    17: "Parsing: at least 2 walls have a similar texture.",
}

_DISPLAY_MESSAGES = {
    1: "Mlx: Connection between software and display failed.",
    2: "Mlx: Image creation error.",
    3: "Mlx: Window creation error.",
    4: "Mlx: error occurs while allocating memory (malloc).",
}

_BMP_MESSAGES = {
    1: "Bmp: Error occurs while creating save.bmp.",
    2: "Bmp: Error occur while allocating memory.",
}


class CubError(Exception):
    """Base class for every error the game reports."""

    code: int = 0
    message: str = _UNDEFINED

    def report(self) -> str:
        """Text shown to the user: an "Error" line followed by the message."""
        return f"Error\n{self.message}"


class ParsingError(CubError):
    """Invalid command line or scene description."""

    def __init__(self, code: int) -> None:
        self.code = code
        self.message = _PARSING_MESSAGES.get(code, _UNDEFINED)
        super().__init__(self.message)


class DisplayError(CubError):
    """Failure while creating the window, the frame or the textures."""

    def __init__(self, code: int) -> None:
        self.code = code
        self.message = _DISPLAY_MESSAGES.get(code, _UNDEFINED)
        super().__init__(self.message)


class BmpError(CubError):
    """Failure while writing the screenshot file."""

    def __init__(self, code: int) -> None:
        self.code = code
        self.message = _BMP_MESSAGES.get(code, _UNDEFINED)
        super().__init__(self.message)