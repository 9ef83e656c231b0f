"""Reading the map block of a scene into a grid and checking that it is closed."""

from __future__ import annotations

from itertools import chain, islice, repeat
from typing import Iterable, List

from .errors import ParsingError

Grid = List[List[str]]

_TILES = frozenset("012 ")
_SPAWNS = frozenset("NSEW")
_BLANK = frozenset(" x")
_BOUNDS = frozenset("1x")


def measure_map(text: str, pos: int) -> tuple[int, int, int]:
    """Validate the map block starting at ``pos``.

    Returns the position of its first line, its number of lines and the
    length of its longest line.
    """
    size = len(text)
    start = pos
    while start < size and text[start] == "\n":
        start += 1
    lines = 0
    players = 0
    i = start
    while i < size:
        if text[i] == "\n":
            i += 1
            lines += 1
        if i < size and text[i] in _TILES:
            i += 1
        elif i < size and text[i] in _SPAWNS:
            players += 1
            i += 1
        elif i < size:
            break
    if i >= size and i > 0 and text[i - 1] in _TILES:
        lines += 1
    if text[i:].lstrip("\n"):
        raise ParsingError(7)
    if players != 1:
        raise ParsingError(8)
    cols = max((len(row) for row in text[start:].split("\n")), default=0)
    if cols < 3 or lines < 3:
        raise ParsingError(16)
    return start, lines, cols


def build_grid(text: str, pos: int, lines: int, cols: int) -> Grid:
    """Cut ``lines`` rows out of ``text`` from ``pos``, padded with spaces to ``cols``."""
    rows = chain(text[pos:].split("\n"), repeat(""))
    return [list(row.ljust(cols)) for row in islice(rows, lines)]


def map_creation(text: str, pos: int) -> Grid:
    """Measure the map block at ``pos`` and return it as a rectangular grid."""
    start, lines, cols = measure_map(text, pos)
    return build_grid(text, start, lines, cols)


def find_player(grid: Grid) -> tuple[str, int, int]:
    """Locate the spawn letter, replace it with floor and return (letter, line, column)."""
    for lin, row in enumerate(grid):
        for col, cell in enumerate(row):
            if cell in _SPAWNS:
                row[col] = "0"
                return cell, lin, col
    raise ParsingError(8)


def _closed(cells: Iterable[str]) -> bool:
    """True when the first bound met along ``cells`` is a wall."""
    return next((c for c in cells if c in _BOUNDS), None) == "1"


def check_lin(grid: Grid, lin: int, col: int) -> bool:
    """True when cell (lin, col) has a wall on both sides along its line."""
    width = len(grid[0])
    row = grid[lin]
    return _closed(reversed(row[:col])) and _closed(row[col + 1:width])


def check_col(grid: Grid, lin: int, col: int) -> bool:
    """True when cell (lin, col) has a wall above and below it."""
    column = [row[col] for row in grid]
    return _closed(reversed(column[:lin])) and _closed(column[lin + 1:])


def _no_gap(flags: Iterable[bool]) -> bool:
    """True unless an empty entry is followed later by a non-empty one after content."""
    seen = False
    gap = False
    for empty in flags:
        if empty:
            if seen:
                gap = True
        else:
            if gap:
                return False
            seen = True
    return True


def check_ext_lin(grid: Grid) -> bool:
    """Mark outer spaces of each line and check every line starts and ends on a wall."""
    width = len(grid[0])
    for row in grid:
        for j, cell in enumerate(row):
            if cell not in _BLANK:
                if cell != "1":
                    return False
                break
            row[j] = "x"
    for row in grid:
        for j in range(width - 1, -1, -1):
            if row[j] not in _BLANK:
                if row[j] != "1":
                    return False
                break
            row[j] = "x"
    return _no_gap(all(c in _BLANK for c in row) for row in grid)


def _scan_column(rows: Iterable[List[str]], j: int) -> bool:
    for row in rows:
        if row[j] not in _BLANK:
            return row[j] == "1"
        row[j] = "x"
    return True


def check_ext_col(grid: Grid) -> bool:
    """Mark outer spaces of each column and check every column starts and ends on a wall."""
    width = len(grid[0])
    if not all(_scan_column(grid, j) for j in range(width)):
        return False
    if not all(_scan_column(reversed(grid), j) for j in range(width)):
        return False
    return _no_gap(
        all(row[j] in _BLANK for row in grid) for j in range(width)
    )


def check_walls(grid: Grid) -> Grid:
    """Ensure the map is closed by walls, then turn every remaining space into void."""
    if not check_ext_lin(grid) or not check_ext_col(grid):
        raise ParsingError(7)
    for lin, row in enumerate(grid):
        for col, cell in enumerate(row):
            if cell in ("0", "2") and not (
                check_lin(grid, lin, col) and check_col(grid, lin, col)
            ):
                raise ParsingError(7)
    for row in grid:
        row[:] = ["x" if c == " " else c for c in row]
    return grid