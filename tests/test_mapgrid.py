import pytest

from cubraycast.errors import ParsingError
from cubraycast.mapgrid import (
    build_grid,
    check_col,
    check_ext_col,
    check_ext_lin,
    check_lin,
    check_walls,
    find_player,
    map_creation,
    measure_map,
)


def _rows(grid):
    return ["".join(row) for row in grid]


def test_measure_simple_map():
    text = "111\n1N1\n111\n"
    start, lines, cols = measure_map(text, 0)
    assert start == 0
    assert lines == len(text.strip("\n").split("\n"))
    assert cols == len("111")


def test_measure_counts_last_line_without_newline():
    with_nl = measure_map("111\n1N1\n111\n", 0)
    without_nl = measure_map("111\n1N1\n111", 0)
    assert with_nl == without_nl


def test_measure_skips_leading_newlines():
    text = "R 10 10\n\n\n111\n1N1\n111\n"
    start, _, _ = measure_map(text, text.index("\n"))
    assert start == text.index("111")


def test_measure_accepts_trailing_blank_lines():
    assert measure_map("111\n1N1\n111\n\n\n", 0)[1] == measure_map("111\n1N1\n111\n", 0)[1]


@pytest.mark.parametrize(
    "text, code",
    [
        ("111\n1N1\n111\n\n111\n", 7),
        ("111\n1N1\n1a1\n", 7),
        ("111\n101\n111\n", 8),
        ("111\n1NS1\n111\n", 8),
        ("11\n1N\n11\n", 16),
        ("1N1\n111\n", 16),
    ],
)
def test_measure_errors(text, code):
    with pytest.raises(ParsingError) as info:
        measure_map(text, 0)
    assert info.value.code == code


def test_build_grid_pads_rows():
    text = "1111\n1N1\n111\n"
    grid = build_grid(text, 0, 3, 4)
    assert len(grid) == 3
    assert all(len(row) == 4 for row in grid)
    assert _rows(grid)[1] == "1N1 "


def test_map_creation_from_offset():
    text = "R 10 10\n\n111\n1N1\n111\n"
    grid = map_creation(text, text.index("\n"))
    assert _rows(grid) == ["111", "1N1", "111"]


def test_find_player_replaces_spawn():
    grid = map_creation("1111\n10W1\n1111\n", 0)
    letter, lin, col = find_player(grid)
    assert letter == "W"
    assert grid[lin][col] == "0"
    assert not any(c in "NSEW" for row in grid for c in row)


def test_find_player_missing():
    grid = build_grid("111\n101\n111", 0, 3, 3)
    with pytest.raises(ParsingError) as info:
        find_player(grid)
    assert info.value.code == 8


def test_check_lin_closed_and_open():
    closed = build_grid("1111\n1001\n1111", 0, 3, 4)
    assert check_lin(closed, 1, 1) is True
    opened = build_grid("1111\n1000\n1111", 0, 3, 4)
    assert check_lin(opened, 1, 1) is False


def test_check_col_closed_and_open():
    closed = build_grid("111\n101\n111", 0, 3, 3)
    assert check_col(closed, 1, 1) is True
    opened = build_grid("101\n101\n111", 0, 3, 3)
    assert check_col(opened, 1, 1) is False


def test_check_ext_marks_outer_spaces():
    grid = build_grid(" 111\n1101\n1111", 0, 3, 4)
    assert check_ext_lin(grid) is True
    assert check_ext_col(grid) is True
    assert grid[0][0] == "x"


def test_check_ext_lin_rejects_open_edge():
    grid = build_grid("111\n01 \n111", 0, 3, 3)
    assert check_ext_lin(grid) is False


def test_check_ext_col_rejects_open_edge():
    grid = build_grid("101\n111\n111", 0, 3, 3)
    assert check_ext_col(grid) is False


def test_check_walls_valid_irregular_map():
    grid = map_creation(" 111\n11N1\n1001\n1111\n", 0)
    find_player(grid)
    result = check_walls(grid)
    assert result is grid
    assert not any(c == " " for row in grid for c in row)
    assert grid[0][0] == "x"


def test_check_walls_inner_space_becomes_void():
    grid = map_creation("1111\n1 01\n1N11\n1111\n", 0)
    find_player(grid)
    check_walls(grid)
    assert grid[1][1] == "x"


@pytest.mark.parametrize(
    "text",
    [
        "1111\n1N0 \n1111\n",
        "1111\n1N01\n1111\n\n",
        "1101\n1N01\n1111\n",
    ],
)
def test_check_walls_rejects_open_maps(text):
    grid = map_creation(text, 0)
    find_player(grid)
    with pytest.raises(ParsingError) as info:
        check_walls(grid)
    assert info.value.code == 7


def test_check_walls_rejects_gap_between_blocks():
    grid = build_grid("111  111\n101  101\n111  111", 0, 3, 8)
    with pytest.raises(ParsingError) as info:
        check_walls(grid)
    assert info.value.code == 7