import pytest

from cubraycast.args import (
    check_arguments,
    check_save_flag,
    check_scene_path,
    check_texture_extension,
    check_texture_readable,
)
from cubraycast.errors import ParsingError


def test_scene_path_accepted():
    assert check_scene_path("maps/level.cub") == "maps/level.cub"


@pytest.mark.parametrize("path", [".cub", "a.cubx", "./maps/level.cub", "level", "a.b.cub"])
def test_scene_path_rejected(path):
    with pytest.raises(ParsingError) as info:
        check_scene_path(path)
    assert info.value.code == 2


def test_save_flag():
    assert check_save_flag("--save") is True
    with pytest.raises(ParsingError) as info:
        check_save_flag("--sav")
    assert info.value.code == 3


def test_check_arguments_plain():
    assert check_arguments(["map.cub"]) == ("map.cub", False)


def test_check_arguments_with_save():
    assert check_arguments(["map.cub", "--save"]) == ("map.cub", True)


@pytest.mark.parametrize("argv", [[], ["a.cub", "--save", "extra"]])
def test_check_arguments_count(argv):
    with pytest.raises(ParsingError) as info:
        check_arguments(argv)
    assert info.value.code == 1


def test_check_arguments_bad_flag():
    with pytest.raises(ParsingError) as info:
        check_arguments(["map.cub", "-save"])
    assert info.value.code == 3


@pytest.mark.parametrize(
    "path, expected",
    [
        ("./wall.xpm", True),
        ("textures/north.xpm", True),
        ("../wall.xpm", False),
        ("wall.png", False),
        (".xpm", False),
        ("a.b.xpm", False),
    ],
)
def test_texture_extension(path, expected):
    assert check_texture_extension(path) is expected


def test_texture_readable(tmp_path):
    texture = tmp_path / "wall.xpm"
    texture.write_bytes(b"x" * 10000)
    assert check_texture_readable(str(texture)) is True
    assert check_texture_readable(str(tmp_path / "missing.xpm")) is False