import pytest

from cubraycast.errors import BmpError, CubError, DisplayError, ParsingError


@pytest.mark.parametrize(
    "code, message",
    [
        (1, "Wrong number of arguments."),
        (2, "The 2nd argument is not a .cub."),
        (13, "Parsing: wrong inputs for resolution."),
        (17, "Parsing: at least 2 walls have a similar texture."),
    ],
)
def test_parsing_messages(code, message):
    err = ParsingError(code)
    assert err.code == code
    assert err.message == message
    assert str(err) == message


def test_display_message():
    assert str(DisplayError(2)) == "Mlx: Image creation error."


def test_bmp_message():
    assert str(BmpError(1)) == "Bmp: Error occurs while creating save.bmp."


def test_unknown_codes_fall_back():
    assert str(BmpError(99)) == "Error not yet defined."
    assert str(DisplayError(99)) == "Error not yet defined."


def test_report_prefixes_error_line():
    assert ParsingError(16).report() == "Error\nParsing: map is too small."


@pytest.mark.parametrize(
    "error, code, message",
    [
        (ParsingError(4), 4, "Parsing: wrong inputs for at least one element."),
        (DisplayError(1), 1, "Mlx: Connection between software and display failed."),
        (BmpError(2), 2, "Bmp: Error occur while allocating memory."),
    ],
)
def test_all_are_cub_errors(error, code, message):
    with pytest.raises(CubError) as info:
        raise error
    assert info.value is error
    assert info.value.code == code
    assert str(info.value) == message