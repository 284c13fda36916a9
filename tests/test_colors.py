import pytest

from tagcloud.colors import parse_color
from tagcloud.exceptions import ColorParseError


@pytest.mark.parametrize("text", [None, "", "   "])
def test_blank_input_gives_none(text):
    assert parse_color(text) is None


def test_invalid_format_raises():
    with pytest.raises(ColorParseError, match="Invalid color format"):
        parse_color("invalid")


def test_out_of_range_components_raise():
    with pytest.raises(ColorParseError):
        parse_color("256,0,0")


def test_named_colors_ignore_case():
    assert parse_color("Red") == (255, 0, 0, 255)
    assert parse_color("GREEN") == (0, 128, 0, 255)
    assert parse_color("indigo") == (75, 0, 130, 255)


def test_hex_colors():
    assert parse_color("#FF0000") == (255, 0, 0, 255)
    assert parse_color("00ff00") == (0, 255, 0, 255)
    assert parse_color("#0f0") == (0, 255, 0, 255)
    # AARRGGBB
    assert parse_color("#800000FF") == (0, 0, 255, 128)


def test_rgb_and_argb_colors():
    assert parse_color("255,0,0") == (255, 0, 0, 255)
    assert parse_color(" 0 , 255 , 0 ") == (0, 255, 0, 255)
    assert parse_color("255,255,0,0") == (255, 0, 0, 255)
    assert parse_color("10,1,2,3") == (1, 2, 3, 10)
