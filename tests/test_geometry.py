import pytest

from AWE.errors import InvalidArgument
from AWE.SAM.spacer import GAP
from AWE.SRM.geometry import (
    CLEAR, bar_rect, line_height_factor, parse_color, path_extent,
    round_half_up, vertical_extent,
)


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(-2.5) == -3
    assert round_half_up(0.49) == 0
    assert round_half_up(7.0) == 7


def test_bar_rect_is_centred():
    assert bar_rect(0.5, 2, 100, 1, 3) == (6, 25.0, 1, 50)
    assert bar_rect(1, 0, 100, 1, 3) == (0, 0.0, 1, 100)
    assert bar_rect(0.33, 0, 100, 1, 3) == (0, 33.5, 1, 33)


def test_vertical_extent():
    assert vertical_extent(0.5, 100) == (25, 75)
    assert vertical_extent(0, 100) == (50, 50)
    assert vertical_extent(2.0, 10) == (-5, 15)


def test_path_extent():
    assert path_extent(0.5, 140.0) == (-70, 70)


def test_line_height_factor():
    assert line_height_factor([0.25, GAP, 0.5], 280) == 280.0
    assert line_height_factor([0, 0], 280) == 0.0
    assert line_height_factor([GAP, GAP], 280) == 0.0


def test_parse_color():
    assert parse_color("#00ff00") == (0, 255, 0, 255)
    assert parse_color("Transparent") == CLEAR
    with pytest.raises(InvalidArgument):
        parse_color("#nothex")
