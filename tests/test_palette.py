"""Unit tests for the trail level / color mapping."""

import pytest

from contribant.palette import (
    ANT_COLOR,
    BACKGROUND_COLOR,
    MARKER_COLOR,
    TRAIL_COLORS,
    color_to_level,
    level_to_color,
)


def test_level_color_round_trip():
    for level in range(5):
        assert color_to_level(level_to_color(level)) == level


def test_fixed_colors():
    assert level_to_color(0) == BACKGROUND_COLOR
    assert [level_to_color(level) for level in (1, 2, 3)] == list(TRAIL_COLORS)
    assert level_to_color(4) == MARKER_COLOR


def test_unknown_colors_read_as_empty():
    assert color_to_level("#123456") == 0
    assert color_to_level(ANT_COLOR) == 0
    assert color_to_level("") == 0
    assert color_to_level(None) == 0


def test_color_lookup_ignores_case():
    assert color_to_level(MARKER_COLOR.upper()) == 4


def test_level_out_of_range_rejected():
    with pytest.raises(ValueError):
        level_to_color(5)
    with pytest.raises(ValueError):
        level_to_color(-1)


