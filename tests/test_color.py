import pytest
from hypothesis import given
from hypothesis import strategies as st

from rtaviz.visualization.color import COLOR_GRADIENT, Color, ColorGradient


def test_color_display_format():
    assert str(Color(1, 2, 255, 16)) == "#0102FF10"


def test_endpoints_and_middle():
    assert str(COLOR_GRADIENT.color(0.0)) == "#2E8B57FF"
    assert str(COLOR_GRADIENT.color(0.5)) == "#FFD700FF"
    assert str(COLOR_GRADIENT.color(1.0)) == "#FF0000FF"


def test_values_outside_range_are_clamped():
    assert COLOR_GRADIENT.color(-3.0) == COLOR_GRADIENT.color(0.0)
    assert COLOR_GRADIENT.color(7.0) == COLOR_GRADIENT.color(1.0)


def test_color_for_range_scales():
    assert COLOR_GRADIENT.color_for_range(5, 0, 10) == COLOR_GRADIENT.color(0.5)
    assert COLOR_GRADIENT.color_for_range(10, 10, 20) == COLOR_GRADIENT.color(0.0)
    assert COLOR_GRADIENT.color_for_range(20, 10, 20) == COLOR_GRADIENT.color(1.0)


def test_color_for_range_degenerate():
    assert COLOR_GRADIENT.color_for_range(6, 5, 5) == COLOR_GRADIENT.color(1.0)
    assert COLOR_GRADIENT.color_for_range(4, 5, 5) == COLOR_GRADIENT.color(0.0)
    assert COLOR_GRADIENT.color_for_range(5, 5, 5) == Color(0, 0, 0, 255)


def test_unknown_colour_name_rejected():
    with pytest.raises(ValueError):
        ColorGradient(["seagreen", "nosuchcolour"])


@given(st.floats(min_value=0.0, max_value=1.0))
def test_alpha_is_opaque_and_red_at_least_seagreen(value):
    color = COLOR_GRADIENT.color(value)
    assert color.a == 255
    assert color.r >= COLOR_GRADIENT.color(0.0).r


@given(st.floats(min_value=0.0, max_value=0.5), st.floats(min_value=0.0, max_value=0.5))
def test_red_channel_monotone_in_first_half(a, b):
    low, high = sorted((a, b))
    assert COLOR_GRADIENT.color(low).r <= COLOR_GRADIENT.color(high).r


@given(st.floats(min_value=0.5, max_value=1.0), st.floats(min_value=0.5, max_value=1.0))
def test_green_channel_decreases_in_second_half(a, b):
    low, high = sorted((a, b))
    assert COLOR_GRADIENT.color(low).g >= COLOR_GRADIENT.color(high).g