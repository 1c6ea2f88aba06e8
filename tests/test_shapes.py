"""Tests for SVG shape path generation."""

import pytest

from qrstyle.shapes import (
    CORNER,
    CORNER_DOT,
    CORNER_DOT_STYLES,
    CORNER_STYLES,
    DOT,
    DOT_STYLES,
    ShapeSettings,
    fmt_number,
    get_corner_dot_path,
    get_corner_path,
    get_dot_path,
    resolve_style,
)

ALL_STYLES = (
    [(get_dot_path, value) for value, _ in DOT_STYLES]
    + [(get_corner_path, value) for value, _ in CORNER_STYLES]
    + [(get_corner_dot_path, value) for value, _ in CORNER_DOT_STYLES]
)


@pytest.mark.parametrize("generator,style", ALL_STYLES)
def test_paths_are_closed(generator, style):
    d = generator(10, 20, 30, style)
    assert d
    assert d.startswith("M ")
    assert d.endswith("Z")
    assert "\n" not in d


def test_square():
    assert get_dot_path(10, 20, 5, "square") == "M 10 20 h 5 v 5 h -5 Z"


def test_circle():
    assert get_dot_path(0, 0, 10, "dots") == "M 5 0 a 5 5 0 1 1 0 10 a 5 5 0 1 1 0 -10 Z"
    assert get_corner_dot_path(0, 0, 10, "dot") == get_dot_path(0, 0, 10, "dots")


@pytest.mark.parametrize("generator,style,fraction", [
    (get_dot_path, "rounded", 0.25),
    (get_dot_path, "extra-rounded", 0.45),
    (get_corner_path, "dot", 0.2),
    (get_corner_path, "extra-rounded", 0.35),
])
def test_radius_fractions(generator, style, fraction):
    d = generator(0, 0, 100, style)
    r = fmt_number(100 * fraction)
    assert d.startswith(f"M {r} 0 ")
    assert d.count(f"a {r} {r} 0 0 1") == 4


def test_classy_rounds_top_right_only():
    d = get_dot_path(0, 0, 10, "classy")
    assert d == "M 0 0 h 6 a 4 4 0 0 1 4 4 v 6 h -10 Z"


def test_classy_rounded_keeps_bottom_left_sharp():
    d = get_dot_path(0, 0, 10, "classy-rounded")
    assert d.count("a 4 4 0 0 1") == 3
    # straight run along the bottom edge and up the left edge
    assert "h -6 v -6" in d


@pytest.mark.parametrize("generator", [get_dot_path, get_corner_path, get_corner_dot_path])
@pytest.mark.parametrize("bogus", ["bogus", "", None, 42, "SQUARE"])
def test_unknown_style_falls_back_to_square(generator, bogus):
    assert generator(3, 4, 7, bogus) == generator(3, 4, 7, "square")


def test_resolve_style():
    assert resolve_style(DOT, "classy") == "classy"
    assert resolve_style(CORNER, "classy") == "square"
    assert resolve_style(CORNER_DOT, "dot") == "dot"
    with pytest.raises(ValueError):
        resolve_style("frame", "square")


def test_fmt_number():
    assert fmt_number(12.0) == "12"
    assert fmt_number(-0.0) == "0"
    assert fmt_number(7.2) == "7.2"
    assert fmt_number(178 / 21) == "8.4762"
    assert fmt_number(-59.33333333) == "-59.3333"


def test_shape_settings_from_dict():
    camel = ShapeSettings.from_dict({"dotStyle": "dots", "cornerStyle": "dot", "cornerDotStyle": "dot"})
    snake = ShapeSettings.from_dict({"dot_style": "dots", "corner_style": "dot", "corner_dot_style": "dot"})
    assert camel == snake == ShapeSettings("dots", "dot", "dot")
    assert ShapeSettings.from_dict(None) == ShapeSettings()
    assert ShapeSettings.from_dict(camel.to_dict()) == camel
