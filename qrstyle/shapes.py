# -*- coding: utf-8 -*-
"""
QR Code Shape Module

This module provides the SVG path generators for the three independent
stylistic axes of a rendered QR code: data dots, finder pattern outer
corners and finder pattern center dots.

Every generator receives the top-left corner ``(x, y)`` of the primitive and
its side length, and returns a single closed path fragment (``M ... Z``)
that renders correctly under both the nonzero and evenodd fill rules.

Functions:
    get_dot_path: Path for one data module
    get_corner_path: Path for the 7x7 outer ring of a finder pattern
    get_corner_dot_path: Path for the 3x3 center of a finder pattern
    resolve_style: Effective style name after the square fallback
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional

# Style families
DOT = 'dot'
CORNER = 'corner'
CORNER_DOT = 'cornerDot'

DEFAULT_STYLE = 'square'

# Style choices with labels for pickers, in display order
DOT_STYLES = (
    ('square', 'Square'),
    ('rounded', 'Rounded'),
    ('dots', 'Dots'),
    ('classy', 'Classy'),
    ('classy-rounded', 'Classy Rounded'),
    ('extra-rounded', 'Extra Rounded'),
)

CORNER_STYLES = (
    ('square', 'Square'),
    ('dot', 'Rounded'),
    ('extra-rounded', 'Extra Rounded'),
)

CORNER_DOT_STYLES = (
    ('square', 'Square'),
    ('dot', 'Dot'),
)

# Corner radius as a fraction of the primitive size
DOT_RADIUS = MappingProxyType({
    'rounded': 0.25,
    'classy': 0.4,
    'classy-rounded': 0.4,
    'extra-rounded': 0.45,
})

CORNER_RADIUS = MappingProxyType({
    'dot': 0.2,
    'extra-rounded': 0.35,
})


@dataclass(frozen=True)
class ShapeSettings:
    """Independent style choices for dots, corners and corner dots."""

    dot_style: str = DEFAULT_STYLE
    corner_style: str = DEFAULT_STYLE
    corner_dot_style: str = DEFAULT_STYLE

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> 'ShapeSettings':
        """
        Build settings from a mapping using either camelCase or snake_case keys.

        Missing keys keep the square default.

        Example:
            >>> ShapeSettings.from_dict({'dotStyle': 'dots', 'corner_style': 'dot'})
            ShapeSettings(dot_style='dots', corner_style='dot', corner_dot_style='square')
        """
        data = data or {}

        def pick(snake: str, camel: str) -> str:
            value = data.get(snake, data.get(camel))
            return str(value) if value else DEFAULT_STYLE

        return cls(
            dot_style=pick('dot_style', 'dotStyle'),
            corner_style=pick('corner_style', 'cornerStyle'),
            corner_dot_style=pick('corner_dot_style', 'cornerDotStyle'),
        )

    def to_dict(self) -> Dict[str, str]:
        return {
            'dotStyle': self.dot_style,
            'cornerStyle': self.corner_style,
            'cornerDotStyle': self.corner_dot_style,
        }


DEFAULT_SHAPE_SETTINGS = ShapeSettings()


def fmt_number(value: float) -> str:
    """
    Format a coordinate for SVG output.

    Integral values are written without a decimal point, everything else is
    rounded to 4 decimal places so the same geometry always yields the same
    text.

    Example:
        >>> fmt_number(12.0), fmt_number(7.2), fmt_number(1 / 3)
        ('12', '7.2', '0.3333')
    """
    rounded = round(float(value), 4)
    if rounded == int(rounded):
        return str(int(rounded))
    return repr(rounded)


def _path(*parts: Any) -> str:
    """Join commands and numbers into one path fragment."""
    return ' '.join(p if isinstance(p, str) else fmt_number(p) for p in parts)


# --------------------------------------------------------------------
#  Primitive outlines shared by all families
# --------------------------------------------------------------------

def _square(x: float, y: float, size: float) -> str:
    return _path('M', x, y, 'h', size, 'v', size, 'h', -size, 'Z')


def _circle(x: float, y: float, size: float) -> str:
    # Two half arcs from the top center down and back up
    half = size / 2
    return _path(
        'M', x + half, y,
        'a', half, half, 0, 1, 1, 0, size,
        'a', half, half, 0, 1, 1, 0, -size,
        'Z',
    )


def _rounded_rect(x: float, y: float, size: float, r: float) -> str:
    """Square with all four corners rounded, drawn clockwise from the top edge."""
    edge = size - 2 * r
    return _path(
        'M', x + r, y,
        'h', edge,
        'a', r, r, 0, 0, 1, r, r,
        'v', edge,
        'a', r, r, 0, 0, 1, -r, r,
        'h', -edge,
        'a', r, r, 0, 0, 1, -r, -r,
        'v', -edge,
        'a', r, r, 0, 0, 1, r, -r,
        'Z',
    )


# --------------------------------------------------------------------
#  Data dots
# --------------------------------------------------------------------

def _dot_rounded(x: float, y: float, size: float) -> str:
    return _rounded_rect(x, y, size, size * DOT_RADIUS['rounded'])


def _dot_classy(x: float, y: float, size: float) -> str:
    # Only the top-right corner is rounded
    r = size * DOT_RADIUS['classy']
    return _path(
        'M', x, y,
        'h', size - r,
        'a', r, r, 0, 0, 1, r, r,
        'v', size - r,
        'h', -size,
        'Z',
    )


def _dot_classy_rounded(x: float, y: float, size: float) -> str:
    # Bottom-left corner stays sharp
    r = size * DOT_RADIUS['classy-rounded']
    edge = size - 2 * r
    return _path(
        'M', x + r, y,
        'h', edge,
        'a', r, r, 0, 0, 1, r, r,
        'v', edge,
        'a', r, r, 0, 0, 1, -r, r,
        'h', -(size - r),
        'v', -(size - r),
        'a', r, r, 0, 0, 1, r, -r,
        'Z',
    )


def _dot_extra_rounded(x: float, y: float, size: float) -> str:
    return _rounded_rect(x, y, size, size * DOT_RADIUS['extra-rounded'])


DOT_PATHS: Mapping[str, Callable[[float, float, float], str]] = MappingProxyType({
    'square': _square,
    'rounded': _dot_rounded,
    'dots': _circle,
    'classy': _dot_classy,
    'classy-rounded': _dot_classy_rounded,
    'extra-rounded': _dot_extra_rounded,
})


# --------------------------------------------------------------------
#  Finder corners (7x7 outer ring) and corner dots (3x3 center)
# --------------------------------------------------------------------

def _corner_dot(x: float, y: float, size: float) -> str:
    return _rounded_rect(x, y, size, size * CORNER_RADIUS['dot'])


def _corner_extra_rounded(x: float, y: float, size: float) -> str:
    return _rounded_rect(x, y, size, size * CORNER_RADIUS['extra-rounded'])


CORNER_PATHS: Mapping[str, Callable[[float, float, float], str]] = MappingProxyType({
    'square': _square,
    'dot': _corner_dot,
    'extra-rounded': _corner_extra_rounded,
})

CORNER_DOT_PATHS: Mapping[str, Callable[[float, float, float], str]] = MappingProxyType({
    'square': _square,
    'dot': _circle,
})

_FAMILIES = MappingProxyType({
    DOT: DOT_PATHS,
    CORNER: CORNER_PATHS,
    CORNER_DOT: CORNER_DOT_PATHS,
})


def _lookup(table: Mapping[str, Callable[[float, float, float], str]],
            style: Any) -> Callable[[float, float, float], str]:
    generator = table.get(style) if isinstance(style, str) else None
    return generator or table[DEFAULT_STYLE]


def resolve_style(family: str, style: Any) -> str:
    """
    Return the style name actually drawn for ``style`` in ``family``.

    Raises:
        ValueError: If ``family`` is not one of 'dot', 'corner', 'cornerDot'
    """
    if family not in _FAMILIES:
        raise ValueError(f"Unknown style family: {family!r}")
    if isinstance(style, str) and style in _FAMILIES[family]:
        return style
    return DEFAULT_STYLE


def get_dot_path(x: float, y: float, size: float, style: str) -> str:
    """
    Build the path for one data module.

    Args:
        x (float): Left edge in pixels
        y (float): Top edge in pixels
        size (float): Module side length in pixels
        style (str): One of DOT_STYLES; anything else draws a square

    Returns:
        str: Closed path fragment starting with 'M' and ending with 'Z'
    """
    return _lookup(DOT_PATHS, style)(x, y, size)


def get_corner_path(x: float, y: float, size: float, style: str) -> str:
    """Build the outline of a finder pattern block (7x7 or its 5x5 separator)."""
    return _lookup(CORNER_PATHS, style)(x, y, size)


def get_corner_dot_path(x: float, y: float, size: float, style: str) -> str:
    """Build the 3x3 center of a finder pattern."""
    return _lookup(CORNER_DOT_PATHS, style)(x, y, size)
