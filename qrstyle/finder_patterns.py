# -*- coding: utf-8 -*-
"""
QR Code Finder Pattern Module

This module locates the three finder patterns of a QR code according to
ISO/IEC 18004. A finder pattern is a 7x7 block made of a dark outer ring,
a light one-module separator ring and a dark 3x3 center:

    1111111
    1000001
    1011101
    1011101
    1011101
    1000001
    1111111

Finder patterns sit in the top-left, top-right and bottom-left corners.
The bottom-right corner never holds one.

Functions:
    is_finder_pattern: Check whether a module belongs to a finder pattern
    get_finder_patterns: Anchor positions of the three finder patterns
    is_finder_outer_ring: Check whether a module is on a finder's outer ring
    is_finder_inner_dot: Check whether a module is in a finder's 3x3 center
"""

from typing import List, NamedTuple

FINDER_SIZE = 7
SEPARATOR_SIZE = 5
CENTER_SIZE = 3

TOP_LEFT = 'top-left'
TOP_RIGHT = 'top-right'
BOTTOM_LEFT = 'bottom-left'


class FinderPattern(NamedTuple):
    """Top-left module of a finder pattern: x is the column, y the row."""

    position: str
    x: int
    y: int


def get_finder_patterns(module_count: int) -> List[FinderPattern]:
    """
    Return the anchors of the three finder patterns.

    The order is always top-left, top-right, bottom-left.

    Args:
        module_count (int): Matrix size in modules (odd, >= 21)

    Returns:
        List[FinderPattern]: Three anchors in (column, row) coordinates

    Example:
        >>> [tuple(f) for f in get_finder_patterns(21)]
        [('top-left', 0, 0), ('top-right', 14, 0), ('bottom-left', 0, 14)]
    """
    far = module_count - FINDER_SIZE
    return [
        FinderPattern(TOP_LEFT, 0, 0),
        FinderPattern(TOP_RIGHT, far, 0),
        FinderPattern(BOTTOM_LEFT, 0, far),
    ]


def is_finder_pattern(row: int, col: int, module_count: int) -> bool:
    """
    Check whether module (row, col) lies inside one of the 7x7 finder blocks.

    Args:
        row (int): Module row
        col (int): Module column
        module_count (int): Matrix size in modules (odd, >= 21)

    Returns:
        bool: True for the top-left, top-right and bottom-left blocks
    """
    far = module_count - FINDER_SIZE
    if row < FINDER_SIZE and col < FINDER_SIZE:
        return True
    if row < FINDER_SIZE and col >= far:
        return True
    if row >= far and col < FINDER_SIZE:
        return True
    return False


def _local(row: int, col: int, module_count: int):
    """Coordinates of (row, col) relative to its finder anchor, or None."""
    for finder in get_finder_patterns(module_count):
        r = row - finder.y
        c = col - finder.x
        if 0 <= r < FINDER_SIZE and 0 <= c < FINDER_SIZE:
            return r, c
    return None


def is_finder_outer_ring(row: int, col: int, module_count: int) -> bool:
    """Check whether module (row, col) is on the dark border of a finder block."""
    local = _local(row, col, module_count)
    if local is None:
        return False
    r, c = local
    return r in (0, FINDER_SIZE - 1) or c in (0, FINDER_SIZE - 1)


def is_finder_inner_dot(row: int, col: int, module_count: int) -> bool:
    """Check whether module (row, col) is in the 3x3 center of a finder block."""
    local = _local(row, col, module_count)
    if local is None:
        return False
    r, c = local
    return 2 <= r <= 4 and 2 <= c <= 4


def count_finder_modules(module_count: int) -> int:
    """Number of modules flagged by is_finder_pattern (147 for any valid size)."""
    return sum(
        1
        for r in range(module_count)
        for c in range(module_count)
        if is_finder_pattern(r, c, module_count)
    )
