"""Tests for finder pattern location."""

import pytest

from qrstyle.finder_patterns import (
    BOTTOM_LEFT,
    TOP_LEFT,
    TOP_RIGHT,
    count_finder_modules,
    get_finder_patterns,
    is_finder_inner_dot,
    is_finder_outer_ring,
    is_finder_pattern,
)

SIZES = [21, 25, 33, 57, 177]


@pytest.mark.parametrize("n", SIZES)
def test_exactly_147_finder_modules(n):
    assert count_finder_modules(n) == 3 * 49


@pytest.mark.parametrize("n", SIZES)
def test_anchors_in_fixed_order(n):
    finders = get_finder_patterns(n)
    assert [(f.position, f.x, f.y) for f in finders] == [
        (TOP_LEFT, 0, 0),
        (TOP_RIGHT, n - 7, 0),
        (BOTTOM_LEFT, 0, n - 7),
    ]


@pytest.mark.parametrize("n", SIZES)
def test_bottom_right_is_not_a_finder(n):
    for r in range(n - 7, n):
        for c in range(n - 7, n):
            assert not is_finder_pattern(r, c, n)


def test_block_edges():
    n = 21
    assert is_finder_pattern(6, 6, n)
    assert not is_finder_pattern(7, 0, n)
    assert not is_finder_pattern(0, 7, n)
    assert is_finder_pattern(0, 14, n)
    assert not is_finder_pattern(0, 13, n)
    assert is_finder_pattern(14, 0, n)
    assert not is_finder_pattern(13, 6, n)


def test_outer_ring_and_inner_dot():
    n = 25
    ring = [(r, c) for r in range(n) for c in range(n) if is_finder_outer_ring(r, c, n)]
    dots = [(r, c) for r in range(n) for c in range(n) if is_finder_inner_dot(r, c, n)]
    assert len(ring) == 3 * 24
    assert len(dots) == 3 * 9
    assert (0, 0) in ring and (3, 3) not in ring
    assert (3, 3) in dots and (2, n - 5) in dots and (n - 3, 4) in dots
    assert not is_finder_inner_dot(1, 1, n)


def test_matches_finder_modules_of_real_symbol(hello_matrix):
    n = len(hello_matrix)
    for r in range(n):
        for c in range(n):
            if is_finder_outer_ring(r, c, n) or is_finder_inner_dot(r, c, n):
                assert hello_matrix[r][c]
            elif is_finder_pattern(r, c, n):
                assert not hello_matrix[r][c]
