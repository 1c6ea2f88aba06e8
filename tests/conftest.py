"""Shared fixtures for the renderer tests."""

import re

import pytest

from qrstyle.qr_generator import build_matrix

PATH_D = re.compile(r'<path d="([^"]*)"')
MOVE = re.compile(r'M (-?[\d.]+) (-?[\d.]+)')


def path_data(svg):
    """All path 'd' attributes of an SVG string, in document order."""
    return PATH_D.findall(svg)


def move_points(d):
    """(x, y) of every move command in a path string."""
    return [(float(x), float(y)) for x, y in MOVE.findall(d)]


@pytest.fixture
def hello_matrix():
    return build_matrix("HELLO", ecc='M')


@pytest.fixture
def dark_matrix():
    """21x21 matrix with every module dark."""
    return [[True] * 21 for _ in range(21)]


@pytest.fixture
def client():
    from app import app

    app.config['TESTING'] = True
    with app.test_client() as c:
        yield c
