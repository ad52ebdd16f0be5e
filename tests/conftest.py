"""Pytest configuration and shared fixtures."""

import numpy as np
import pytest


def art(*rows):
    """Build a uint8 mask from strings: '#' is foreground, anything else background."""
    return np.array([[1 if c == "#" else 0 for c in row] for row in rows], dtype=np.uint8)


@pytest.fixture
def make_mask():
    return art


@pytest.fixture
def ring():
    """3x3 square ring around one background pixel, one pixel margin."""
    return art(
        ".....",
        ".###.",
        ".#.#.",
        ".###.",
        ".....",
    )


@pytest.fixture
def diamond():
    """Diagonal ring whose hole sits right under the first pixel of the blob."""
    return art(
        "..#..",
        ".#.#.",
        "..#..",
    )


@pytest.fixture
def rectangle():
    """Filled 4x3 rectangle at (1, 1) in a 6x5 image."""
    m = np.zeros((5, 6), np.uint8)
    m[1:4, 1:5] = 1
    return m
