"""Shared grid fixtures."""

from __future__ import annotations

import pytest

from square_percolation import SquarePercolation


@pytest.fixture
def grid5() -> SquarePercolation:
    return SquarePercolation(5)


@pytest.fixture
def backwash_grid() -> SquarePercolation:
    """3x3 grid with a top-to-bottom column on the left and an isolated
    bottom-row site on the right that only touches the virtual bottom."""
    perc = SquarePercolation(3)
    for row, col in [(1, 1), (2, 1), (3, 1), (3, 3)]:
        perc.open_site(row, col)
    return perc
