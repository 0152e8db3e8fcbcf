"""Shared test fixtures."""

import pytest


@pytest.fixture
def crossing_lines() -> tuple[list[list[float]], list[list[float]]]:
    """A horizontal and a vertical segment that cross at (1, 1)."""
    line1 = [[0, 1], [2, 1]]
    line2 = [[1, 0], [1, 2]]
    return line1, line2


@pytest.fixture
def diverging_lines() -> tuple[list[list[float]], list[list[float]]]:
    """Two segments whose extensions meet at (2, 2), beyond both segments."""
    line1 = [[0, 0], [1, 1]]
    line2 = [[0, 4], [1, 3]]
    return line1, line2


@pytest.fixture
def parallel_lines() -> tuple[list[list[float]], list[list[float]]]:
    """Two horizontal segments that never meet."""
    line1 = [[0, 1], [2, 1]]
    line2 = [[0, 5], [2, 5]]
    return line1, line2
