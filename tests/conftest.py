"""
pytest configuration and shared fixtures.
"""

import pytest

from densematrix import Matrix


@pytest.fixture
def rect_matrix():
    """3 x 2 matrix holding 1..6 row by row."""
    return Matrix([1, 2, 3, 4, 5, 6], (3, 2))


@pytest.fixture
def square_4x4():
    """4 x 4 matrix with diagonal 6, 89, 45, 9."""
    return Matrix([6, 4, 87, 3, 6, 89, 6, 8, 4, 2, 45, 2, 5, 7, 9, 9], (4, 4))


@pytest.fixture
def tall_matrix():
    """5 x 3 matrix, element (i, j) = 10 * i + j."""
    return Matrix.generate(lambda i, j: 10 * i + j, (5, 3))
