"""
Named canonical matrices.

Each factory computes flat row-major items and an order, then hands
both to the Matrix constructor, which performs the usual count check.

Public API:
    row_matrix(items)           - (1, n)
    column_matrix(items)        - (n, 1)
    null_matrix(order)          - all zeros
    square_matrix(items)        - (k, k) with k * k == n
    diagonal_matrix(items)      - items on the diagonal, zeros elsewhere
    scalar_matrix(value, size)  - one value repeated on the diagonal
    identity_matrix(size)       - ones on the diagonal
"""

from __future__ import annotations

import math
import numpy as np
from numpy.typing import ArrayLike

from densematrix.core.dtypes import ELEMENT_DTYPE, zero, one
from densematrix.core.exceptions import NotSquareError
from densematrix.core.validation import (
    check_dimension,
    check_items,
    check_order,
    check_scalar,
)
from densematrix.matrices.matrix import Matrix


def row_matrix(items: ArrayLike) -> Matrix:
    """
    Matrix with a single row.

    Example:
        >>> m = row_matrix([1, 2, 3, 4, 5, 6, 7])
        >>> m.order
        (1, 7)
        >>> m[1, 5]
        5.0
    """
    data = check_items(items, "items")
    return Matrix(data, (1, data.size))


def column_matrix(items: ArrayLike) -> Matrix:
    """Matrix with a single column."""
    data = check_items(items, "items")
    return Matrix(data, (data.size, 1))


def null_matrix(order: tuple[int, int]) -> Matrix:
    """Matrix of the given order with every element zero."""
    rows, cols = check_order(order)
    return Matrix(np.full(rows * cols, zero(), dtype=ELEMENT_DTYPE), (rows, cols))


def square_matrix(items: ArrayLike) -> Matrix:
    """
    Arrange n items row by row into a k x k matrix, k = sqrt(n).

    Raises:
        NotSquareError: If n is not a perfect square
    """
    data = check_items(items, "items")
    size = math.isqrt(data.size)
    if size * size != data.size:
        raise NotSquareError(
            f"items: {data.size} items cannot be arranged in a square",
            expected=size * size,
            actual=data.size,
        )
    return Matrix(data, (size, size))


def diagonal_matrix(items: ArrayLike) -> Matrix:
    """
    n x n matrix with items along the diagonal and zeros elsewhere.

    Element (i, i) is items[i - 1].
    """
    data = check_items(items, "items")
    n = data.size
    grid = np.full((n, n), zero(), dtype=ELEMENT_DTYPE)
    np.fill_diagonal(grid, data)
    return Matrix(grid.ravel(), (n, n))


def scalar_matrix(value: float, size: int) -> Matrix:
    """
    size x size diagonal matrix with every diagonal element equal to value.

    Example:
        >>> m = scalar_matrix(5, 6)
        >>> m[3, 3], m[3, 4]
        (5.0, 0.0)
    """
    value = check_scalar(value, "value")
    size = check_dimension(size, "size")
    return diagonal_matrix(np.full(size, value, dtype=ELEMENT_DTYPE))


def identity_matrix(size: int) -> Matrix:
    """size x size matrix with ones on the diagonal."""
    return scalar_matrix(one(), size)
