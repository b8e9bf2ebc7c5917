"""
Matrix: dense, row-major matrix container.

Storage is a flat numpy array of the element type plus an order
(rows, cols). Every construction path ends in Matrix.__init__, which
refuses any item count other than rows * cols, so the invariant
len(items) == rows * cols holds for every Matrix that exists.

Indices are 1-based. There are two read paths:

    m.get(i, j)   validated; raises IndexOutOfRangeError (a MatrixError)
    m[i, j]       convenience; an out-of-range index is a caller bug and
                  raises the built-in IndexError, which MatrixError
                  handlers do not catch

Usage:
    from densematrix import Matrix

    m = Matrix([1, 2, 3, 4, 5, 6], (3, 2))
    m.order          # (3, 2)
    m[3, 2]          # 6.0
    m.set(1, 1, 10)
    m.get_row(1)     # array([10., 2.])
"""

from __future__ import annotations

import operator
from typing import Any, Callable
import numpy as np
from numpy.typing import ArrayLike, NDArray

from densematrix.core.dtypes import as_element
from densematrix.core.exceptions import (
    DimensionError,
    DimensionMismatchError,
    NotSquareError,
    OrderMismatchError,
)
from densematrix.core.tolerances import DEFAULT_TOLERANCE, ToleranceTier
from densematrix.core.validation import (
    check_index,
    check_items,
    check_order,
    check_scalar,
    warn_non_finite,
)
from densematrix.matrices._format import render


def _round_half_away(values: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    # np.round rounds half to even; adding 0.5 before floor is inexact near 2**52
    whole = np.trunc(values)
    with np.errstate(invalid='ignore'):
        carry = np.where(np.abs(values - whole) >= 0.5, np.sign(values), 0.0)
    return whole + carry


class Matrix:
    """
    Dense matrix of ELEMENT_DTYPE values in row-major order.

    Construct directly from a flat sequence and an order, with
    Matrix.generate() / Matrix.from_nested(), or with the named factories
    in densematrix.matrices.factories.

    Raises (on construction):
        DimensionError: If order is not a pair of positive integers
        DimensionMismatchError: If len(items) != rows * cols
        ValidationError: If items are not real numbers
    """

    # mutable, so not hashable
    __hash__ = None

    def __init__(self, items: ArrayLike, order: tuple[int, int]):
        rows, cols = check_order(order)
        data = check_items(items, "items")
        if data.size != rows * cols:
            raise DimensionMismatchError(
                f"items: order {(rows, cols)} needs {rows * cols} items, got {data.size}",
                expected=rows * cols,
                actual=data.size,
            )
        warn_non_finite(data, "items")
        self._items = data
        self._order = (rows, cols)

    # === Alternative constructors ===

    @classmethod
    def generate(
        cls,
        f: Callable[[int, int], float],
        order: tuple[int, int],
    ) -> Matrix:
        """
        Build a matrix whose element at (i, j) is f(i, j).

        f is called with 1-based ints, row by row, left to right.

        Example:
            >>> m = Matrix.generate(lambda i, j: i * i + 3 * j - 7, (5, 5))
            >>> m[3, 3]
            11.0
        """
        rows, cols = check_order(order)
        items = [
            check_scalar(f(i, j), f"f({i}, {j})")
            for i in range(1, rows + 1)
            for j in range(1, cols + 1)
        ]
        return cls(items, (rows, cols))

    @classmethod
    def from_nested(cls, rows: ArrayLike) -> Matrix:
        """
        Build a matrix from a sequence of equal-length rows.

        Raises:
            DimensionError: If there are no rows
            DimensionMismatchError: If the rows have different lengths
        """
        try:
            rows = [list(row) for row in rows]
        except TypeError as e:
            raise DimensionError(f"rows: expected a sequence of rows: {e}") from e
        if not rows:
            raise DimensionError("rows: need at least one row, got 0")
        lengths = [len(row) for row in rows]
        if len(set(lengths)) > 1:
            raise DimensionMismatchError(
                f"rows: all rows must have the same length, got lengths {lengths}",
                expected=lengths[0] * len(rows),
                actual=sum(lengths),
            )
        items = [value for row in rows for value in row]
        return cls(items, (len(rows), lengths[0]))

    # === Properties ===

    @property
    def order(self) -> tuple[int, int]:
        """(rows, cols)."""
        return self._order

    @property
    def rows(self) -> int:
        return self._order[0]

    @property
    def cols(self) -> int:
        return self._order[1]

    @property
    def size(self) -> int:
        """Number of stored elements (rows * cols)."""
        return self._items.size

    @property
    def items(self) -> NDArray[np.floating[Any]]:
        """Copy of the flat row-major storage."""
        return self._items.copy()

    # === Shape queries ===

    def is_square(self) -> bool:
        return self._order[0] == self._order[1]

    def is_horizontal(self) -> bool:
        """More columns than rows."""
        return self._order[1] > self._order[0]

    def is_vertical(self) -> bool:
        """More rows than columns."""
        return self._order[0] > self._order[1]

    # === Element access ===

    def _offset(self, i: int, j: int) -> int:
        return (i - 1) * self._order[1] + (j - 1)

    def _position(self, key: Any) -> tuple[int, int]:
        """Unpack and bounds-check a subscript for the convenience operators."""
        try:
            i, j = key
        except (TypeError, ValueError):
            raise TypeError(
                f"Matrix subscript must be a (row, column) pair, got {key!r}"
            ) from None
        if isinstance(i, (bool, np.bool_)) or isinstance(j, (bool, np.bool_)):
            raise TypeError(f"Matrix indices must be integers, not bool: {key!r}")
        i, j = operator.index(i), operator.index(j)
        rows, cols = self._order
        if not (1 <= i <= rows and 1 <= j <= cols):
            raise IndexError(
                f"Matrix index ({i}, {j}) out of range for order {self._order}"
            )
        return i, j

    def get(self, i: int, j: int) -> np.float64:
        """
        Element at row i, column j (1-based).

        Raises:
            IndexOutOfRangeError: If i is not in [1, rows] or j not in [1, cols]
        """
        i = check_index(i, self._order[0], "row")
        j = check_index(j, self._order[1], "column")
        return self._items[self._offset(i, j)]

    def set(self, i: int, j: int, value: float) -> None:
        """
        Replace the element at row i, column j (1-based) in place.

        The matrix is left untouched if the indices or value are invalid.

        Raises:
            IndexOutOfRangeError: If i is not in [1, rows] or j not in [1, cols]
            ValidationError: If value is not a real scalar
        """
        i = check_index(i, self._order[0], "row")
        j = check_index(j, self._order[1], "column")
        value = check_scalar(value, "value")
        warn_non_finite(np.array([value]), "value")
        self._items[self._offset(i, j)] = value

    def __getitem__(self, key: tuple[int, int]) -> np.float64:
        """
        m[i, j] with 1-based indices.

        Precondition: 1 <= i <= rows and 1 <= j <= cols. Violating it is
        a programming error and raises the built-in IndexError, not a
        MatrixError. Use get() when the indices are not known to be valid.
        """
        i, j = self._position(key)
        return self._items[self._offset(i, j)]

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        """m[i, j] = value, with the same precondition as m[i, j]."""
        i, j = self._position(key)
        value = as_element(value)
        warn_non_finite(np.array([value]), "value")
        self._items[self._offset(i, j)] = value

    # === Row / column extraction ===

    def get_row(self, i: int) -> NDArray[np.floating[Any]]:
        """
        Elements (i, 1) .. (i, cols) as a new array.

        Raises:
            IndexOutOfRangeError: If i is not in [1, rows]
        """
        i = check_index(i, self._order[0], "row")
        cols = self._order[1]
        return self._items[(i - 1) * cols:i * cols].copy()

    def get_column(self, j: int) -> NDArray[np.floating[Any]]:
        """
        Elements (1, j) .. (rows, j) as a new array.

        Raises:
            IndexOutOfRangeError: If j is not in [1, cols]
        """
        j = check_index(j, self._order[1], "column")
        return self._items[j - 1::self._order[1]].copy()

    def trace(self) -> NDArray[np.floating[Any]]:
        """
        Diagonal elements (1, 1) .. (n, n) of a square matrix, in row order.

        Raises:
            NotSquareError: If rows != cols
        """
        rows, cols = self._order
        if rows != cols:
            raise NotSquareError(
                f"trace exists only for square matrices, got order {self._order}",
                order=self._order,
            )
        return self._items[::cols + 1].copy()

    # === Derived matrices ===

    def copy(self) -> Matrix:
        return Matrix(self._items, self._order)

    def to_numpy(self) -> NDArray[np.floating[Any]]:
        """2D (rows, cols) copy of the data."""
        return self._items.reshape(self._order).copy()

    def transpose(self) -> Matrix:
        """New matrix of order (cols, rows) with element (i, j) = self(j, i)."""
        rows, cols = self._order
        return Matrix(self._items.reshape(rows, cols).T.ravel(), (cols, rows))

    def round(self) -> Matrix:
        """New matrix with every element rounded to the nearest integer, halves away from zero."""
        return Matrix(_round_half_away(self._items), self._order)

    def round_inplace(self) -> None:
        """Round every element of this matrix, as round() does."""
        self._items[:] = _round_half_away(self._items)

    # === Element-wise arithmetic ===

    def _check_same_order(self, other: Matrix, op: str) -> None:
        if self._order != other._order:
            raise OrderMismatchError(
                f"'{op}' needs matrices of the same order, got {self._order} and {other._order}",
                left=self._order,
                right=other._order,
            )

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_order(other, "+")
        return Matrix(self._items + other._items, self._order)

    def __sub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_order(other, "-")
        return Matrix(self._items - other._items, self._order)

    def __iadd__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_order(other, "+=")
        self._items += other._items
        warn_non_finite(self._items, "result")
        return self

    def __isub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_order(other, "-=")
        self._items -= other._items
        warn_non_finite(self._items, "result")
        return self

    # === Comparison ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._order == other._order and bool(
            np.array_equal(self._items, other._items)
        )

    def allclose(
        self,
        other: Matrix,
        tolerance: ToleranceTier = DEFAULT_TOLERANCE,
    ) -> bool:
        """
        True if both matrices have the same order and every pair of
        elements agrees within the tolerance tier. NaN never matches.
        """
        if not isinstance(other, Matrix):
            raise TypeError(
                f"allclose() expects a Matrix, got {type(other).__name__}"
            )
        if self._order != other._order:
            return False
        return bool(
            np.allclose(
                self._items,
                other._items,
                rtol=tolerance.rtol,
                atol=tolerance.atol,
            )
        )

    # === Display ===

    def __str__(self) -> str:
        return render(self._items, self._order)

    def __repr__(self) -> str:
        return f"Matrix(order={self._order}, items={self._items.tolist()})"
