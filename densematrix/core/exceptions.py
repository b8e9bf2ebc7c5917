"""
Exception hierarchy for densematrix.

All exceptions inherit from MatrixError to allow catching any
library-specific error. Each exception carries the offending values as
attributes so callers can recover without parsing messages.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information

The convenience indexing operator (``matrix[i, j]``) deliberately raises
the built-in IndexError instead of anything defined here: an out-of-range
subscript is a caller bug, not a recoverable condition, and
``except MatrixError`` must not hide it.
"""


class MatrixError(Exception):
    """Base exception for all densematrix errors."""
    pass


class ValidationError(MatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Raised when an order is not a pair of positive integers, or when
    the data supplied cannot be arranged in the requested shape.
    """
    pass


class DimensionMismatchError(DimensionError):
    """
    Number of items does not match the declared order.

    Attributes:
        expected: Item count required by the order (rows * cols)
        actual: Item count supplied
    """

    def __init__(
        self,
        message: str,
        expected: int | None = None,
        actual: int | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class NotSquareError(DimensionMismatchError):
    """
    Operation requires a square matrix.

    Raised by trace() on a non-square matrix and by square_matrix() when
    the item count has no integer square root.

    Attributes:
        order: Order of the offending matrix, if one exists
    """

    def __init__(
        self,
        message: str,
        order: tuple[int, int] | None = None,
        expected: int | None = None,
        actual: int | None = None,
    ):
        super().__init__(message, expected=expected, actual=actual)
        self.order = order


class OrderMismatchError(DimensionError):
    """
    Operands of an element-wise operation have different orders.

    Attributes:
        left: Order of the left operand
        right: Order of the right operand
    """

    def __init__(
        self,
        message: str,
        left: tuple[int, int] | None = None,
        right: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.left = left
        self.right = right


class IndexOutOfRangeError(ValidationError):
    """
    A 1-based row or column index is outside the matrix.

    Attributes:
        index: The index that was supplied
        bound: Largest valid index on that axis
        axis: 'row' or 'column'
    """

    def __init__(
        self,
        message: str,
        index: int | None = None,
        bound: int | None = None,
        axis: str | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.bound = bound
        self.axis = axis


class NonFiniteWarning(UserWarning):
    """Issued when NaN or Inf values are stored in a matrix."""
    pass
