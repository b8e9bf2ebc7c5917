"""
Input validation utilities for densematrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import operator
import warnings

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from densematrix.core.dtypes import ELEMENT_DTYPE, as_element
from densematrix.core.exceptions import (
    DimensionError,
    IndexOutOfRangeError,
    NonFiniteWarning,
    ValidationError,
)


def check_items(
    items: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a flat array of the element type.

    Accepts any one-dimensional array-like. Rejects inputs that result in
    object dtype (indicating mixed types or non-numeric data).

    Args:
        items: Input to validate
        name: Parameter name for error messages

    Returns:
        A new 1D numpy.ndarray of ELEMENT_DTYPE

    Raises:
        ValidationError: If input cannot be converted to a numeric array
        DimensionError: If input is not one-dimensional
    """
    try:
        result = np.asarray(items)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # bool is not a subtype of np.number but converts cleanly
    if not (np.issubdtype(result.dtype, np.number) or result.dtype == np.bool_):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real numbers"
        )

    if result.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D sequence, got {result.ndim}D with shape {result.shape}"
        )

    return np.array(result, dtype=ELEMENT_DTYPE)


def check_dimension(value: Any, name: str) -> int:
    """
    Verify a single dimension is a positive integer.

    Zero-sized dimensions are rejected: every matrix has at least one
    row and one column.

    Args:
        value: Row count, column count or size
        name: Parameter name for error messages

    Returns:
        The dimension as a Python int

    Raises:
        DimensionError: If value is not an integer >= 1
    """
    if isinstance(value, (bool, np.bool_)):
        raise DimensionError(f"{name}: expected a positive integer, got bool {value!r}")
    try:
        dim = operator.index(value)
    except TypeError as e:
        raise DimensionError(
            f"{name}: expected a positive integer, got {type(value).__name__} {value!r}"
        ) from e
    if dim < 1:
        raise DimensionError(f"{name}: must be at least 1, got {dim}")
    return dim


def check_order(order: Any, name: str = "order") -> tuple[int, int]:
    """
    Verify an order is a (rows, cols) pair of positive integers.

    Args:
        order: Candidate order
        name: Parameter name for error messages

    Returns:
        (rows, cols) as Python ints

    Raises:
        DimensionError: If order is not a pair or either dimension is invalid
    """
    try:
        rows, cols = order
    except (TypeError, ValueError) as e:
        raise DimensionError(
            f"{name}: expected a (rows, cols) pair, got {order!r}"
        ) from e
    return check_dimension(rows, f"{name}[0]"), check_dimension(cols, f"{name}[1]")


def check_index(index: Any, bound: int, axis: str) -> int:
    """
    Verify a 1-based index lies in [1, bound].

    Args:
        index: Row or column index supplied by the caller
        bound: Number of rows or columns
        axis: 'row' or 'column', for error messages

    Returns:
        The index as a Python int

    Raises:
        ValidationError: If index is not an integer
        IndexOutOfRangeError: If index is outside [1, bound]
    """
    if isinstance(index, (bool, np.bool_)):
        raise ValidationError(f"{axis} index: expected an integer, got bool {index!r}")
    try:
        idx = operator.index(index)
    except TypeError as e:
        raise ValidationError(
            f"{axis} index: expected an integer, got {type(index).__name__} {index!r}"
        ) from e
    if idx < 1 or idx > bound:
        raise IndexOutOfRangeError(
            f"{axis} index {idx} out of range, expected 1 to {bound}",
            index=idx,
            bound=bound,
            axis=axis,
        )
    return idx


def check_scalar(value: Any, name: str) -> np.float64:
    """
    Convert a single value to the element type.

    Raises:
        ValidationError: If value is not a real scalar
    """
    try:
        return as_element(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{name}: not a real scalar: {value!r}") from e


def warn_non_finite(items: NDArray[np.floating[Any]], name: str) -> None:
    """
    Warn if an array contains NaN or Inf values.

    Non-finite values are legal elements; the warning flags them because
    they usually come from an upstream computation gone wrong.

    Args:
        items: Array to check
        name: Parameter name for the warning message
    """
    if not np.all(np.isfinite(items)):
        n_nan = int(np.sum(np.isnan(items)))
        n_inf = int(np.sum(np.isinf(items)))
        warnings.warn(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)",
            NonFiniteWarning,
            stacklevel=3,
        )
