"""
Element type configuration.

A matrix stores a single scalar element type. Factories take their
defaults from the identities of that type rather than from literals.
"""

import numpy as np


# Scalar type of every stored element
ELEMENT_DTYPE = np.float64


def zero() -> np.float64:
    """Additive identity of the element type."""
    return ELEMENT_DTYPE(0)


def one() -> np.float64:
    """Multiplicative identity of the element type."""
    return ELEMENT_DTYPE(1)


def as_element(value) -> np.float64:
    """
    Convert a single value to the element type.

    Raises:
        TypeError, ValueError: If value is not a real scalar
    """
    # np.float64 accepts None, strings and sequences without complaint
    if (
        value is None
        or isinstance(value, (str, bytes, complex, np.complexfloating))
        or np.ndim(value) != 0
    ):
        raise TypeError(f"expected a real number, got {type(value).__name__}")
    return ELEMENT_DTYPE(value)
