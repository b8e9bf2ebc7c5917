"""
Core infrastructure for densematrix.

Shared pieces used by the matrix container and its factories.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    dtypes: Element type and its identities
    tolerances: Tolerance tiers for approximate comparison
"""

from densematrix.core.exceptions import (
    MatrixError,
    ValidationError,
    DimensionError,
    DimensionMismatchError,
    NotSquareError,
    OrderMismatchError,
    IndexOutOfRangeError,
    NonFiniteWarning,
)
from densematrix.core.dtypes import ELEMENT_DTYPE, zero, one
from densematrix.core.tolerances import (
    ToleranceTier,
    DEFAULT_TOLERANCE,
    EXACT,
    FP64,
    LOOSE,
    select_tolerance,
)

__all__ = [
    # Exceptions
    "MatrixError",
    "ValidationError",
    "DimensionError",
    "DimensionMismatchError",
    "NotSquareError",
    "OrderMismatchError",
    "IndexOutOfRangeError",
    "NonFiniteWarning",
    # Element type
    "ELEMENT_DTYPE",
    "zero",
    "one",
    # Tolerances
    "ToleranceTier",
    "DEFAULT_TOLERANCE",
    "EXACT",
    "FP64",
    "LOOSE",
    "select_tolerance",
]
