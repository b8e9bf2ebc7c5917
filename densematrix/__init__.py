"""
densematrix: dense matrices with validated construction and indexing.

Every matrix is built through one validating constructor, and every
element access checks its 1-based indices against the matrix order
before touching storage.

Submodules:
    matrices: Matrix container and named factories
    core: Exceptions, validators, element type, tolerances
"""

__version__ = "0.1.0"

from densematrix.matrices import (
    Matrix,
    row_matrix,
    column_matrix,
    null_matrix,
    square_matrix,
    diagonal_matrix,
    scalar_matrix,
    identity_matrix,
)
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
from densematrix.core.tolerances import ToleranceTier, DEFAULT_TOLERANCE

__all__ = [
    "__version__",
    # Container and factories
    "Matrix",
    "row_matrix",
    "column_matrix",
    "null_matrix",
    "square_matrix",
    "diagonal_matrix",
    "scalar_matrix",
    "identity_matrix",
    # Exceptions
    "MatrixError",
    "ValidationError",
    "DimensionError",
    "DimensionMismatchError",
    "NotSquareError",
    "OrderMismatchError",
    "IndexOutOfRangeError",
    "NonFiniteWarning",
    # Tolerances
    "ToleranceTier",
    "DEFAULT_TOLERANCE",
]
