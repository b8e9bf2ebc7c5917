"""
Matrix container and named factories.

Public API:
    Matrix                      - dense row-major container
    row_matrix(items)           - single row
    column_matrix(items)        - single column
    null_matrix(order)          - all zeros
    square_matrix(items)        - k x k from k*k items
    diagonal_matrix(items)      - items on the diagonal
    scalar_matrix(value, size)  - repeated value on the diagonal
    identity_matrix(size)       - ones on the diagonal
"""

from densematrix.matrices.matrix import Matrix
from densematrix.matrices.factories import (
    row_matrix,
    column_matrix,
    null_matrix,
    square_matrix,
    diagonal_matrix,
    scalar_matrix,
    identity_matrix,
)

__all__ = [
    "Matrix",
    "row_matrix",
    "column_matrix",
    "null_matrix",
    "square_matrix",
    "diagonal_matrix",
    "scalar_matrix",
    "identity_matrix",
]
