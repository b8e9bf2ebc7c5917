"""
Text rendering for matrices.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray


def format_element(value: float) -> str:
    """
    Text of one element.

    Whole numbers print in full positional form (1e16 prints as
    10000000000000000); everything else uses the shortest round-tripping
    repr.
    """
    value = float(value)
    if np.isfinite(value) and value.is_integer():
        return '%d' % value
    return repr(value)


def render(items: NDArray[np.floating[Any]], order: tuple[int, int]) -> str:
    """
    Lay out row-major items as a text grid.

    Every cell is left-aligned and padded to the widest element in the
    whole matrix, so columns line up. Cells are separated by two spaces.
    """
    rows, cols = order
    cells = [format_element(v) for v in items]
    width = max(len(c) for c in cells)
    lines = []
    for r in range(rows):
        row_cells = cells[r * cols:(r + 1) * cols]
        lines.append("  ".join(c.ljust(width) for c in row_cells).rstrip())
    return "\n".join(lines)
