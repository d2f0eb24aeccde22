"""Linear triangular index <-> (row, col) pair.

Pairs 0 <= row < col < n are enumerated column by column:
(0,1), (0,2), (1,2), (0,3), (1,3), (2,3), ...
so index i lives in column col where col(col-1)/2 <= i < col(col+1)/2.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray


def n_pairs(n: int) -> int:
    """Number of unordered pairs among n items."""
    return n * (n - 1) // 2


def decode(i: int) -> tuple[int, int]:
    """Map linear index i to its (row, col) pair."""
    if i < 0:
        raise IndexError(f"triangular index must be non-negative, got {i}")

    # Continuous inverse of the triangular numbers, then fix float error
    # at exact boundaries with integer checks.
    col = int(math.floor(0.5 * (1 + math.sqrt(8 * (i + 1) - 7))))
    while col * (col - 1) // 2 > i:
        col -= 1
    while col * (col + 1) // 2 <= i:
        col += 1

    row = i - col * (col - 1) // 2
    return row, col


def encode(row: int, col: int) -> int:
    """Map a (row, col) pair with row < col to its linear index."""
    if not 0 <= row < col:
        raise IndexError(f"expected 0 <= row < col, got ({row}, {col})")
    return col * (col - 1) // 2 + row


def pair_table(n: int) -> NDArray[np.int64]:
    """All (row, col) pairs for n items as a C(n,2) x 2 array, in index order."""
    # Lower-triangle indices in row-major order are (col, row) in our order.
    cols, rows = np.tril_indices(n, k=-1)
    return np.column_stack([rows, cols]).astype(np.int64)
