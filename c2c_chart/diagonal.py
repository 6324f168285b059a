"""Diagonal numbering for corner-to-corner working rows.

Diagonal 0 is the bottom-right cell, where a C2C piece is started; the
top-left cell holds the last diagonal, ``width + height - 2``. The
instruction generator, the chart overlay and the printable chart all use
this numbering.
"""
from __future__ import annotations

from typing import List, Tuple


def diagonal_index(row: int, col: int, width: int, height: int) -> int:
    """Return the diagonal (working row) index of a cell."""
    return (height - 1 - row) + (width - 1 - col)


def diagonal_count(width: int, height: int) -> int:
    """Return the number of diagonals in a ``width x height`` grid."""
    return max(width + height - 1, 0)


def diagonal_cells(diagonal: int, width: int, height: int) -> List[Tuple[int, int]]:
    """Return the in-bounds cells of one diagonal in stitch order.

    Offsets ``i`` run from 0 to ``diagonal``; offset ``i`` is the cell
    ``(height - 1 - i, width - 1 - (diagonal - i))``. Cells outside the grid
    are dropped, the rest keep increasing-offset order.
    """
    cells: List[Tuple[int, int]] = []
    for i in range(diagonal + 1):
        row = height - 1 - i
        col = width - 1 - (diagonal - i)
        if 0 <= row < height and 0 <= col < width:
            cells.append((row, col))
    return cells


def diagonal_length(diagonal: int, width: int, height: int) -> int:
    """Return the number of in-bounds cells on a diagonal."""
    if diagonal < 0 or diagonal >= diagonal_count(width, height):
        return 0
    return min(diagonal + 1, width, height, width + height - 1 - diagonal)
