"""
Naive completion heuristic.

Fills the empty cells of a line with the minority color once the other
color already covers at least half of it. This is not a sound solving step
(it never looks across lines while filling), it only serves as a cheap
oracle for probing contradictions.
"""

from typing import Sequence

from ..verifiers.models import Color, Grid, Row
from ..verifiers.grid import as_grid, columns, count_colors


def complete_row(row: Sequence[Color]) -> Row:
    """Fill empty cells with the other color when one color holds half or more."""
    counts = count_colors(row)

    if 2 * counts[Color.RED] >= len(row):
        return tuple(Color.BLUE if c is Color.GREY else c for c in row)

    if 2 * counts[Color.BLUE] >= len(row):
        return tuple(Color.RED if c is Color.GREY else c for c in row)

    return tuple(row)


def complete_board(grid: Sequence[Sequence[Color]]) -> Grid:
    """Complete every row, then every column of the row-completed grid."""
    completed_rows = tuple(complete_row(row) for row in as_grid(grid))
    completed_columns = [complete_row(column) for column in columns(completed_rows)]
    # Transposing the columns back gives the grid in row-major order
    return columns(completed_columns)
