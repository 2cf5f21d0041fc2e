"""Applying moves to a grid."""

from typing import Optional, Sequence, Tuple, Union

from ..verifiers.models import Color, Grid, Move, Violation
from ..verifiers.grid import as_grid, set_cell
from ..verifiers.verify import validate
from .models import MoveFailure


def apply_move(grid: Sequence[Sequence[Color]], move: Move) -> Tuple[Grid, Optional[Violation]]:
    """
    Apply a single move and validate the resulting grid.

    The input grid is never modified.

    Returns:
        Tuple of (new grid, first violation or None)

    Raises:
        IndexError: If the move lies outside the grid
    """
    new_grid = set_cell(as_grid(grid), move.row, move.column, move.color)
    return new_grid, validate(new_grid)


def apply_moves(grid: Sequence[Sequence[Color]], moves: Sequence[Move]) -> Union[Grid, MoveFailure]:
    """
    Apply moves in order, stopping at the first one that breaks a rule.

    Returns:
        The final grid, or a MoveFailure holding the grid after the
        offending move, its index in the sequence and the violation
    """
    current = as_grid(grid)
    for move_index, move in enumerate(moves):
        new_grid, violation = apply_move(current, move)
        if violation:
            return MoveFailure(grid=new_grid, move_index=move_index, violation=violation)
        current = new_grid
    return current
