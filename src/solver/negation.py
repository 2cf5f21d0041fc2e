"""
Forced-move discovery by negation.

For each empty cell, each active color is tried in turn: the candidate is
placed, the grid is naively completed and then validated. If completing
with one color breaks a rule, the other color is forced at that cell.
"""

from typing import Optional, Sequence

from ..verifiers.models import ACTIVE_COLORS, Color, ForcedMove, Grid, Move, Violation
from ..verifiers.grid import as_grid, rows
from ..verifiers.verify import validate
from .completion import complete_board
from .moves import apply_move


def probe(grid: Grid, move: Move) -> Optional[Violation]:
    """Place a candidate move, complete the grid naively and validate it."""
    # The candidate's own violation is ignored; only the completed grid counts
    candidate_grid, _ = apply_move(grid, move)
    return validate(complete_board(candidate_grid))


def find_move(grid: Sequence[Sequence[Color]]) -> Optional[ForcedMove]:
    """
    Find the first forced move in row-major order.

    Returns:
        ForcedMove pairing the forced color with the violation that rules
        out its opposite, or None if no empty cell is decided by the probe
    """
    grid = as_grid(grid)

    for row_index, row in enumerate(rows(grid)):
        for column_index, color in enumerate(row):
            if color is not Color.GREY:
                continue

            for candidate in ACTIVE_COLORS:
                move = Move(color=candidate, row=row_index, column=column_index)
                violation = probe(grid, move)
                if violation:
                    return ForcedMove(
                        move=Move(color=candidate.opposite, row=row_index, column=column_index),
                        violation=violation,
                    )

    return None
