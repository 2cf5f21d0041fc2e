"""Negation-based solver for Binairo grids."""

from .models import MoveFailure, SolverConfig, SolveResult
from .moves import apply_move, apply_moves
from .completion import complete_row, complete_board
from .negation import find_move, probe
from .solver import Solver, solve, iteration_bound

__all__ = [
    "MoveFailure",
    "SolverConfig",
    "SolveResult",
    "apply_move",
    "apply_moves",
    "complete_row",
    "complete_board",
    "find_move",
    "probe",
    "Solver",
    "solve",
    "iteration_bound",
]
