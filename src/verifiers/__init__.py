"""Board verification for Binairo grids."""

from .verify import verify, validate
from .models import (
    Color,
    ACTIVE_COLORS,
    Row,
    Grid,
    LineKind,
    Move,
    TripleRepetition,
    OverSaturation,
    LineRepetition,
    Violation,
    ForcedMove,
    ValidationResult,
)
from .parsing import parse_board, parse_row, extract_board_content
from .grid import rows, columns, as_grid, ensure_rectangular, side_length, set_cell, count_empty, render_grid
from .rules import find_triple_repetition, find_over_saturation, find_line_repetition

__all__ = [
    # Main verification
    "verify",
    "validate",
    # Models
    "Color",
    "ACTIVE_COLORS",
    "Row",
    "Grid",
    "LineKind",
    "Move",
    "TripleRepetition",
    "OverSaturation",
    "LineRepetition",
    "Violation",
    "ForcedMove",
    "ValidationResult",
    # Parsing
    "parse_board",
    "parse_row",
    "extract_board_content",
    # Grid utilities
    "rows",
    "columns",
    "as_grid",
    "ensure_rectangular",
    "side_length",
    "set_cell",
    "count_empty",
    "render_grid",
    # Rules
    "find_triple_repetition",
    "find_over_saturation",
    "find_line_repetition",
]
