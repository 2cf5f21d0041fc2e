"""
Grid verification for Binairo boards.

Validates, in this order, stopping at the first rule that fires:
1. Triple repetition (three consecutive cells of one color)
2. Over-saturation (a color filling more than half of a line)
3. Line repetition (two rows or two columns sharing a pattern)
"""

from typing import Optional, Sequence

from .models import Color, Violation, ValidationResult
from .grid import as_grid, ensure_rectangular, render_grid, count_empty
from .parsing import parse_board
from .rules import find_triple_repetition, find_over_saturation, find_line_repetition


def validate(grid: Sequence[Sequence[Color]]) -> Optional[Violation]:
    """
    Return the first rule violation in the grid, or None.

    Raises:
        ValueError: If the grid is empty or not rectangular
    """
    ensure_rectangular(grid)
    grid = as_grid(grid)

    return (
        find_triple_repetition(grid)
        or find_over_saturation(grid)
        or find_line_repetition(grid)
    )


def verify(spec: str) -> ValidationResult:
    """
    Main verification function: parses and validates a textual board.

    Returns a ValidationResult with:
    - valid: True if the board parsed and breaks no rule
    - violation: The first rule violation, if any
    - error: Parse error message, if the board could not be read
    - grid: Rendered grid string (if parsed)
    """
    try:
        grid = parse_board(spec)
    except ValueError as e:
        return ValidationResult(valid=False, error=str(e))

    violation = validate(grid)
    rendered = render_grid(grid)
    empty = count_empty(grid)

    return ValidationResult(
        valid=violation is None,
        violation=violation,
        grid=rendered,
        rows=rendered.split("\n"),
        filled=len(grid) * len(grid[0]) - empty,
        empty=empty,
    )
