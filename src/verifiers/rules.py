"""
Rule checkers for Binairo grids.

Each checker scans every row first and then every column, returning the
first violation found (lowest line index, then lowest position). Positions
reported for a column are row indices within that column.

Rules:
1. Triple repetition: no three consecutive cells of the same active color
2. Over-saturation: no active color may fill strictly more than half a line
3. Line repetition: no two lines of a kind may share the same positions for
   a color covering at least half of the line
"""

from typing import Dict, List, Optional, Sequence, Tuple

from .models import (
    ACTIVE_COLORS,
    Color,
    Grid,
    LineKind,
    TripleRepetition,
    OverSaturation,
    LineRepetition,
)
from .grid import rows, columns, position_vectors


def _lines(grid: Grid) -> List[Tuple[LineKind, Grid]]:
    return [("row", rows(grid)), ("column", columns(grid))]


def find_triple_repetition_in_line(line: Sequence[Color]) -> Optional[Tuple[Tuple[int, int, int], Color]]:
    """Return the first run of three equal active colors as (positions, color)."""
    for i in range(2, len(line)):
        c1, c2, c3 = line[i - 2], line[i - 1], line[i]
        if c1.is_active and c1 == c2 == c3:
            return (i - 2, i - 1, i), c1
    return None


def find_over_saturation_in_line(line: Sequence[Color]) -> Optional[Tuple[List[int], Color]]:
    """Return (positions, color) for an active color filling more than half the line."""
    vectors = position_vectors(line)
    for color in ACTIVE_COLORS:
        if 2 * len(vectors[color]) > len(line):
            return vectors[color], color
    return None


def find_repeated_lines(lines: Sequence[Sequence[Color]]) -> Optional[Tuple[int, int]]:
    """
    Find two lines sharing a half-or-more position pattern for one color.

    Every line where a color covers at least half the cells registers the
    key (color, positions) under its index. The first later line producing
    an already registered key is the hit.

    Returns:
        (earliest index, current index) or None
    """
    seen: Dict[Tuple[Color, Tuple[int, ...]], int] = {}

    for index, line in enumerate(lines):
        vectors = position_vectors(line)
        for color in ACTIVE_COLORS:
            positions = vectors[color]
            if 2 * len(positions) < len(line):
                continue

            key = (color, tuple(positions))
            if key in seen:
                return seen[key], index
            seen[key] = index

    return None


def find_triple_repetition(grid: Grid) -> Optional[TripleRepetition]:
    """Find three consecutive cells of one active color, rows before columns."""
    for kind, lines in _lines(grid):
        for index, line in enumerate(lines):
            hit = find_triple_repetition_in_line(line)
            if hit:
                positions, color = hit
                return TripleRepetition(line=kind, index=index, positions=positions, color=color)
    return None


def find_over_saturation(grid: Grid) -> Optional[OverSaturation]:
    """Find a line where one active color holds a strict majority, rows before columns."""
    for kind, lines in _lines(grid):
        for index, line in enumerate(lines):
            hit = find_over_saturation_in_line(line)
            if hit:
                positions, color = hit
                return OverSaturation(line=kind, index=index, color=color, positions=tuple(positions))
    return None


def find_line_repetition(grid: Grid) -> Optional[LineRepetition]:
    """Find two repeated rows, or failing that two repeated columns."""
    for kind, lines in _lines(grid):
        hit = find_repeated_lines(lines)
        if hit:
            return LineRepetition(line=kind, indices=hit)
    return None
