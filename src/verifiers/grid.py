"""Grid model and rendering utilities."""

from typing import Dict, List, Literal, Sequence

from .models import Color, Grid, Row


EMOJI = {Color.RED: "🟥", Color.BLUE: "🟦", Color.GREY: "⬜"}
TEXT = {Color.RED: "r", Color.BLUE: "b", Color.GREY: "."}


def as_grid(board: Sequence[Sequence[Color]]) -> Grid:
    """Freeze any sequence of rows into an immutable grid."""
    return tuple(tuple(row) for row in board)


def rows(grid: Grid) -> Grid:
    """Rows of the grid (a grid is already row-major)."""
    return grid


def columns(grid: Sequence[Sequence[Color]]) -> Grid:
    """Transpose: the j-th column is row[j] of every row, in row order."""
    if not grid:
        return ()
    width = len(grid[0])
    return tuple(tuple(row[j] for row in grid) for j in range(width))


def ensure_rectangular(grid: Sequence[Sequence[Color]]) -> None:
    """
    Check that the grid is non-empty and every row has the same length.

    Raises:
        ValueError: If the grid is empty or ragged
    """
    if not grid or not grid[0]:
        raise ValueError("Grid is empty")

    width = len(grid[0])
    for index, row in enumerate(grid):
        if len(row) != width:
            raise ValueError(
                f"Grid is not rectangular: row {index} has length {len(row)}, expected {width}"
            )


def side_length(grid: Sequence[Sequence[Color]]) -> int:
    """Longest side of the grid (the side length of a square grid)."""
    if not grid:
        return 0
    return max(len(grid), len(grid[0]))


def position_vectors(line: Sequence[Color]) -> Dict[Color, List[int]]:
    """Ordered positions of each color in a line."""
    positions: Dict[Color, List[int]] = {color: [] for color in Color}
    for index, color in enumerate(line):
        positions[color].append(index)
    return positions


def count_colors(line: Sequence[Color]) -> Dict[Color, int]:
    """Number of cells of each color in a line."""
    return {color: len(found) for color, found in position_vectors(line).items()}


def count_empty(grid: Grid) -> int:
    return sum(row.count(Color.GREY) for row in grid)


def set_cell(grid: Grid, row: int, column: int, color: Color) -> Grid:
    """
    Return a new grid with a single cell replaced.

    Raises:
        IndexError: If (row, column) lies outside the grid
    """
    if not (0 <= row < len(grid)) or not (0 <= column < len(grid[row])):
        raise IndexError(f"Cell ({row}, {column}) is outside the {len(grid)}x{len(grid[0]) if grid else 0} grid")

    new_row: Row = grid[row][:column] + (color,) + grid[row][column + 1:]
    return grid[:row] + (new_row,) + grid[row + 1:]


def render_grid(grid: Grid, style: Literal["text", "emoji"] = "text") -> str:
    """Render the grid to a string, one line per row."""
    if not grid:
        return ""

    symbols = EMOJI if style == "emoji" else TEXT
    return "\n".join("".join(symbols[color] for color in row) for row in grid)
