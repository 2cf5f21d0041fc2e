"""Board parsing utilities."""

import re
from typing import Dict

from .models import Color, Grid, Row


SYMBOLS: Dict[str, Color] = {
    "r": Color.RED,
    "b": Color.BLUE,
    "g": Color.GREY,
    ".": Color.GREY,
    "_": Color.GREY,
    "-": Color.GREY,
}


def extract_board_content(spec: str) -> str:
    """Extract content from between <board> and </board> tags."""
    match = re.search(r'<board>(.*?)</board>', spec, re.DOTALL)
    if match:
        return match.group(1).strip()
    return spec.strip()


def parse_row(text: str) -> Row:
    """
    Parse a single row such as "rbg." into colors.

    Raises:
        ValueError: On characters other than r, b, g, '.', '_' or '-'
    """
    row = []
    for i, char in enumerate(text.strip().lower()):
        if char not in SYMBOLS:
            raise ValueError(f"Invalid cell '{char}' at position {i} in row '{text.strip()}'")
        row.append(SYMBOLS[char])
    return tuple(row)


def parse_board(spec: str) -> Grid:
    """
    Parse a board specification into a grid.

    Rows may be separated by newlines, commas or slashes and the whole
    board may be wrapped in <board></board> tags.

    Raises:
        ValueError: If the board is empty, a row is invalid, or rows differ in length
    """
    spec = extract_board_content(spec)
    lines = [line.strip() for line in re.split(r'[\n,/]', spec) if line.strip()]

    if not lines:
        raise ValueError("Board specification is empty")

    grid = tuple(parse_row(line) for line in lines)

    width = len(grid[0])
    for i, row in enumerate(grid, start=1):
        if len(row) != width:
            raise ValueError(f"Row {i} has {len(row)} cells, expected {width}")

    return grid
