"""
Test suite for board parsing, rendering and verification.

Tests:
- Parsing (symbols, separators, <board> tags, errors)
- Grid model (rows, columns, set_cell)
- Rendering (text and emoji)
- verify() results for valid, broken and unreadable boards
"""

import pytest
from src.verifiers import (
    Color,
    Move,
    OverSaturation,
    TripleRepetition,
    ValidationResult,
    columns,
    parse_board,
    parse_row,
    render_grid,
    rows,
    set_cell,
    side_length,
    verify,
)


R, B, G = Color.RED, Color.BLUE, Color.GREY


class TestParsing:
    """Test cases for reading textual boards."""

    def test_parse_row_symbols(self):
        """r, b and every empty symbol map to colors."""
        assert parse_row("rbg._-") == (R, B, G, G, G, G)

    def test_parse_row_case_insensitive(self):
        """Upper-case symbols are accepted."""
        assert parse_row(" RB ") == (R, B)

    def test_parse_row_invalid_symbol(self):
        """Unknown symbols are rejected."""
        with pytest.raises(ValueError, match="Invalid cell 'x'"):
            parse_row("rxb")

    def test_parse_board_newlines(self):
        """Rows separated by newlines."""
        grid = parse_board("""
        rb
        br
        """)
        assert grid == ((R, B), (B, R))

    def test_parse_board_commas_and_slashes(self):
        """Rows separated by commas or slashes."""
        assert parse_board("rb,br") == parse_board("rb/br") == ((R, B), (B, R))

    def test_parse_board_with_tags(self):
        """Content between <board> tags is used."""
        assert parse_board("noise <board>r.\n.b</board> noise") == ((R, G), (G, B))

    def test_parse_board_empty(self):
        """An empty board specification is rejected."""
        with pytest.raises(ValueError, match="empty"):
            parse_board("<board>  \n </board>")

    def test_parse_board_ragged(self):
        """Rows of different lengths are rejected."""
        with pytest.raises(ValueError, match="Row 2 has 1 cells, expected 2"):
            parse_board("rb,r")


class TestGridModel:
    """Test cases for rows, columns and cell replacement."""

    def test_rows_is_identity(self):
        grid = parse_board("rb,.r")
        assert rows(grid) is grid

    def test_columns_transpose(self):
        """Column j holds row[j] of every row in row order."""
        grid = parse_board("rb.,brr")
        assert columns(grid) == ((R, B), (B, R), (G, R))

    def test_columns_of_columns_restores_rows(self):
        grid = parse_board("rb.,brr")
        assert columns(columns(grid)) == grid

    def test_side_length(self):
        assert side_length(parse_board("rb.,brr")) == 3
        assert side_length(()) == 0

    def test_set_cell_returns_new_grid(self):
        """The original grid is left untouched."""
        grid = parse_board("..,..")
        new_grid = set_cell(grid, 1, 0, R)
        assert new_grid == ((G, G), (R, G))
        assert grid == ((G, G), (G, G))

    @pytest.mark.parametrize("row,column", [(2, 0), (0, 2), (-1, 0), (0, -1)])
    def test_set_cell_out_of_bounds(self, row, column):
        with pytest.raises(IndexError):
            set_cell(parse_board("..,.."), row, column, R)

    def test_move_rejects_negative_coordinates(self):
        """Moves are validated on construction."""
        with pytest.raises(ValueError):
            Move(color=R, row=-1, column=0)


class TestRendering:
    """Test cases for rendering grids."""

    def test_render_text(self):
        assert render_grid(parse_board("rb.,g.b")) == "rb.\n..b"

    def test_render_emoji(self):
        assert render_grid(parse_board("rb."), style="emoji") == "🟥🟦⬜"

    def test_render_empty(self):
        assert render_grid(()) == ""


class TestVerify:
    """Test cases for verify()."""

    def test_valid_board(self):
        """A complete, valid board."""
        result = verify("""
        <board>
        rbbr
        brrb
        rrbb
        bbrr
        </board>
        """)
        assert isinstance(result, ValidationResult)
        assert result.valid is True
        assert result.violation is None
        assert result.filled == 16
        assert result.empty == 0
        assert result.rows == ["rbbr", "brrb", "rrbb", "bbrr"]

    def test_partial_board_counts(self):
        """Empty cells are counted separately."""
        result = verify("r..b,....,b..r,....")
        assert result.valid is True
        assert result.filled == 4
        assert result.empty == 12
        assert result.grid == "r..b\n....\nb..r\n...."

    def test_triple_repetition(self):
        result = verify("rrr")
        assert result.valid is False
        assert result.violation == TripleRepetition(line="row", index=0, positions=(0, 1, 2), color=R)

    def test_over_saturation(self):
        result = verify("rrb")
        assert result.valid is False
        assert isinstance(result.violation, OverSaturation)
        assert result.violation.positions == (0, 1)

    def test_unreadable_board(self):
        """Parse failures are reported, not raised."""
        result = verify("rzb")
        assert result.valid is False
        assert result.violation is None
        assert "Invalid cell" in result.error

    def test_result_round_trips_through_json(self):
        """The violation keeps its kind when reloaded."""
        result = verify("rrb")
        reloaded = ValidationResult.model_validate_json(result.model_dump_json())
        assert reloaded.violation == result.violation
