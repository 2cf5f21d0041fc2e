"""Data models for grid verification."""

from enum import Enum
from typing import List, Optional, Literal, Tuple, Union, Annotated
from pydantic import BaseModel, Field, ConfigDict


class Color(str, Enum):
    """Cell colors. RED and BLUE are active, GREY marks an empty cell."""
    RED = "red"
    BLUE = "blue"
    GREY = "grey"

    @property
    def is_active(self) -> bool:
        return self is not Color.GREY

    @property
    def opposite(self) -> "Color":
        """The other active color (GREY has no opposite)."""
        if self is Color.RED:
            return Color.BLUE
        if self is Color.BLUE:
            return Color.RED
        raise ValueError("GREY has no opposite color")


# Checked in this order everywhere a rule iterates colors
ACTIVE_COLORS: Tuple[Color, Color] = (Color.RED, Color.BLUE)

# Type aliases
Row = Tuple[Color, ...]
Grid = Tuple[Row, ...]
LineKind = Literal["row", "column"]


class Move(BaseModel):
    """A single cell assignment."""
    model_config = ConfigDict(frozen=True)

    color: Color
    row: int = Field(..., ge=0)
    column: int = Field(..., ge=0)

    def __str__(self) -> str:
        return f"{self.color.value} at ({self.row}, {self.column})"


class TripleRepetition(BaseModel):
    """Three consecutive cells of one active color in a line."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["triple_repetition"] = "triple_repetition"
    line: LineKind
    index: int
    positions: Tuple[int, int, int]
    color: Color

    @property
    def message(self) -> str:
        other = "columns" if self.line == "row" else "rows"
        cells = ", ".join(str(p) for p in self.positions)
        return f"{self.line.capitalize()} {self.index} repeats {self.color.value} three times ({other} {cells})"


class OverSaturation(BaseModel):
    """One active color fills strictly more than half of a line."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["over_saturation"] = "over_saturation"
    line: LineKind
    index: int
    color: Color
    positions: Tuple[int, ...]

    @property
    def message(self) -> str:
        return (
            f"{self.line.capitalize()} {self.index} has too many {self.color.value} cells "
            f"({len(self.positions)} at {list(self.positions)})"
        )


class LineRepetition(BaseModel):
    """Two lines of the same kind share a half-or-more color pattern."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["line_repetition"] = "line_repetition"
    line: LineKind
    indices: Tuple[int, int]

    @property
    def message(self) -> str:
        first, second = self.indices
        return f"{self.line.capitalize()}s {first} and {second} repeat the same pattern"


Violation = Annotated[
    Union[TripleRepetition, OverSaturation, LineRepetition],
    Field(discriminator="kind"),
]


class ForcedMove(BaseModel):
    """A move whose opposite color was proven to lead to a violation."""
    model_config = ConfigDict(frozen=True)

    move: Move
    violation: Violation


class ValidationResult(BaseModel):
    """Result of verifying a textual board."""
    valid: bool
    violation: Optional[Violation] = None
    error: Optional[str] = None
    grid: Optional[str] = None
    rows: List[str] = Field(default_factory=list)
    filled: int = 0
    empty: int = 0
