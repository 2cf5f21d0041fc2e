"""
Pydantic models for the solver layer.

This module contains the data models (configuration, results, failed move
sequences) used by the solver. The solving logic lives in its own modules
(moves, completion, negation, solver).
"""

from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict, field_validator

from ..verifiers.models import Grid, Violation, ForcedMove
from ..verifiers.parsing import parse_row


class MoveFailure(BaseModel):
    """A move sequence that stopped at the first move breaking a rule."""
    model_config = ConfigDict(frozen=True)

    grid: Grid  # Board after the offending move
    move_index: int
    violation: Violation


class SolverConfig(BaseModel):
    """Configuration for a solver run."""
    name: Optional[str] = None
    board: List[str] = Field(..., min_length=1)
    max_iterations: Optional[int] = Field(None, ge=0)  # Can only lower the side_length ** 2 bound

    @field_validator("board")
    @classmethod
    def check_board(cls, board: List[str]) -> List[str]:
        rows = [parse_row(line) for line in board]
        if not rows[0]:
            raise ValueError("Board rows must not be empty")
        for i, row in enumerate(rows, start=1):
            if len(row) != len(rows[0]):
                raise ValueError(f"Row {i} has {len(row)} cells, expected {len(rows[0])}")
        return [line.strip() for line in board]

    @property
    def grid(self) -> Grid:
        """The board parsed into an immutable grid."""
        return tuple(parse_row(line) for line in self.board)


class SolveResult(BaseModel):
    """Result of a complete solver run."""
    config: SolverConfig
    grid: Grid
    rendered: str = ""
    moves: List[ForcedMove] = Field(default_factory=list)
    violation: Optional[Violation] = None
    iterations: int = 0
    solved: bool = False
    end_reason: str = ""
    started_at: str = ""
    ended_at: str = ""
    duration_seconds: float = 0.0
