import json
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Any, Callable, Sequence, Tuple

from pydantic import BaseModel, Field

from ..verifiers.models import Color, Grid, ForcedMove, Violation
from ..verifiers.grid import as_grid, ensure_rectangular, side_length, count_empty, render_grid
from .models import SolverConfig, SolveResult
from .moves import apply_move
from .negation import find_move


def iteration_bound(grid: Sequence[Sequence[Color]], max_iterations: Optional[int] = None) -> int:
    """Upper bound on solver iterations: side_length ** 2, optionally lowered."""
    bound = side_length(grid) ** 2
    if max_iterations is not None:
        bound = min(bound, max_iterations)
    return bound


def solve(
    grid: Sequence[Sequence[Color]],
    max_iterations: Optional[int] = None,
) -> Tuple[Grid, List[ForcedMove], Optional[Violation]]:
    """
    Repeatedly find and apply forced moves.

    Stops when no forced move is found, when the iteration bound is reached,
    or as soon as applying a forced move breaks a rule on the real grid.

    Args:
        grid: Starting grid
        max_iterations: Optional cap below the side_length ** 2 bound

    Returns:
        Tuple of (final grid, forced moves in order, terminal violation or None)

    Raises:
        ValueError: If the grid is empty or not rectangular
    """
    ensure_rectangular(grid)
    current = as_grid(grid)
    moves: List[ForcedMove] = []

    for _ in range(iteration_bound(current, max_iterations)):
        forced = find_move(current)
        if forced is None:
            break

        moves.append(forced)
        current, violation = apply_move(current, forced.move)
        if violation:
            return current, moves, violation

    return current, moves, None


class Solver(BaseModel):
    """
    Orchestrates a solver run over a configured board.

    Steps through forced moves one at a time, tracks completion and the
    reason the run ended, and saves or resumes results as JSON.

    Attributes:
        config: Solver configuration
        grid: Current grid
        moves: Forced moves applied so far
        iteration: Number of moves applied
        is_complete: Whether the run has finished
        violation: Violation raised by applying a forced move, if any
    """

    config: SolverConfig
    grid: Grid
    moves: List[ForcedMove] = Field(default_factory=list)
    iteration: int = 0
    is_complete: bool = False
    violation: Optional[Violation] = None
    end_reason: str = ""
    started_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        config: Optional[SolverConfig] = None,
        **config_kwargs: Any
    ) -> "Solver":
        """
        Factory method to create a solver for a configured board.

        Args:
            config: Optional SolverConfig instance
            **config_kwargs: Config parameters if config not provided

        Returns:
            Solver positioned at the configured board
        """
        if config is None:
            config = SolverConfig(**config_kwargs)

        return cls(config=config, grid=config.grid)

    @classmethod
    def resume(cls, result_path: str | Path) -> "Solver":
        """
        Resume a run from a saved result file.

        Moves already recorded count against the iteration bound.

        Args:
            result_path: Path to the saved result JSON file

        Returns:
            Solver restored to the saved state
        """
        result_path = Path(result_path)
        with open(result_path) as f:
            result = SolveResult.model_validate(json.load(f))

        return cls(
            config=result.config,
            grid=result.grid,
            moves=result.moves,
            iteration=len(result.moves),
            is_complete=result.violation is not None,
            violation=result.violation,
            end_reason=result.end_reason if result.violation else "",
        )

    @property
    def max_iterations(self) -> int:
        return iteration_bound(self.grid, self.config.max_iterations)

    def setup(self) -> None:
        """Start the clock and apply the iteration bound."""
        self.started_at = datetime.now()
        if not self.is_complete:
            self.check_max_iterations()

    def check_max_iterations(self) -> bool:
        """Check if the iteration bound has been reached."""
        if self.iteration >= self.max_iterations:
            self.is_complete = True
            self.end_reason = f"Max iterations ({self.max_iterations}) reached"
            return True
        return False

    def step(self) -> Optional[ForcedMove]:
        """
        Find and apply a single forced move.

        Returns:
            The forced move applied, or None if no move was found or the
            iteration bound was already reached (either completes the run)
        """
        if self.is_complete:
            raise ValueError("Solver run is already complete")

        if self.check_max_iterations():
            return None

        forced = find_move(self.grid)
        if forced is None:
            self.is_complete = True
            self.end_reason = "Grid solved" if count_empty(self.grid) == 0 else "No forced move found"
            return None

        self.moves.append(forced)
        self.iteration += 1
        self.grid, violation = apply_move(self.grid, forced.move)

        if violation:
            self.violation = violation
            self.is_complete = True
            self.end_reason = f"Violation after applying move {self.iteration}"
            return forced

        self.check_max_iterations()
        return forced

    def get_result(self) -> SolveResult:
        """
        Get the solver result.

        Returns:
            SolveResult containing the full run data
        """
        ended_at = datetime.now()
        duration = (ended_at - self.started_at).total_seconds() if self.started_at else 0.0

        return SolveResult(
            config=self.config,
            grid=self.grid,
            rendered=render_grid(self.grid),
            moves=self.moves,
            violation=self.violation,
            iterations=self.iteration,
            solved=self.violation is None and count_empty(self.grid) == 0,
            end_reason=self.end_reason,
            started_at=self.started_at.isoformat() if self.started_at else "",
            ended_at=ended_at.isoformat(),
            duration_seconds=duration,
        )

    def save_result(self, path: str | Path) -> None:
        """
        Save the solver result to a JSON file.

        Args:
            path: Path to save the result file
        """
        result = self.get_result()
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w') as f:
            json.dump(result.model_dump(mode="json"), f, indent=2, ensure_ascii=False)

    def run(
        self,
        on_move: Optional[Callable[[ForcedMove], None]] = None,
        verbose: bool = False,
        emoji: bool = False,
    ) -> SolveResult:
        """
        Run the solver until completion.

        Args:
            on_move: Optional callback called after each applied move
            verbose: If True, print progress to stdout
            emoji: Render boards with emoji squares instead of letters

        Returns:
            SolveResult containing the full run data
        """
        style = "emoji" if emoji else "text"
        self.setup()

        if verbose:
            print(f"Solving {self.config.name or 'board'} ({len(self.grid)}x{len(self.grid[0])})")
            print(f"Empty cells: {count_empty(self.grid)}")
            print(f"Max iterations: {self.max_iterations}")
            print("-" * 40)
            print(render_grid(self.grid, style))

        while not self.is_complete:
            forced = self.step()

            if forced is None:
                break

            if verbose:
                print(f"\nMove {self.iteration}: {forced.move}")
                print(f"  because: {forced.violation.message}")
                if self.violation:
                    print(f"✗ Applying the move broke a rule: {self.violation.message}")

            if on_move:
                on_move(forced)

        if verbose:
            print("-" * 40)
            print(f"Solver complete: {self.end_reason}")
            print(render_grid(self.grid, style))

        return self.get_result()
