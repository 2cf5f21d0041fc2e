"""
Main entry point for solving Binairo boards.

Usage:
    python -m src.main examples/example.yaml
    python -m src.main examples/example.yaml --output results/run1.json --verbose
    python -m src.main --board "rrgb,bgrr,gbgr,brbg"
"""

import argparse
import re
import sys
from datetime import datetime
from pathlib import Path

import yaml

from .solver import Solver, SolverConfig
from .verifiers import render_grid


def load_config(config_path: str) -> SolverConfig:
    """Load solver configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    return SolverConfig(**data)


def board_config(spec: str) -> SolverConfig:
    """Build a config from rows separated by newlines, commas or slashes."""
    rows = [line.strip() for line in re.split(r"[\n,/]", spec) if line.strip()]
    return SolverConfig(board=rows)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Find forced moves in a Binairo board by negation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  name: example
  board:
    - rrgb
    - bgrr
    - gbgr
    - brbg
  max_iterations: 16

Cells: r = red, b = blue, g or . = empty
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file (not needed with --board or --resume)"
    )
    parser.add_argument(
        "--board", "-b",
        help="Inline board, rows separated by newlines, commas or slashes"
    )
    parser.add_argument(
        "--resume",
        help="Resume from a saved result JSON file"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save results JSON (default: results/<timestamp>.json for config files)"
    )
    parser.add_argument(
        "--emoji",
        action="store_true",
        help="Render boards with emoji squares"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print progress to stdout"
    )

    args = parser.parse_args(argv)
    output_path = Path(args.output) if args.output else None

    # Handle resume mode
    if args.resume:
        if args.verbose:
            print(f"Resuming from: {args.resume}")
        try:
            solver = Solver.resume(args.resume)
            if args.verbose:
                print(f"Loaded state: {solver.iteration} moves applied")
                print()
        except Exception as e:
            print(f"Error resuming from {args.resume}: {e}", file=sys.stderr)
            return 1

        if output_path is None:
            # Default: add _resumed to original filename
            resume_path = Path(args.resume)
            output_path = resume_path.parent / f"{resume_path.stem}_resumed{resume_path.suffix}"

    else:
        if not args.config and not args.board:
            print("Error: config file or --board required (or use --resume)", file=sys.stderr)
            return 1

        try:
            config = load_config(args.config) if args.config else board_config(args.board)
        except Exception as e:
            print(f"Error loading config: {e}", file=sys.stderr)
            return 1

        if output_path is None and args.config:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            output_path = Path("results") / f"solve_{timestamp}.json"

        solver = Solver.create(config=config)

        if args.verbose:
            print(f"Config: {args.config or 'inline board'}")
            if output_path:
                print(f"Output: {output_path}")
            print()

    try:
        result = solver.run(verbose=args.verbose, emoji=args.emoji)
    except KeyboardInterrupt:
        print("\nSolver interrupted by user")
        solver.end_reason = "Interrupted by user"
        result = solver.get_result()

    if output_path:
        solver.save_result(output_path)
        if args.verbose:
            print()
            print(f"Results saved to: {output_path}")

    style = "emoji" if args.emoji else "text"

    print()
    print("=== Forced Moves ===")
    for i, forced in enumerate(result.moves, start=1):
        print(f"{i}. {forced.move} ({forced.violation.message})")

    print()
    print("=== Board ===")
    print(render_grid(result.grid, style))

    print()
    print("=== Solve Summary ===")
    print(f"Moves found: {len(result.moves)}")
    print(f"End reason: {result.end_reason}")
    print(f"Solved: {'yes' if result.solved else 'no'}")
    if result.violation:
        print(f"Violation: {result.violation.message}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
