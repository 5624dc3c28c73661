"""Command-line interface for the deduction solver."""

import argparse
import json
import logging
import os
import sys

from tqdm import tqdm

from .core.board import SudokuBoard
from .core.reader import load_puzzle, parse_puzzle, list_puzzle_files
from .solvers import DeductionSolver, InvalidPuzzleError


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Sudoku solver by pure deduction (no guessing)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Solve a puzzle given inline
  python -m sudoku_logic.cli solve --puzzle "530070000600195000..." --steps

  # Solve a puzzle file (whitespace separated, _ or 0 for empty)
  python -m sudoku_logic.cli solve --file assets/problems/01_01.txt

  # Solve every puzzle in a directory
  python -m sudoku_logic.cli batch assets/problems --output results.json
        """
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Log technique progress"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Solve a single puzzle")
    source = solve_parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--puzzle", "-p", type=str,
        help="Puzzle string (81 chars, 0 or . for empty cells)"
    )
    source.add_argument(
        "--file", "-f", type=str,
        help="Puzzle file"
    )
    solve_parser.add_argument(
        "--steps", action="store_true",
        help="Print the technique step log"
    )
    solve_parser.add_argument(
        "--candidates", action="store_true",
        help="Print remaining candidates per cell"
    )
    solve_parser.add_argument(
        "--allow-invalid", action="store_true",
        help="Attempt puzzles whose givens conflict"
    )

    # Batch command
    batch_parser = subparsers.add_parser("batch", help="Solve every puzzle file in a directory")
    batch_parser.add_argument("directory", type=str, help="Directory of .txt puzzle files")
    batch_parser.add_argument(
        "--output", "-o", type=str, default=None,
        help="Write per-puzzle results to this JSON file"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    if args.command == "solve":
        cmd_solve(args)
    elif args.command == "batch":
        cmd_batch(args)


def _read_board(args) -> SudokuBoard:
    if args.file:
        return load_puzzle(args.file)
    return parse_puzzle(args.puzzle)


def cmd_solve(args):
    """Handle the solve command."""
    try:
        board = _read_board(args)
    except (OSError, ValueError) as e:
        print(f"Error reading puzzle: {e}")
        sys.exit(1)

    print("Input puzzle:")
    print(board)
    print()

    try:
        solver = DeductionSolver(board, validate_givens=not args.allow_invalid)
    except InvalidPuzzleError as e:
        print(f"Invalid puzzle: {e}")
        sys.exit(1)

    result = solver.solve()
    stats = solver.stats

    if args.steps:
        print(solver.format_steps())
        print()
    if args.candidates:
        print("Remaining candidates:")
        print(solver.candidates.render())
        print()

    if stats.solved:
        print(f"✓ Solved in {stats.time_seconds:.4f}s ({stats.iterations} iterations)")
    else:
        print(f"✗ Stuck after {stats.iterations} iterations, "
              f"{result.count_empty()} cells left")
    print(result)
    print(f"Filled: {result.is_full()}  Valid: {solver.is_valid()}")

    bad = solver.invalid_cells()
    if bad:
        print("Invalid cells:")
        for cell in bad:
            print(f"  {cell!r}")


def cmd_batch(args):
    """Handle the batch command."""
    try:
        names = list_puzzle_files(args.directory)
    except OSError as e:
        print(f"Error reading directory: {e}")
        sys.exit(1)

    results = []
    for name in tqdm(names, desc="Solving"):
        puzzle_id = os.path.splitext(name)[0]
        row = {"puzzle": puzzle_id}
        try:
            board = load_puzzle(os.path.join(args.directory, name))
            solver = DeductionSolver(board, log_steps=False)
        except (OSError, ValueError) as e:
            row.update({"filled": None, "valid": None, "error": str(e)})
            results.append(row)
            continue
        result = solver.solve()
        row.update({
            "filled": result.is_full(),
            "valid": solver.is_valid(),
            **solver.stats.to_dict(),
        })
        results.append(row)

    print()
    print(f"{'Puzzle':<12} {'Filled':<8} {'Valid':<8} {'Time (s)':>10}")
    print("-" * 41)
    for row in results:
        filled = "N/A" if row["filled"] is None else str(row["filled"])
        valid = "N/A" if row["valid"] is None else str(row["valid"])
        elapsed = row.get("time_seconds")
        elapsed = f"{elapsed:.4f}" if elapsed is not None else "-"
        print(f"{row['puzzle']:<12} {filled:<8} {valid:<8} {elapsed:>10}")

    solved = sum(1 for row in results if row.get("solved"))
    print("-" * 41)
    print(f"Solved {solved}/{len(results)}")

    if args.output:
        with open(args.output, "w") as f:
            json.dump(results, f, indent=2)
        print(f"\nResults saved to {args.output}")


if __name__ == "__main__":
    main()
