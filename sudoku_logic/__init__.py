"""Sudoku solving by pure deduction."""

from .core import SudokuBoard, OutOfRangeError, parse_puzzle, load_puzzle
from .solvers import DeductionSolver, InvalidPuzzleError, CandidateStore

__version__ = "1.0.0"

__all__ = [
    "SudokuBoard",
    "OutOfRangeError",
    "parse_puzzle",
    "load_puzzle",
    "DeductionSolver",
    "InvalidPuzzleError",
    "CandidateStore",
]
