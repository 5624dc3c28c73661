"""Solvers module for Sudoku puzzles."""

from .stats import SolverStats, StepRecord
from .candidates import CandidateStore
from .techniques import TECHNIQUES
from .deduction_solver import DeductionSolver, InvalidPuzzleError

__all__ = [
    "SolverStats",
    "StepRecord",
    "InvalidPuzzleError",
    "CandidateStore",
    "TECHNIQUES",
    "DeductionSolver",
]
