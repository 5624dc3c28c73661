"""Pure-deduction Sudoku solver: constraint propagation without guessing."""

from __future__ import annotations
import logging
import time
from collections import Counter
from typing import Iterable, List, Optional, Tuple

from .candidates import CandidateStore
from .stats import SolverStats, StepRecord
from .techniques import TECHNIQUES, Technique
from ..core.board import SudokuBoard
from ..core.groupings import Cell
from ..core.validator import invalid_cells, is_valid_cell

log = logging.getLogger(__name__)


class InvalidPuzzleError(ValueError):
    """The givens already break row, column or box uniqueness."""

    def __init__(self, cells: List[Cell]):
        self.cells = list(cells)
        coords = ", ".join(f"({c.row_no},{c.col_no})={c.value}" for c in self.cells)
        super().__init__(f"Puzzle givens conflict at {coords}")


class DeductionSolver:
    """
    Sudoku solver that only ever deduces.

    The solver works on its own copy of the puzzle. Each pass of the loop
    tries the techniques in priority order; the first one that changes
    anything sends the loop back to the first technique. The loop stops
    when the board is full or when a whole pass changes nothing, in which
    case the board is returned partially solved.

    Usage:
        solver = DeductionSolver(board)
        result = solver.solve()
        result.is_full(), solver.is_solved(), solver.steps
    """

    name = "Deduction"

    def __init__(
        self,
        board: SudokuBoard,
        log_steps: bool = True,
        validate_givens: bool = True,
        techniques: Optional[Iterable[Technique]] = None,
    ):
        """
        Initialize the solver.

        Args:
            board: The puzzle. It is copied and never modified.
            log_steps: Record a StepRecord for every technique application.
            validate_givens: Raise InvalidPuzzleError if the givens already
                             conflict, instead of letting the solve stall.
            techniques: Override the technique order (default: TECHNIQUES).
        """
        self.board = board.copy()
        if validate_givens:
            conflicts = invalid_cells(self.board)
            if conflicts:
                raise InvalidPuzzleError(conflicts)

        self.candidates = CandidateStore(self.board)
        self.log_steps = log_steps
        self.techniques: Tuple[Technique, ...] = (
            TECHNIQUES if techniques is None else tuple(techniques))
        self.iteration = 0
        self.stats = SolverStats(algorithm=self.name)
        self._steps: List[StepRecord] = []

    @property
    def steps(self) -> Tuple[StepRecord, ...]:
        return tuple(self._steps)

    def solve(self) -> SudokuBoard:
        """Run the deduction loop and return the (possibly partial) board."""
        self._steps.clear()
        self.iteration = 0
        self.stats = SolverStats(algorithm=self.name)
        fired: Counter = Counter()

        start_time = time.perf_counter()
        while not self.board.is_full():
            self.iteration += 1
            for technique in self.techniques:
                if self._apply(technique):
                    fired[technique.__name__] += 1
                    break
            else:
                log.debug("No technique made progress at iteration %d", self.iteration)
                break
        self.stats.time_seconds = time.perf_counter() - start_time

        self.stats.iterations = self.iteration
        self.stats.solved = self.is_solved()
        self.stats.extra["filled_cells"] = self.board.count_filled()
        self.stats.extra["remaining_candidates"] = self.candidates.count()
        self.stats.extra["technique_counts"] = dict(fired)

        if self.stats.solved:
            log.info("Solved in %d iterations (%.4fs)", self.iteration, self.stats.time_seconds)
        else:
            log.info("Stuck after %d iterations with %d empty cells",
                     self.iteration, self.board.count_empty())
        return self.board

    def _apply(self, technique: Technique) -> bool:
        if not self.log_steps:
            changed = technique(self.candidates)
        else:
            start = time.perf_counter()
            changed = technique(self.candidates)
            elapsed = time.perf_counter() - start
            self._steps.append(StepRecord(technique.__name__, changed, elapsed, self.iteration))
        if changed:
            log.debug("%s made progress at iteration %d", technique.__name__, self.iteration)
        return changed

    def is_valid_cell(self, cell: Cell) -> bool:
        return is_valid_cell(cell)

    def invalid_cells(self) -> List[Cell]:
        """Filled cells whose value repeats in their row, column or box."""
        return invalid_cells(self.board)

    def is_valid(self) -> bool:
        return not self.invalid_cells()

    def is_solved(self) -> bool:
        return self.board.is_full() and self.is_valid()

    def format_steps(self) -> str:
        """The step log as a text table, one block per iteration."""
        if not self._steps:
            return "(no steps)"
        width = max(len(step.technique) for step in self._steps)
        lines = []
        current = None
        for step in self._steps:
            if step.iteration != current:
                current = step.iteration
                lines.append(f"Iteration: {current}")
            mark = "changed" if step.changed else "-"
            lines.append(f"  {step.technique.ljust(width)}  {mark:<7}  {step.elapsed * 1000:8.3f} ms")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"DeductionSolver(filled={self.board.count_filled()}, iteration={self.iteration})"
