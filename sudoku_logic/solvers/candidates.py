"""Per-value candidate tracking for deduction solvers."""

from __future__ import annotations
from typing import Iterable, List, Set

import numpy as np

from ..core.board import SudokuBoard
from ..core.groupings import Cell


class CandidateStore:
    """
    Records, for each value, which cells it can still go in.

    `can[v - 1, r, c]` is True while value v has not been ruled out of cell
    (r, c). Entries only ever go from True to False; the constructor is the
    only place that sets True.
    """

    def __init__(self, board: SudokuBoard):
        self.board = board
        self.size = board.size
        self.values = list(range(1, board.size + 1))
        self.can = np.ones((board.size, board.size, board.size), dtype=bool)

    def can_go(self, value: int, cell: Cell, empty_check: bool = True) -> bool:
        """
        Whether `value` is still possible at `cell`.

        A filled cell never takes a value unless `empty_check` is False, in
        which case the raw entry is returned.
        """
        if empty_check and self.board.grid[cell.row_no, cell.col_no] != 0:
            return False
        return bool(self.can[value - 1, cell.row_no, cell.col_no])

    def eliminate(self, value: int, cell: Cell) -> bool:
        """Rule `value` out of `cell`. Returns True if the entry changed."""
        idx = (value - 1, cell.row_no, cell.col_no)
        if not self.can[idx]:
            return False
        self.can[idx] = False
        return True

    def assign(self, cell: Cell, value: int) -> bool:
        """
        Place `value` in `cell` and propagate.

        The value is ruled out of every peer and every other value is ruled
        out of the cell. Returns True if the board value changed.
        """
        changed = cell.value != value
        cell.value = value
        r, c = cell.row_no, cell.col_no
        b = self.board.box_size
        top, left = (r // b) * b, (c // b) * b
        self.can[:, r, c] = False
        self.can[value - 1, r, :] = False
        self.can[value - 1, :, c] = False
        self.can[value - 1, top:top + b, left:left + b] = False
        return changed

    def candidates(self, cell: Cell, empty_check: bool = True) -> Set[int]:
        """Values still possible at `cell`."""
        return {v for v in self.values if self.can_go(v, cell, empty_check)}

    def cells_for(self, value: int, cells: Iterable[Cell]) -> List[Cell]:
        """The cells among `cells` where `value` can still go."""
        return [cell for cell in cells if self.can_go(value, cell)]

    def count(self) -> int:
        """Number of entries still True."""
        return int(self.can.sum())

    def snapshot(self) -> np.ndarray:
        return self.can.copy()

    def render(self) -> str:
        """Remaining candidates per empty cell as a text grid, boxes delimited."""
        cells = []
        for cell in self.board.cells():
            values = sorted(self.candidates(cell))
            cells.append(",".join(str(v) for v in values) if values else str(cell.value or "-"))
        width = max(len(text) for text in cells)
        b = self.board.box_size
        sep = "+" + "+".join("-" * ((width + 1) * b + 1) for _ in range(b)) + "+"
        lines = []
        for i in range(self.size):
            if i % b == 0:
                lines.append(sep)
            row = cells[i * self.size:(i + 1) * self.size]
            chunks = [" ".join(text.ljust(width) for text in row[j:j + b])
                      for j in range(0, self.size, b)]
            lines.append("| " + " | ".join(chunks) + " |")
        lines.append(sep)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"CandidateStore(size={self.size}, remaining={self.count()})"
