"""Sudoku board representation with support for variable sizes."""

from __future__ import annotations
import numpy as np
from typing import Iterator, List, Tuple, Optional

from .groupings import Cell, Row, Column, Box


class OutOfRangeError(IndexError):
    """Raised when a row, column or box coordinate lies outside the board."""


class SudokuBoard:
    """
    Represents a Sudoku board of configurable size.

    Standard Sudoku is 9x9 with 3x3 boxes.
    Supports larger boards: 16x16 (4x4 boxes), 25x25 (5x5 boxes).
    Empty cells hold 0.
    """

    def __init__(self, size: int = 9, grid: Optional[np.ndarray] = None):
        """
        Initialize a Sudoku board.

        Args:
            size: Board size (4, 9, 16, ...). Must be a perfect square.
            grid: Optional initial grid. If None, creates empty board.
        """
        # Validate size is a perfect square
        box_size = int(round(np.sqrt(size)))
        if size < 1 or box_size * box_size != size:
            raise ValueError(f"Size must be a perfect square, got {size}")

        self.size = size
        self.box_size = box_size

        if grid is not None:
            grid = np.asarray(grid)
            if grid.shape != (size, size):
                raise ValueError(f"Grid shape must be ({size}, {size})")
            if grid.min() < 0 or grid.max() > size:
                raise ValueError(f"Grid values must be 0-{size}")
            self.grid = grid.astype(np.int32)
        else:
            self.grid = np.zeros((size, size), dtype=np.int32)

    def copy(self) -> SudokuBoard:
        """Create a deep copy of the board."""
        new_board = SudokuBoard(self.size)
        new_board.grid = self.grid.copy()
        return new_board

    def _check_index(self, index: int, what: str = "index", limit: Optional[int] = None) -> None:
        limit = self.size if limit is None else limit
        if not 0 <= index < limit:
            raise OutOfRangeError(f"{what} {index} is outside [0, {limit})")

    def _check_coords(self, row: int, col: int) -> None:
        self._check_index(row, "row")
        self._check_index(col, "column")

    def get(self, row: int, col: int) -> int:
        """Get value at position (row, col). 0 means empty."""
        self._check_coords(row, col)
        return int(self.grid[row, col])

    def set(self, row: int, col: int, value: int) -> None:
        """Set value at position (row, col). Use 0 to clear."""
        self._check_coords(row, col)
        if value < 0 or value > self.size:
            raise ValueError(f"Value must be 0-{self.size}, got {value}")
        self.grid[row, col] = value

    def clear(self, row: int, col: int) -> None:
        """Clear the cell at position (row, col)."""
        self.set(row, col, 0)

    def is_cell_empty(self, row: int, col: int) -> bool:
        """Check if cell is empty (value is 0)."""
        return self.get(row, col) == 0

    def all_cells(self) -> List[Tuple[Tuple[int, int], int]]:
        """All ((row, col), value) pairs in row-major order."""
        return [((i, j), int(self.grid[i, j]))
                for i in range(self.size) for j in range(self.size)]

    def get_row(self, row: int) -> np.ndarray:
        """Get all values in a row."""
        self._check_index(row, "row")
        return self.grid[row, :]

    def get_col(self, col: int) -> np.ndarray:
        """Get all values in a column."""
        self._check_index(col, "column")
        return self.grid[:, col]

    def get_box(self, row: int, col: int) -> np.ndarray:
        """Get all values in the box containing (row, col)."""
        self._check_coords(row, col)
        box_row = (row // self.box_size) * self.box_size
        box_col = (col // self.box_size) * self.box_size
        return self.grid[box_row:box_row + self.box_size,
                        box_col:box_col + self.box_size].flatten()

    # Views

    def cell(self, row: int, col: int) -> Cell:
        """Get a reference to the cell at (row, col)."""
        self._check_coords(row, col)
        return Cell(self, row, col)

    def row(self, index: int) -> Row:
        """Get the row view at `index`."""
        self._check_index(index, "row")
        return Row(self, index)

    def column(self, index: int) -> Column:
        """Get the column view at `index`."""
        self._check_index(index, "column")
        return Column(self, index)

    def box(self, box_row: int, box_col: int) -> Box:
        """Get the box at box coordinates (box_row, box_col), each 0 to box_size-1."""
        self._check_index(box_row, "box row", self.box_size)
        self._check_index(box_col, "box column", self.box_size)
        return Box(self, box_row, box_col)

    def box_of(self, row: int, col: int) -> Box:
        """Get the box containing (row, col)."""
        self._check_coords(row, col)
        return Box(self, row // self.box_size, col // self.box_size)

    def rows(self) -> List[Row]:
        """All rows, top to bottom."""
        return [Row(self, i) for i in range(self.size)]

    def columns(self) -> List[Column]:
        """All columns, left to right."""
        return [Column(self, i) for i in range(self.size)]

    def boxes(self) -> List[Box]:
        """All boxes in row-major order."""
        return [Box(self, i, j)
                for i in range(self.box_size) for j in range(self.box_size)]

    def groupings(self) -> list:
        """Rows, then columns, then boxes."""
        return self.rows() + self.columns() + self.boxes()

    def cells(self) -> Iterator[Cell]:
        """Iterate over every cell in row-major order."""
        for i in range(self.size):
            for j in range(self.size):
                yield Cell(self, i, j)

    def count_empty(self) -> int:
        """Count the number of empty cells."""
        return int(np.sum(self.grid == 0))

    def count_filled(self) -> int:
        """Count the number of filled cells."""
        return int(np.sum(self.grid != 0))

    def is_full(self) -> bool:
        """Check if all cells are filled."""
        return self.count_empty() == 0

    def is_empty(self) -> bool:
        """Check if no cell is filled."""
        return self.count_filled() == 0

    def is_valid(self) -> bool:
        """
        Check if the current board state is valid.
        Does not check if solution is complete, only if no conflicts exist.
        """
        units = ([self.grid[i, :] for i in range(self.size)]
                 + [self.grid[:, j] for j in range(self.size)]
                 + [self.get_box(r, c)
                    for r in range(0, self.size, self.box_size)
                    for c in range(0, self.size, self.box_size)])
        for unit in units:
            non_zero = unit[unit != 0]
            if len(non_zero) != len(set(non_zero.tolist())):
                return False
        return True

    def is_solved(self) -> bool:
        """Check if the puzzle is completely and correctly solved."""
        return self.is_full() and self.is_valid()

    def to_string(self) -> str:
        """
        Convert board to a compact string representation.
        Uses 0 for empty cells, 1-9 for standard, A-G for 16x16.
        """
        chars = []
        for val in self.grid.flatten():
            if val == 0:
                chars.append('0')
            elif val <= 9:
                chars.append(str(val))
            else:
                chars.append(chr(ord('A') + val - 10))
        return ''.join(chars)

    @classmethod
    def from_string(cls, s: str, size: int = 9) -> SudokuBoard:
        """
        Create a board from a string representation.

        Args:
            s: String of length size*size with values.
               0 or . for empty, 1-9 for values, A-G for 10-16.
            size: Board size.
        """
        if len(s) != size * size:
            raise ValueError(f"String length must be {size*size}, got {len(s)}")

        grid = np.zeros((size, size), dtype=np.int32)
        for idx, c in enumerate(s):
            if c == '0' or c == '.':
                continue
            if c.isdecimal():
                val = int(c)
            elif c.isalpha():
                val = ord(c.upper()) - ord('A') + 10
            else:
                raise ValueError(f"Unexpected character {c!r} at position {idx}")
            if val > size:
                raise ValueError(f"Value {c!r} out of range for size {size}")
            grid[idx // size, idx % size] = val

        return cls(size, grid)

    @classmethod
    def from_2d_list(cls, data: List[List[int]]) -> SudokuBoard:
        """Create a board from a 2D list."""
        arr = np.array(data, dtype=np.int32)
        size = arr.shape[0]
        return cls(size, arr)

    def __str__(self) -> str:
        """Pretty-print the board."""
        lines = []
        horizontal_sep = '+' + (('-' * (self.box_size * 2 + 1)) + '+') * self.box_size

        for i in range(self.size):
            if i % self.box_size == 0:
                lines.append(horizontal_sep)

            row_str = '|'
            for j in range(self.size):
                val = self.grid[i, j]
                if val == 0:
                    row_str += ' .'
                elif val <= 9:
                    row_str += f' {val}'
                else:
                    row_str += f' {chr(ord("A") + val - 10)}'

                if (j + 1) % self.box_size == 0:
                    row_str += ' |'

            lines.append(row_str)

        lines.append(horizontal_sep)
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"SudokuBoard(size={self.size}, filled={self.count_filled()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SudokuBoard):
            return False
        return self.size == other.size and np.array_equal(self.grid, other.grid)

    # Boards are mutable; views hash on board identity instead.
    __hash__ = None
