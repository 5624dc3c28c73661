"""Cell, row, column and box views over a SudokuBoard.

Views are computed from coordinates on demand and never stored by the board.
Two views over the same board and coordinates compare and hash equal.
"""

from __future__ import annotations
from enum import Enum
from typing import TYPE_CHECKING, Iterator, List, Optional, Tuple

if TYPE_CHECKING:
    from .board import SudokuBoard


class Direction(Enum):
    """Grid directions as (row delta, column delta)."""
    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)


class Cell:
    """A (row, col) reference into a board."""

    __slots__ = ("board", "row_no", "col_no")

    def __init__(self, board: SudokuBoard, row: int, col: int):
        self.board = board
        self.row_no = row
        self.col_no = col

    @property
    def value(self) -> int:
        """Current board value, 0 when empty. Assigning writes through to the board."""
        return self.board.get(self.row_no, self.col_no)

    @value.setter
    def value(self, value: int) -> None:
        self.board.set(self.row_no, self.col_no, value)

    @property
    def coords(self) -> Tuple[int, int]:
        """(row, col) on the board."""
        return self.row_no, self.col_no

    @property
    def row(self) -> Row:
        """The row containing this cell."""
        return Row(self.board, self.row_no)

    @property
    def column(self) -> Column:
        """The column containing this cell."""
        return Column(self.board, self.col_no)

    @property
    def box(self) -> Box:
        """The box containing this cell."""
        return self.board.box_of(self.row_no, self.col_no)

    def is_empty(self) -> bool:
        """Check if the cell holds no value."""
        return self.value == 0

    def is_filled(self) -> bool:
        """Check if the cell holds a value."""
        return self.value != 0

    def peers(self) -> List[Cell]:
        """Other cells sharing this cell's row, column or box, without repeats."""
        seen = {self}
        result = []
        for group in (self.row, self.column, self.box):
            for cell in group:
                if cell not in seen:
                    seen.add(cell)
                    result.append(cell)
        return result

    def neighbor(self, direction: Direction) -> Optional[Cell]:
        """Adjacent cell in `direction`, or None at the board edge."""
        dr, dc = direction.value
        row, col = self.row_no + dr, self.col_no + dc
        if 0 <= row < self.board.size and 0 <= col < self.board.size:
            return Cell(self.board, row, col)
        return None

    def siblings(self, direction: Direction) -> Iterator[Cell]:
        """Cells from here to the board edge in `direction`, this one excluded."""
        return _walk(self, direction)

    def vertical_siblings(self) -> Iterator[Cell]:
        """Cells above, then cells below."""
        return _vertical(self)

    def horizontal_siblings(self) -> Iterator[Cell]:
        """Cells to the left, then cells to the right."""
        return _horizontal(self)

    def affecting_siblings(self) -> Iterator[Cell]:
        """Vertical siblings followed by horizontal siblings."""
        yield from _vertical(self)
        yield from _horizontal(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cell):
            return NotImplemented
        return (self.board is other.board
                and self.row_no == other.row_no and self.col_no == other.col_no)

    def __hash__(self) -> int:
        return hash((id(self.board), self.row_no, self.col_no))

    def __repr__(self) -> str:
        return f"Cell({self.row_no},{self.col_no}) = {self.value}"


class Grouping:
    """An ordered run of `board.size` cells: a row, a column or a box."""

    kind = "grouping"

    def __init__(self, board: SudokuBoard, index: Tuple[int, ...]):
        self.board = board
        self._index = index

    def _coords(self, i: int) -> Tuple[int, int]:
        raise NotImplementedError

    def __len__(self) -> int:
        return self.board.size

    def __getitem__(self, i: int) -> Cell:
        self.board._check_index(i, f"{self.kind} position")
        row, col = self._coords(i)
        return Cell(self.board, row, col)

    def __iter__(self) -> Iterator[Cell]:
        for i in range(self.board.size):
            row, col = self._coords(i)
            yield Cell(self.board, row, col)

    def values(self) -> List[int]:
        """Cell values in iteration order, 0 for empty."""
        return [cell.value for cell in self]

    def cells_with(self, value: int) -> List[Cell]:
        """Cells currently holding `value`."""
        return [cell for cell in self if cell.value == value]

    def cells_without(self, value: int) -> List[Cell]:
        """Cells holding anything other than `value`."""
        return [cell for cell in self if cell.value != value]

    def empty_cells(self) -> List[Cell]:
        """Cells with no value."""
        return self.cells_with(0)

    def filled_cells(self) -> List[Cell]:
        """Cells with a value."""
        return self.cells_without(0)

    def is_full(self) -> bool:
        """Check if no cell of the grouping is empty."""
        return not self.empty_cells()

    def is_empty(self) -> bool:
        """Check if no cell of the grouping is filled."""
        return not self.filled_cells()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grouping):
            return NotImplemented
        return (self.board is other.board and self.kind == other.kind
                and self._index == other._index)

    def __hash__(self) -> int:
        return hash((id(self.board), self.kind, self._index))


class Row(Grouping):
    kind = "row"

    def __init__(self, board: SudokuBoard, row: int):
        super().__init__(board, (row,))
        self.row_no = row

    def _coords(self, i: int) -> Tuple[int, int]:
        return self.row_no, i

    def next(self) -> Optional[Row]:
        """The row below, or None for the last row."""
        if self.row_no + 1 < self.board.size:
            return Row(self.board, self.row_no + 1)
        return None

    def previous(self) -> Optional[Row]:
        """The row above, or None for the first row."""
        if self.row_no > 0:
            return Row(self.board, self.row_no - 1)
        return None

    def __repr__(self) -> str:
        return f"Row({self.row_no})"


class Column(Grouping):
    kind = "column"

    def __init__(self, board: SudokuBoard, col: int):
        super().__init__(board, (col,))
        self.col_no = col

    def _coords(self, i: int) -> Tuple[int, int]:
        return i, self.col_no

    def next(self) -> Optional[Column]:
        """The column to the right, or None for the last column."""
        if self.col_no + 1 < self.board.size:
            return Column(self.board, self.col_no + 1)
        return None

    def previous(self) -> Optional[Column]:
        """The column to the left, or None for the first column."""
        if self.col_no > 0:
            return Column(self.board, self.col_no - 1)
        return None

    def __repr__(self) -> str:
        return f"Column({self.col_no})"


class Box(Grouping):
    """A box_size x box_size sub-grid, iterated row-major."""

    kind = "box"

    def __init__(self, board: SudokuBoard, box_row: int, box_col: int):
        super().__init__(board, (box_row, box_col))
        self.box_row = box_row
        self.box_col = box_col

    @property
    def top(self) -> int:
        """Board row of the box's first row."""
        return self.box_row * self.board.box_size

    @property
    def left(self) -> int:
        """Board column of the box's first column."""
        return self.box_col * self.board.box_size

    def _coords(self, i: int) -> Tuple[int, int]:
        b = self.board.box_size
        return self.top + i // b, self.left + i % b

    def neighbor(self, direction: Direction) -> Optional[Box]:
        """Adjacent box in `direction`, or None at the board edge."""
        dr, dc = direction.value
        box_row, box_col = self.box_row + dr, self.box_col + dc
        b = self.board.box_size
        if 0 <= box_row < b and 0 <= box_col < b:
            return Box(self.board, box_row, box_col)
        return None

    def siblings(self, direction: Direction) -> Iterator[Box]:
        """Boxes from here to the board edge in `direction`, this one excluded."""
        return _walk(self, direction)

    def vertical_siblings(self) -> Iterator[Box]:
        """Boxes above, then boxes below."""
        return _vertical(self)

    def horizontal_siblings(self) -> Iterator[Box]:
        """Boxes to the left, then boxes to the right."""
        return _horizontal(self)

    def affecting_siblings(self) -> Iterator[Box]:
        """Vertical sibling boxes followed by horizontal ones."""
        yield from _vertical(self)
        yield from _horizontal(self)

    def __repr__(self) -> str:
        return f"Box({self.box_row},{self.box_col})"


def _walk(view, direction: Direction):
    current = view.neighbor(direction)
    while current is not None:
        yield current
        current = current.neighbor(direction)


def _vertical(view):
    yield from _walk(view, Direction.UP)
    yield from _walk(view, Direction.DOWN)


def _horizontal(view):
    yield from _walk(view, Direction.LEFT)
    yield from _walk(view, Direction.RIGHT)
