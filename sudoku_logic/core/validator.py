"""Validation utilities for Sudoku boards."""

from __future__ import annotations
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from .board import SudokuBoard
    from .groupings import Cell


def is_valid_placement(board: SudokuBoard, row: int, col: int, value: int) -> bool:
    """
    Check if placing a value at (row, col) is valid.

    The cell must be empty and the value must not already appear in the
    cell's row, column or box.

    Args:
        board: The Sudoku board.
        row: Row index.
        col: Column index.
        value: Value to check (1 to board.size).

    Returns:
        True if the placement is valid.
    """
    if value < 1 or value > board.size:
        return False

    if not board.is_cell_empty(row, col):
        return False

    # Check row
    if value in board.get_row(row):
        return False

    # Check column
    if value in board.get_col(col):
        return False

    # Check box
    if value in board.get_box(row, col):
        return False

    return True


def is_valid_cell(cell: Cell) -> bool:
    """
    Check that a filled cell's value is unique in its row, column and box.

    Empty cells are always valid.
    """
    value = cell.value
    if value == 0:
        return True
    for group in (cell.row, cell.column, cell.box):
        if any(other != cell for other in group.cells_with(value)):
            return False
    return True


def invalid_cells(board: SudokuBoard) -> List[Cell]:
    """Filled cells that share their value with another cell of a row, column or box."""
    return [cell for cell in board.cells() if not is_valid_cell(cell)]


def is_valid_board(board: SudokuBoard) -> bool:
    """
    Check if the entire board state is valid (no conflicts).

    Args:
        board: The Sudoku board to validate.

    Returns:
        True if no constraints are violated.
    """
    return board.is_valid()


def validate_solution(puzzle: SudokuBoard, solution: SudokuBoard) -> bool:
    """
    Validate that a solution correctly solves the puzzle.

    Args:
        puzzle: The original puzzle.
        solution: The proposed solution.

    Returns:
        True if solution is valid and matches puzzle clues.
    """
    if puzzle.size != solution.size:
        return False

    # Check that solution respects original clues
    for (row, col), value in puzzle.all_cells():
        if value != 0 and solution.get(row, col) != value:
            return False

    # Check that solution is complete and valid
    return solution.is_solved()
