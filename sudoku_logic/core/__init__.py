"""Core module for Sudoku board representation and validation."""

from .board import SudokuBoard, OutOfRangeError
from .groupings import Cell, Row, Column, Box, Direction
from .validator import is_valid_placement, is_valid_cell, invalid_cells, is_valid_board
from .reader import parse_puzzle, load_puzzle

__all__ = [
    "SudokuBoard",
    "OutOfRangeError",
    "Cell",
    "Row",
    "Column",
    "Box",
    "Direction",
    "is_valid_placement",
    "is_valid_cell",
    "invalid_cells",
    "is_valid_board",
    "parse_puzzle",
    "load_puzzle",
]
