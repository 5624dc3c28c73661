"""Loading puzzles from text and puzzle directories."""

from __future__ import annotations
import os
from typing import Iterator, List, Tuple

import numpy as np

from .board import SudokuBoard


def parse_puzzle(text: str, size: int = 9) -> SudokuBoard:
    """
    Parse a puzzle from text.

    Two encodings are accepted:
    - Whitespace separated tokens, one per cell in row-major order. A token
      that is a number 1..size is that value; anything else (0, _, ., x)
      is an empty cell. Missing trailing cells are empty.
    - A single compact token of size*size characters, as produced by
      SudokuBoard.to_string.
    """
    tokens = text.split()
    if len(tokens) == 1 and len(tokens[0]) == size * size and size * size > 1:
        return SudokuBoard.from_string(tokens[0], size)

    if len(tokens) > size * size:
        raise ValueError(f"Expected at most {size * size} cells, got {len(tokens)}")

    values = np.zeros(size * size, dtype=np.int32)
    for idx, token in enumerate(tokens):
        if token.isdecimal() and 1 <= int(token) <= size:
            values[idx] = int(token)

    return SudokuBoard(size, values.reshape(size, size))


def load_puzzle(path: str, size: int = 9) -> SudokuBoard:
    """Read and parse a puzzle file."""
    with open(path, "r") as f:
        return parse_puzzle(f.read(), size)


def puzzle_path(directory: str, difficulty: int, number: int) -> str:
    """Path of puzzle `number` at `difficulty`, named like 03_01.txt."""
    return os.path.join(directory, f"{difficulty:02d}_{number:02d}.txt")


def iter_puzzles(directory: str, size: int = 9) -> Iterator[Tuple[str, SudokuBoard]]:
    """Yield (name, board) for every .txt file in a directory, sorted by name."""
    for name in list_puzzle_files(directory):
        yield os.path.splitext(name)[0], load_puzzle(os.path.join(directory, name), size)


def list_puzzle_files(directory: str) -> List[str]:
    return sorted(name for name in os.listdir(directory) if name.endswith(".txt"))
