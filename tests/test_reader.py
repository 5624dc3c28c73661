"""Tests for puzzle loading."""

import os

import pytest
from sudoku_logic.core.reader import (
    parse_puzzle, load_puzzle, puzzle_path, iter_puzzles, list_puzzle_files
)

TEST_PUZZLE = (
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)

GRID_TEXT = """
5 3 _ _ 7 _ _ _ _
6 _ _ 1 9 5 _ _ _
_ 9 8 _ _ _ _ 6 _
8 _ _ _ 6 _ _ _ 3
4 _ _ 8 _ 3 _ _ 1
7 _ _ _ 2 _ _ _ 6
_ 6 _ _ _ _ 2 8 _
_ _ _ 4 1 9 _ _ 5
_ _ _ _ 8 _ _ 7 9
"""


class TestParsePuzzle:
    """Text encodings."""

    def test_whitespace_tokens(self):
        board = parse_puzzle(GRID_TEXT)
        assert board.to_string() == TEST_PUZZLE

    def test_compact_string(self):
        board = parse_puzzle(TEST_PUZZLE)
        assert board.get(0, 0) == 5
        assert board.get(8, 8) == 9

    def test_unknown_tokens_are_empty(self):
        board = parse_puzzle("x . 0 ? 4")
        assert board.count_filled() == 1
        assert board.get(0, 4) == 4

    def test_short_input_is_padded(self):
        board = parse_puzzle("1 2 3")
        assert board.count_filled() == 3
        assert board.count_empty() == 78

    def test_too_many_tokens(self):
        with pytest.raises(ValueError):
            parse_puzzle(" ".join(["1"] * 82))

    def test_out_of_range_number_is_empty(self):
        board = parse_puzzle("10 5", size=9)
        assert board.get(0, 0) == 0
        assert board.get(0, 1) == 5

    def test_superscript_digit_is_empty(self):
        """Unicode digits that int() rejects are unknown tokens, not errors."""
        board = parse_puzzle("² " + "0 " * 80)
        assert board.get(0, 0) == 0
        assert board.count_filled() == 0

    def test_superscript_in_compact_string(self):
        with pytest.raises(ValueError, match="Unexpected character"):
            parse_puzzle("²" + TEST_PUZZLE[1:])


class TestFiles:
    """Puzzle files and directories."""

    def test_puzzle_path(self):
        assert puzzle_path("problems", 3, 1) == os.path.join("problems", "03_01.txt")

    def test_load_and_iterate(self, tmp_path):
        (tmp_path / "01_02.txt").write_text(GRID_TEXT)
        (tmp_path / "01_01.txt").write_text(TEST_PUZZLE)
        (tmp_path / "notes.md").write_text("ignored")

        assert load_puzzle(str(tmp_path / "01_02.txt")).to_string() == TEST_PUZZLE
        assert list_puzzle_files(str(tmp_path)) == ["01_01.txt", "01_02.txt"]
        names = [name for name, _ in iter_puzzles(str(tmp_path))]
        assert names == ["01_01", "01_02"]
