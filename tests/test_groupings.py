"""Tests for cell, row, column and box views."""

import pytest
from sudoku_logic.core.board import SudokuBoard, OutOfRangeError
from sudoku_logic.core.groupings import Cell, Grouping, Row, Column, Box, Direction

SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)


@pytest.fixture
def board():
    return SudokuBoard.from_string(SOLUTION)


class TestGroupingEquivalence:
    """Row, column and box views address the same cells."""

    def test_all_views_agree(self, board):
        for r in range(9):
            for c in range(9):
                cell = board.row(r)[c]
                assert cell == board.column(c)[r]
                assert cell == board.box(r // 3, c // 3)[(r % 3) * 3 + c % 3]
                assert cell.value == board.get(r, c)

    def test_box_of(self, board):
        assert board.box_of(4, 7) == board.box(1, 2)
        assert board.cell(4, 7).box == Box(board, 1, 2)

    def test_box_corner(self, board):
        box = board.box(1, 2)
        assert (box.top, box.left) == (3, 6)
        assert box[0].coords == (3, 6)
        assert box[8].coords == (5, 8)


class TestPublicSurface:
    """Board and views expose only the documented helpers."""

    @pytest.mark.parametrize("name", ["get_empty_cells"])
    def test_board_has_no_unused_helpers(self, board, name):
        assert not hasattr(board, name)

    @pytest.mark.parametrize("name", ["contains_value", "row_numbers", "column_numbers"])
    def test_box_has_no_unused_helpers(self, board, name):
        assert not hasattr(board.box(0, 0), name)

    @pytest.mark.parametrize("cls", [SudokuBoard, Cell, Grouping, Row, Column, Box])
    def test_public_methods_documented(self, cls):
        undocumented = [name for name, attr in vars(cls).items()
                        if not name.startswith("_") and callable(getattr(attr, "fget", attr))
                        and not (getattr(attr, "fget", attr).__doc__ or "").strip()]
        assert undocumented == []


class TestEquality:
    """Views compare by board identity, kind and coordinates."""

    def test_views_equal_and_hash_equal(self, board):
        assert board.row(1) == board.row(1)
        assert hash(board.row(1)) == hash(board.row(1))
        assert board.box(1, 1) == board.box(1, 1)
        assert hash(board.cell(2, 3)) == hash(board.cell(2, 3))
        assert len({board.cell(2, 3), board.cell(2, 3), board.cell(3, 2)}) == 2

    def test_kind_matters(self, board):
        assert board.row(1) != board.column(1)

    def test_board_identity_matters(self, board):
        other = board.copy()
        assert board.cell(0, 0) != other.cell(0, 0)
        assert board.row(0) != other.row(0)


class TestIteration:
    """Fixed iteration order for each kind of grouping."""

    def test_row_left_to_right(self, board):
        assert [cell.coords for cell in board.row(2)] == [(2, c) for c in range(9)]

    def test_column_top_to_bottom(self, board):
        assert [cell.coords for cell in board.column(5)] == [(r, 5) for r in range(9)]

    def test_box_row_major(self, board):
        coords = [cell.coords for cell in board.box(1, 2)]
        assert coords == [(3, 6), (3, 7), (3, 8), (4, 6), (4, 7), (4, 8), (5, 6), (5, 7), (5, 8)]

    def test_groupings_order(self, board):
        groupings = board.groupings()
        assert len(groupings) == 27
        assert isinstance(groupings[0], Row)
        assert isinstance(groupings[9], Column)
        assert isinstance(groupings[18], Box)

    def test_values(self, board):
        assert board.row(0).values() == [5, 3, 4, 6, 7, 8, 9, 1, 2]


class TestFiltering:
    """Filtering cells by value and fill state."""

    def test_cells_with_and_without(self, board):
        row = board.row(0)
        assert [cell.coords for cell in row.cells_with(7)] == [(0, 4)]
        assert len(row.cells_without(7)) == 8

    def test_full_and_empty(self, board):
        row = board.row(0)
        assert row.is_full()
        assert not row.is_empty()
        board.clear(0, 0)
        assert not row.is_full()
        assert [cell.coords for cell in row.empty_cells()] == [(0, 0)]
        assert SudokuBoard().box(0, 0).is_empty()

    def test_cell_value_writes_through(self, board):
        cell = board.cell(0, 0)
        cell.value = 0
        assert board.get(0, 0) == 0
        assert cell.is_empty()

    def test_peers(self, board):
        peers = board.cell(4, 4).peers()
        assert len(peers) == 20
        assert board.cell(4, 4) not in peers


class TestBounds:
    """Out-of-range access raises, neighbour traversal stops at the edge."""

    def test_out_of_range_views(self, board):
        with pytest.raises(OutOfRangeError):
            board.row(9)
        with pytest.raises(OutOfRangeError):
            board.column(-1)
        with pytest.raises(OutOfRangeError):
            board.box(3, 0)
        with pytest.raises(OutOfRangeError):
            board.row(0)[9]
        with pytest.raises(OutOfRangeError):
            board.box(0, 0)[9]

    def test_cell_neighbors(self, board):
        corner = board.cell(0, 0)
        assert corner.neighbor(Direction.UP) is None
        assert corner.neighbor(Direction.LEFT) is None
        assert corner.neighbor(Direction.RIGHT) == board.cell(0, 1)
        assert corner.neighbor(Direction.DOWN) == board.cell(1, 0)

    def test_cell_siblings(self, board):
        cell = board.cell(2, 3)
        assert len(list(cell.vertical_siblings())) == 8
        assert len(list(cell.horizontal_siblings())) == 8
        assert len(list(cell.affecting_siblings())) == 16
        assert [c.coords for c in cell.siblings(Direction.UP)] == [(1, 3), (0, 3)]

    def test_box_siblings(self, board):
        box = board.box(0, 1)
        assert box.neighbor(Direction.UP) is None
        assert list(box.horizontal_siblings()) == [board.box(0, 0), board.box(0, 2)]
        assert list(box.vertical_siblings()) == [board.box(1, 1), board.box(2, 1)]

    def test_row_and_column_next_previous(self, board):
        assert board.row(0).previous() is None
        assert board.row(0).next() == board.row(1)
        assert board.row(8).next() is None
        assert board.column(8).next() is None
        assert board.column(3).previous() == board.column(2)
