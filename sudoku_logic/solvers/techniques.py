"""
Deduction techniques operating on a CandidateStore.

Each technique takes the store (which owns the board it works on) and
returns True if it ruled out at least one candidate or filled a cell.
None of them guess: every elimination and placement follows from the
current candidates alone.

TECHNIQUES lists them in the order the DeductionSolver tries them.
"""

from __future__ import annotations
from collections import Counter
from itertools import combinations
from typing import Callable, FrozenSet, List, Set, Tuple

import numpy as np

from .candidates import CandidateStore


def _value_combinations(values: List[int]) -> List[FrozenSet[int]]:
    """All pairs, then all triples, of values."""
    return [frozenset(combo) for n in (2, 3) for combo in combinations(values, n)]


def fill_last_in_group(store: CandidateStore) -> bool:
    """
    Reconcile the store with the board.

    Rules a value out of every cell that is already filled or whose row,
    column or box already holds that value. This is what removes the
    givens' effects from a freshly initialised (all True) store, and it
    catches anything later placements invalidated.
    """
    board = store.board
    b = board.box_size
    grid = board.grid
    any_changed = False
    for value in store.values:
        present = grid == value
        in_row = present.any(axis=1)
        in_col = present.any(axis=0)
        in_box = present.reshape(b, b, b, b).any(axis=(1, 3))
        in_box = np.repeat(np.repeat(in_box, b, axis=0), b, axis=1)
        blocked = (grid != 0) | in_row[:, None] | in_col[None, :] | in_box
        stale = blocked & store.can[value - 1]
        for row, col in zip(*np.nonzero(stale)):
            any_changed = store.eliminate(value, board.cell(int(row), int(col))) or any_changed
    return any_changed


def fill_box_line_by_value(store: CandidateStore) -> bool:
    """
    Box-line reduction.

    When a value's candidates inside a box all sit on one row (or column),
    the value must go on that line inside the box, so it is removed from
    the rest of the line.
    """
    board = store.board
    any_changed = False
    for value in store.values:
        for box in board.boxes():
            cells = store.cells_for(value, box)
            if not 2 <= len(cells) <= board.box_size:
                continue
            rows = {cell.row_no for cell in cells}
            if len(rows) == 1:
                line = board.row(rows.pop())
            else:
                cols = {cell.col_no for cell in cells}
                if len(cols) != 1:
                    continue
                line = board.column(cols.pop())
            for cell in line:
                if cell.box != box:
                    any_changed = store.eliminate(value, cell) or any_changed
    return any_changed


def _band_patterns(store: CandidateStore, value: int, boxes, along_rows: bool) -> dict:
    """Relative lines each box's candidates for `value` occupy, for boxes spanning box_size - 1 lines."""
    b = store.board.box_size
    patterns = {}
    for box in boxes:
        cells = store.cells_for(value, box)
        lines = frozenset((cell.row_no if along_rows else cell.col_no) % b for cell in cells)
        if len(lines) == b - 1:
            patterns[box] = lines
    return patterns


def pointing_pairs(store: CandidateStore) -> bool:
    """
    Band intersection removal.

    Within a band of boxes sharing rows, classify each box by the relative
    rows its candidates for a value occupy. For 3x3 boxes the classes are
    upper pair (0-1), lower pair (1-2) and split (0 and 2). If two boxes
    share a class they use up those two rows of the band between them, so
    the value is removed from those rows in the remaining box. The same is
    done for bands of boxes sharing columns.
    """
    board = store.board
    b = board.box_size
    if b < 2:
        return False
    any_changed = False
    for value in store.values:
        for along_rows in (True, False):
            for band in range(b):
                if along_rows:
                    boxes = [board.box(band, k) for k in range(b)]
                else:
                    boxes = [board.box(k, band) for k in range(b)]
                patterns = _band_patterns(store, value, boxes, along_rows)
                counts = Counter(patterns.values())
                for lines, count in counts.items():
                    if count != b - 1:
                        continue
                    for box in boxes:
                        if patterns.get(box) == lines:
                            continue
                        for cell in box:
                            line = cell.row_no if along_rows else cell.col_no
                            if line % b in lines:
                                any_changed = store.eliminate(value, cell) or any_changed
    return any_changed


def fill_board_by_value(store: CandidateStore) -> bool:
    """
    Hidden singles, value by value.

    A candidate cell that is the only place for its value in its row,
    column or box gets the value. Lines and boxes seen to hold several
    candidates are remembered for the rest of the value's round.
    """
    board = store.board
    any_changed = False
    for value in store.values:
        invalid_rows: Set[int] = set()
        invalid_cols: Set[int] = set()
        invalid_boxes: Set[Tuple[int, int]] = set()
        for cell in board.cells():
            if not store.can_go(value, cell):
                continue
            is_good = False
            if cell.row_no not in invalid_rows:
                if len(store.cells_for(value, cell.row)) > 1:
                    invalid_rows.add(cell.row_no)
                else:
                    is_good = True
            if cell.col_no not in invalid_cols:
                if len(store.cells_for(value, cell.column)) > 1:
                    invalid_cols.add(cell.col_no)
                else:
                    is_good = True
            box = cell.box
            if (box.box_row, box.box_col) not in invalid_boxes:
                if len(store.cells_for(value, box)) > 1:
                    invalid_boxes.add((box.box_row, box.box_col))
                else:
                    is_good = True
            if is_good:
                any_changed = store.assign(cell, value) or any_changed
    return any_changed


def fill_board_by_last_ticks(store: CandidateStore) -> bool:
    """Naked singles: an empty cell with one candidate left gets it."""
    any_changed = False
    for cell in store.board.cells():
        if cell.is_filled():
            continue
        candidates = store.candidates(cell)
        if len(candidates) == 1:
            any_changed = store.assign(cell, candidates.pop()) or any_changed
    return any_changed


def fill_naked(store: CandidateStore) -> bool:
    """
    Naked pairs and triples.

    If exactly N cells of a grouping (each with more than one candidate)
    have all their candidates inside a set of N values, those values
    belong to those cells and are removed from the rest of the grouping.
    Stops at the first grouping that yields a change.
    """
    combos = _value_combinations(store.values)
    any_changed = False
    for grouping in store.board.groupings():
        cells = list(grouping)
        open_cells = [(cell, store.candidates(cell)) for cell in cells]
        open_cells = [(cell, cands) for cell, cands in open_cells if len(cands) > 1]
        for combo in combos:
            naked = [cell for cell, cands in open_cells if cands <= combo]
            if len(naked) == len(combo):
                for other in cells:
                    if other in naked:
                        continue
                    for value in combo:
                        any_changed = store.eliminate(value, other) or any_changed
            # expensive scan, bail out as soon as something moved
            if any_changed:
                return True
    return any_changed


def fill_hidden(store: CandidateStore) -> bool:
    """
    Hidden pairs and triples.

    If N values of a grouping can only go in the same N cells (and each
    of them has somewhere to go), those cells hold exactly those values,
    so every other candidate is removed from them. Stops at the first
    grouping that yields a change.
    """
    combos = _value_combinations(store.values)
    any_changed = False
    for grouping in store.board.groupings():
        cells = list(grouping)
        positions = {value: store.cells_for(value, cells) for value in store.values}
        for combo in combos:
            if not all(positions[value] for value in combo):
                continue
            hidden = []
            for value in sorted(combo):
                hidden.extend(cell for cell in positions[value] if cell not in hidden)
            if len(hidden) == len(combo):
                for cell in hidden:
                    for value in store.values:
                        if value not in combo:
                            any_changed = store.eliminate(value, cell) or any_changed
            if any_changed:
                return True
    return any_changed


Technique = Callable[[CandidateStore], bool]

TECHNIQUES: Tuple[Technique, ...] = (
    fill_last_in_group,
    fill_box_line_by_value,
    pointing_pairs,
    fill_board_by_value,
    fill_board_by_last_ticks,
    fill_naked,
    fill_hidden,
)
