"""Sudoku grid storage and candidate computation."""
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

import numpy as np

GRID_SIZE = 9
BOX_SIZE = 3
EMPTY = 0
DIGITS = range(1, GRID_SIZE + 1)

Rows = List[List[int]]


def box_origin(row: int, col: int) -> Tuple[int, int]:
    """Return the top-left cell of the box containing (row, col)."""
    return BOX_SIZE * (row // BOX_SIZE), BOX_SIZE * (col // BOX_SIZE)


class Grid:
    """A 9x9 board of digits where 0 marks an empty cell."""

    def __init__(self, rows: Optional[Sequence[Sequence[int]]] = None) -> None:
        if rows is None:
            self._cells: Rows = [[EMPTY] * GRID_SIZE for _ in range(GRID_SIZE)]
            return
        if len(rows) != GRID_SIZE or any(len(row) != GRID_SIZE for row in rows):
            raise ValueError(f"Grid must be {GRID_SIZE}x{GRID_SIZE}")
        self._cells = [[int(value) for value in row] for row in rows]

    @classmethod
    def from_array(cls, array: np.ndarray) -> "Grid":
        return cls(np.asarray(array).tolist())

    def to_array(self) -> np.ndarray:
        return np.array(self._cells, dtype=int)

    def get(self, row: int, col: int) -> int:
        return self._cells[row][col]

    def set(self, row: int, col: int, value: int) -> None:
        self._cells[row][col] = value

    def rows(self) -> Rows:
        return [list(row) for row in self._cells]

    def copy(self) -> "Grid":
        return Grid(self._cells)

    def empty_cells(self) -> int:
        return sum(row.count(EMPTY) for row in self._cells)

    def candidates(self, row: int, col: int) -> List[int]:
        """Digits not yet placed in the row, column or box of (row, col).

        The cell's own value is never consulted. Each pass marks used digits
        in a bit mask, so the result is always ascending no matter which peers
        eliminated what.
        """
        cells = self._cells
        used = 0
        for i in range(GRID_SIZE):
            if i != col and cells[row][i] > 0:
                used |= 1 << cells[row][i]
            if i != row and cells[i][col] > 0:
                used |= 1 << cells[i][col]

        # Cells of the box sharing the row or column were covered above.
        start_row, start_col = box_origin(row, col)
        for r in range(start_row, start_row + BOX_SIZE):
            if r == row:
                continue
            for c in range(start_col, start_col + BOX_SIZE):
                if c != col and cells[r][c] > 0:
                    used |= 1 << cells[r][c]

        return [value for value in DIGITS if not used & (1 << value)]

    def is_solved(self) -> bool:
        """True when every row, column and box holds each digit exactly once."""
        expected = set(DIGITS)
        for i in range(GRID_SIZE):
            if set(self._cells[i]) != expected:
                return False
            if {self._cells[r][i] for r in range(GRID_SIZE)} != expected:
                return False
        for start_row in range(0, GRID_SIZE, BOX_SIZE):
            for start_col in range(0, GRID_SIZE, BOX_SIZE):
                box = {
                    self._cells[r][c]
                    for r in range(start_row, start_row + BOX_SIZE)
                    for c in range(start_col, start_col + BOX_SIZE)
                }
                if box != expected:
                    return False
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"Grid({self._cells!r})"
