"""Backtracking Sudoku solver."""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from grid import EMPTY, GRID_SIZE, Grid

log = logging.getLogger(__name__)


class SudokuSolver:
    """Depth-first search that fills a grid in place, sweeping down each column."""

    def __init__(self) -> None:
        self.attempts = 0
        self.last_status: str = "idle"

    def _reset_state(self) -> None:
        self.attempts = 0
        self.last_status = "idle"

    def solve(self, grid: Grid, row: int = 0, col: int = 0) -> bool:
        """Solve ``grid`` in place starting from (row, col).

        On failure every cell that was empty before the call is empty again.
        """
        self._reset_state()
        log.debug("solve start at (%d, %d); %d empty cells", row, col, grid.empty_cells())
        solved = self._solve(grid, row, col)
        self.last_status = "solved" if solved else "unsolved"
        log.debug("solve end: %s after %d trial assignments", self.last_status, self.attempts)
        return solved

    def solve_board(self, board: Sequence[Sequence[int]]) -> Optional[List[List[int]]]:
        working = Grid(board)
        if self.solve(working):
            return working.rows()
        return None

    def _solve(self, grid: Grid, row: int, col: int) -> bool:
        if row == GRID_SIZE:
            row = 0
            col += 1
            if col == GRID_SIZE:
                return True

        if grid.get(row, col) != EMPTY:
            return self._solve(grid, row + 1, col)

        for value in grid.candidates(row, col):
            grid.set(row, col, value)
            self.attempts += 1
            if self._solve(grid, row + 1, col):
                return True

        grid.set(row, col, EMPTY)
        return False
