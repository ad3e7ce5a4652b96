from grid import Grid
from puzzle_io import read_puzzle
from solver import SudokuSolver

from conftest import REFERENCE_PUZZLE, REFERENCE_SOLUTION


def test_solves_reference_puzzle(puzzle_grid):
    solver = SudokuSolver()
    assert solver.solve(puzzle_grid)
    assert puzzle_grid.rows() == REFERENCE_SOLUTION
    assert solver.last_status == "solved"
    assert solver.attempts > 0


def test_solves_empty_grid_to_a_valid_grid():
    grid = Grid()
    assert SudokuSolver().solve(grid)
    assert grid.empty_cells() == 0
    assert grid.is_solved()


def test_empty_grid_is_filled_column_by_column():
    grid = Grid()
    SudokuSolver().solve(grid)
    # The first column is swept top to bottom before anything else is tried.
    assert [grid.get(row, 0) for row in range(9)] == [1, 2, 3, 4, 5, 6, 7, 8, 9]
    assert grid.rows()[0][:3] == [1, 4, 7]


def test_solved_grid_is_left_unchanged(solved_grid):
    solver = SudokuSolver()
    assert solver.solve(solved_grid)
    assert solved_grid.rows() == REFERENCE_SOLUTION
    assert solver.attempts == 0


def test_failure_restores_every_empty_cell(data_dir):
    grid = read_puzzle(str(data_dir / "unsolvable.dat")).grid
    before = grid.rows()
    solver = SudokuSolver()

    assert not solver.solve(grid)
    assert grid.rows() == before
    assert solver.last_status == "unsolved"
    assert solver.attempts == 4


def test_cell_without_candidates_fails_immediately():
    rows = [[0] * 9 for _ in range(9)]
    rows[0][1:] = [2, 3, 4, 5, 6, 7, 8, 9]
    rows[1][0] = 1
    grid = Grid(rows)
    assert not SudokuSolver().solve(grid)
    assert grid == Grid(rows)


def test_identical_inputs_give_identical_outputs():
    first = Grid(REFERENCE_PUZZLE)
    second = Grid(REFERENCE_PUZZLE)
    assert SudokuSolver().solve(first) == SudokuSolver().solve(second)
    assert first == second


def test_solve_board_leaves_input_untouched():
    board = [list(row) for row in REFERENCE_PUZZLE]
    solution = SudokuSolver().solve_board(board)
    assert solution == REFERENCE_SOLUTION
    assert board == REFERENCE_PUZZLE


def test_solve_board_returns_none_when_unsolvable(data_dir):
    grid = read_puzzle(str(data_dir / "unsolvable.dat")).grid
    assert SudokuSolver().solve_board(grid.rows()) is None
