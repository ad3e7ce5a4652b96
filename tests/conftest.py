from pathlib import Path

import pytest

from grid import Grid

DATA_DIR = Path(__file__).parent / "data"

REFERENCE_SOLUTION = [
    [3, 4, 7, 1, 8, 2, 5, 6, 9],
    [5, 1, 9, 6, 7, 4, 2, 3, 8],
    [2, 8, 6, 3, 5, 9, 1, 4, 7],
    [1, 2, 8, 7, 4, 5, 3, 9, 6],
    [4, 7, 3, 9, 2, 6, 8, 5, 1],
    [6, 9, 5, 8, 3, 1, 7, 2, 4],
    [7, 3, 2, 4, 6, 8, 9, 1, 5],
    [8, 6, 1, 5, 9, 3, 4, 7, 2],
    [9, 5, 4, 2, 1, 7, 6, 8, 3],
]

REFERENCE_PUZZLE = [
    [0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 1, 0, 6, 0, 4, 0, 0, 0],
    [2, 0, 6, 0, 5, 0, 0, 0, 0],
    [0, 0, 8, 0, 4, 0, 0, 0, 0],
    [4, 0, 0, 9, 0, 0, 0, 5, 0],
    [0, 0, 5, 0, 3, 0, 0, 0, 0],
    [7, 0, 2, 0, 6, 0, 0, 0, 0],
    [0, 6, 0, 5, 9, 3, 4, 0, 0],
    [0, 0, 0, 0, 0, 7, 0, 8, 0],
]


@pytest.fixture
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture
def solved_grid() -> Grid:
    return Grid(REFERENCE_SOLUTION)


@pytest.fixture
def puzzle_grid() -> Grid:
    return Grid(REFERENCE_PUZZLE)
