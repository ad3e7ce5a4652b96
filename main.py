"""Command-line Sudoku solver reading the plain-text puzzle format."""
from __future__ import annotations

import argparse
import logging
import time
from typing import List, Optional

from grid import Grid
from matrix import TRANSFORMS
from puzzle_io import read_puzzle
from solver import SudokuSolver
from utils import PROGRAM_NAME, render_grid, render_usage, save_grid_image

log = logging.getLogger(__name__)

NO_SOLUTION_MESSAGE = "NO SOLUTION FOUND."


def run(
    puzzle_path: Optional[str] = None,
    transform: Optional[str] = None,
    image_path: Optional[str] = None,
    image_width: Optional[int] = None,
) -> bool:
    result = read_puzzle(puzzle_path)
    if not result.ok:
        log.error("unable to load puzzle (%s)", result.status)
        raise SystemExit(result.message)

    grid = result.grid
    assert grid is not None
    if transform is not None:
        grid = Grid.from_array(TRANSFORMS[transform](grid.to_array()))
        log.debug("applied %s transform", transform)

    print(render_grid(grid))

    givens = grid.copy()
    solver = SudokuSolver()
    start = time.time()
    solved = solver.solve(grid)
    duration_ms = int((time.time() - start) * 1000)

    if solved:
        print(render_grid(grid))
        if not grid.is_solved():
            log.warning("puzzle givens conflict across lines; reported grid repeats a digit")
    else:
        print(NO_SOLUTION_MESSAGE)

    print(f"Processed in: {duration_ms} ms\n")

    if solved and image_path:
        save_grid_image(image_path, grid, givens, width=image_width)
    return solved


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description="Solve a 9x9 Sudoku by backtracking search",
    )
    parser.add_argument(
        "puzzle",
        nargs="*",
        help="Puzzle file to solve (default: read from standard input)",
    )
    parser.add_argument(
        "--transform",
        choices=sorted(TRANSFORMS),
        default=None,
        help="Reflect, transpose or rotate the puzzle before solving",
    )
    parser.add_argument("--save-image", type=str, default=None, help="Write the solved grid to this image file")
    parser.add_argument("--image-width", type=int, default=None, help="Resize the saved image to this width")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if len(args.puzzle) > 1:
        print(render_usage())
        return 0

    puzzle_path = args.puzzle[0] if args.puzzle else None
    run(
        puzzle_path,
        transform=args.transform,
        image_path=args.save_image,
        image_width=args.image_width,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
