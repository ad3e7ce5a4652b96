"""Rendering helpers for grids: console text, usage text and solution images."""
from __future__ import annotations

import logging
from typing import List, Optional

import cv2
import imutils
import numpy as np
from matplotlib import colormaps

from grid import BOX_SIZE, EMPTY, GRID_SIZE, Grid
from matrix import label_width, max_string_length

log = logging.getLogger(__name__)

PROGRAM_NAME = "sudoku-solve"

# Soft-green palette for digits filled in by the solver, converted to BGR for OpenCV.
_DIGIT_COLORS = (colormaps["Greens"](np.linspace(0.35, 0.95, 10))[:, 2::-1] * 255).astype("uint8")
_GIVEN_COLOR = (0, 0, 0)
_LINE_COLOR = (0, 0, 0)


def _bands() -> List[range]:
    return [range(start, start + BOX_SIZE) for start in range(0, GRID_SIZE, BOX_SIZE)]


def render_grid(grid: Grid) -> str:
    """Render the grid as box-drawn text, leaving empty cells blank."""
    rows = grid.rows()
    label_chars = label_width(GRID_SIZE, GRID_SIZE)
    cell_chars = max(label_chars, max_string_length(rows))
    margin = " " * (label_chars + 2)
    bands = _bands()

    def label(index: int) -> str:
        return str(index).zfill(label_chars).rjust(cell_chars)

    def cell(value: int) -> str:
        return " " * cell_chars if value == EMPTY else str(value).rjust(cell_chars)

    header = "   ".join(" ".join(label(col) for col in band) for band in bands)
    separator = margin + "+" + "+".join(["-" * (BOX_SIZE * (cell_chars + 1) + 1)] * len(bands)) + "+"

    lines = [margin + "  " + header, separator]
    for row_band in bands:
        for row in row_band:
            cells = " | ".join(" ".join(cell(rows[row][col]) for col in band) for band in bands)
            lines.append(f" {str(row).zfill(label_chars)} | {cells} |")
        lines.append(separator)
    return "\n".join(lines) + "\n"


def render_usage() -> str:
    return (
        "\n"
        "USAGE:\n"
        "\n"
        f"  {PROGRAM_NAME} <filename>\n"
        "\n"
        "    OR\n"
        "\n"
        f"  cat <filename> | {PROGRAM_NAME}\n"
        "\n"
    )


def render_grid_image(grid: Grid, givens: Optional[Grid] = None, cell_size: int = 50) -> np.ndarray:
    """Draw the grid on a white canvas.

    Digits present in ``givens`` are drawn in black; the rest are coloured
    from the green palette so solver-filled cells stand out.
    """
    size = cell_size * GRID_SIZE
    image = np.full((size, size, 3), 255, dtype="uint8")

    for i in range(GRID_SIZE + 1):
        thickness = 3 if i % BOX_SIZE == 0 else 1
        offset = min(i * cell_size, size - 1)
        cv2.line(image, (offset, 0), (offset, size - 1), _LINE_COLOR, thickness)
        cv2.line(image, (0, offset), (size - 1, offset), _LINE_COLOR, thickness)

    scale = cell_size / 55.0
    for row in range(GRID_SIZE):
        for col in range(GRID_SIZE):
            value = grid.get(row, col)
            if value == EMPTY:
                continue
            if givens is not None and givens.get(row, col) == EMPTY:
                color = tuple(int(channel) for channel in _DIGIT_COLORS[value])
            else:
                color = _GIVEN_COLOR
            text = str(value)
            text_size, _ = cv2.getTextSize(text, cv2.FONT_HERSHEY_SIMPLEX, scale, 2)
            text_x = int(col * cell_size + (cell_size - text_size[0]) / 2)
            text_y = int(row * cell_size + (cell_size + text_size[1]) / 2)
            cv2.putText(image, text, (text_x, text_y), cv2.FONT_HERSHEY_SIMPLEX, scale, color, 2, cv2.LINE_AA)
    return image


def save_grid_image(path: str, grid: Grid, givens: Optional[Grid] = None, width: Optional[int] = None) -> bool:
    image = render_grid_image(grid, givens)
    if width is not None:
        image = imutils.resize(image, width=width)
    written = bool(cv2.imwrite(path, image))
    if written:
        log.info("wrote %dx%d grid image to %s", image.shape[1], image.shape[0], path)
    else:
        log.warning("unable to write grid image to %s", path)
    return written
