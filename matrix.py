"""Transforms and text rendering for 2-D integer matrices."""
from __future__ import annotations

from typing import Callable, Dict, Sequence, Union

import numpy as np

MatrixLike = Union[np.ndarray, Sequence[Sequence[int]]]


def deep_copy(data: MatrixLike) -> np.ndarray:
    return np.array(data, dtype=int, copy=True)


def reflect_horizontal(data: MatrixLike) -> np.ndarray:
    """Mirror the columns: ``result[k][i] == data[k][n - 1 - i]``."""
    return np.fliplr(np.asarray(data, dtype=int)).copy()


def reflect_vertical(data: MatrixLike) -> np.ndarray:
    """Mirror the rows: ``result[i][k] == data[m - 1 - i][k]``."""
    return np.flipud(np.asarray(data, dtype=int)).copy()


def transpose(data: MatrixLike) -> np.ndarray:
    """Swap rows with columns; an m x n input becomes n x m."""
    return np.asarray(data, dtype=int).T.copy()


def rotate_quarter_cw(data: MatrixLike) -> np.ndarray:
    """Rotate 90 degrees clockwise; an m x n input becomes n x m."""
    return np.rot90(np.asarray(data, dtype=int), k=-1).copy()


def rotate_quarter_ac(data: MatrixLike) -> np.ndarray:
    """Rotate 90 degrees anti-clockwise; an m x n input becomes n x m."""
    return np.rot90(np.asarray(data, dtype=int), k=1).copy()


def rotate_half(data: MatrixLike) -> np.ndarray:
    return np.rot90(np.asarray(data, dtype=int), k=2).copy()


TRANSFORMS: Dict[str, Callable[[MatrixLike], np.ndarray]] = {
    "reflect-horizontal": reflect_horizontal,
    "reflect-vertical": reflect_vertical,
    "transpose": transpose,
    "rotate-cw": rotate_quarter_cw,
    "rotate-ac": rotate_quarter_ac,
    "rotate-half": rotate_half,
}


def max_string_length(data: MatrixLike) -> int:
    """Width in characters of the widest value, 1 for an empty matrix."""
    array = np.asarray(data, dtype=int)
    if array.size == 0:
        return 1
    return max(len(str(int(value))) for value in array.flat)


def label_width(row_count: int, col_count: int) -> int:
    return len(str(max(row_count - 1, col_count - 1, 0)))


def render_matrix(data: MatrixLike, labels: bool = True) -> str:
    """Render a matrix inside ``+---+`` boxes, one separator after every row.

    Labels are zero padded to the width of the largest index, and every cell
    is as wide as the widest value or label.
    """
    array = np.asarray(data, dtype=int)
    row_count, col_count = array.shape
    label_chars = label_width(row_count, col_count)
    data_chars = max_string_length(array)
    cell_chars = max(label_chars, data_chars)

    col_label_pad = " " * (label_chars + 2)
    separator = (col_label_pad if labels else "") + "+" + "+".join(["-" * (cell_chars + 2)] * col_count) + "+\n"

    output = []
    if labels:
        header = "   ".join(str(col).zfill(label_chars).rjust(cell_chars) for col in range(col_count))
        output.append(col_label_pad + "  " + header + "\n")
    output.append(separator)

    for row in range(row_count):
        cells = " | ".join(str(int(value)).rjust(cell_chars) for value in array[row])
        prefix = f" {str(row).zfill(label_chars)} | " if labels else "| "
        output.append(prefix + cells + " |\n")
        output.append(separator)

    return "".join(output)
