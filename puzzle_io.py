"""Reading Sudoku puzzles from the plain-text puzzle format.

A puzzle is nine data lines of nine characters each, digits ``1``-``9`` or
``_`` for an empty cell, with no digit repeated on a line. Empty lines and
lines starting with ``#`` are skipped; whitespace inside a line is ignored.
"""
from __future__ import annotations

import logging
import re
import sys
from dataclasses import dataclass
from typing import Iterable, Optional, TextIO

from grid import EMPTY, GRID_SIZE, Grid

log = logging.getLogger(__name__)

STATUS_OK = "ok"
STATUS_MISSING_INPUT = "missing-input"
STATUS_MALFORMED_LINE = "malformed-line"
STATUS_INSUFFICIENT_INPUT = "insufficient-input"
STATUS_IO_FAILURE = "io-failure"

PLACEHOLDER = "_"
COMMENT_PREFIX = "#"

# Nine cells from [_1-9], rejecting any digit that shows up twice.
_LINE_PATTERN = re.compile(r"(?!.*([1-9]).*\1)[_1-9]{9}")
_WHITESPACE = re.compile(r"\s")


@dataclass
class ParseResult:
    status: str
    grid: Optional[Grid] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status == STATUS_OK


def parse_lines(lines: Iterable[str]) -> ParseResult:
    """Build a grid from the first nine data lines of ``lines``."""
    grid = Grid()
    lines_added = 0
    lines_read = 0

    for raw_line in lines:
        if lines_added == GRID_SIZE:
            break
        lines_read += 1
        raw_line = raw_line.rstrip("\r\n")
        if not raw_line or raw_line.startswith(COMMENT_PREFIX):
            continue

        line = _WHITESPACE.sub("", raw_line)
        if not _LINE_PATTERN.fullmatch(line):
            return ParseResult(
                status=STATUS_MALFORMED_LINE,
                message=f"ERROR: Line #{lines_added} (line #{lines_read} in input) is invalid: {raw_line}",
            )
        for col, char in enumerate(line):
            grid.set(lines_added, col, EMPTY if char == PLACEHOLDER else int(char))
        lines_added += 1

    if lines_added < GRID_SIZE:
        return ParseResult(
            status=STATUS_INSUFFICIENT_INPUT,
            message=f"ERROR: Insufficient number of valid input lines: {lines_added}",
        )

    log.debug("parsed puzzle from %d input lines; %d empty cells", lines_read, grid.empty_cells())
    return ParseResult(status=STATUS_OK, grid=grid)


def read_puzzle(path: Optional[str] = None, stream: Optional[TextIO] = None) -> ParseResult:
    """Parse a puzzle from ``path``, or from ``stream`` (stdin by default)."""
    if path is None:
        source = stream if stream is not None else sys.stdin
        log.debug("reading puzzle from %s", getattr(source, "name", "stream"))
        try:
            return parse_lines(source)
        except (OSError, UnicodeDecodeError) as exc:
            return _io_failure(exc)

    log.debug("reading puzzle from %s", path)
    try:
        with open(path, encoding="utf-8") as handle:
            return parse_lines(handle)
    except FileNotFoundError:
        return ParseResult(
            status=STATUS_MISSING_INPUT,
            message=f"ERROR: The file ({path}) does not exist.",
        )
    except (OSError, UnicodeDecodeError) as exc:
        return _io_failure(exc)


def _io_failure(exc: Exception) -> ParseResult:
    return ParseResult(
        status=STATUS_IO_FAILURE,
        message=f"ERROR: An I/O error has occurred: {exc}",
    )
