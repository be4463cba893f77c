# mazesolver/core/loader.py
#!/usr/bin/env python3
"""
Maze text loader.

Format:
    <rows>
    <cols>
    <row 0, exactly cols characters>
    ...
    <row rows-1>

Characters: '#' wall, ' ' open path, 'S' start, 'E' end. Spaces are cells,
so row lines are never stripped beyond their line terminator.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from mazesolver.core.types import Cell, Coord, Grid, SYMBOLS

logger = logging.getLogger(__name__)


class MazeLoadError(Exception):
    """Base class for everything that rejects a maze before solving."""


class MazeFileError(MazeLoadError):
    pass


class MazeFormatError(MazeLoadError):
    def __init__(self, message: str, line: Optional[int] = None):
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


def _split_lines(text: str) -> List[str]:
    # only '\n' ends a line; a single '\r' before it is part of the terminator
    lines = [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def _parse_dimension(raw: Optional[str], name: str, line: int) -> int:
    if raw is None:
        raise MazeFormatError(f"missing {name} count", line)
    digits = raw.strip(" \t")
    if not (digits.isascii() and digits.isdigit()):
        raise MazeFormatError(f"malformed dimension line for {name}: {digits!r}", line)
    value = int(digits)
    if value <= 0:
        raise MazeFormatError(f"{name} must be positive, got {value}", line)
    return value


def parse_maze(text: str) -> Grid:
    lines = _split_lines(text)
    rows = _parse_dimension(lines[0] if len(lines) > 0 else None, "rows", 1)
    cols = _parse_dimension(lines[1] if len(lines) > 1 else None, "cols", 2)

    body = lines[2:]
    if len(body) < rows:
        raise MazeFormatError(f"expected {rows} rows, found {len(body)}")
    for offset, extra in enumerate(body[rows:]):
        if extra.strip(" \t"):
            raise MazeFormatError(f"unexpected content after the last row: {extra!r}", rows + 3 + offset)

    cells: List[List[Cell]] = []
    starts: List[Coord] = []
    ends: List[Coord] = []
    for r, text_row in enumerate(body[:rows]):
        line_no = r + 3
        if len(text_row) != cols:
            raise MazeFormatError(f"row {r} has {len(text_row)} characters, expected {cols}", line_no)
        row: List[Cell] = []
        for c, ch in enumerate(text_row):
            cell = SYMBOLS.get(ch)
            if cell is None:
                raise MazeFormatError(f"invalid character {ch!r} at row {r}, col {c}", line_no)
            if cell is Cell.START:
                starts.append((r, c))
            elif cell is Cell.END:
                ends.append((r, c))
            row.append(cell)
        cells.append(row)

    if len(starts) != 1:
        raise MazeFormatError(f"maze needs exactly one start 'S', found {len(starts)}")
    if len(ends) != 1:
        raise MazeFormatError(f"maze needs exactly one end 'E', found {len(ends)}")

    logger.debug("parsed %dx%d maze, start=%s end=%s", rows, cols, starts[0], ends[0])
    return Grid(rows, cols, cells, starts[0], ends[0])


def load_maze(path: Union[str, Path]) -> Grid:
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as ex:
        raise MazeFileError(f"cannot read maze file {path}: {ex}") from ex
    return parse_maze(text)
