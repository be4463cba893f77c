# mazesolver/core/render.py
#!/usr/bin/env python3
import sys
from typing import Optional, TextIO

from mazesolver.core.types import Grid


def render(grid: Grid) -> str:
    """Text rendering, two characters per cell, one line per row."""
    return "".join("".join(cell.glyph for cell in row) + "\n" for row in grid.cells)


def print_grid(grid: Grid, stream: Optional[TextIO] = None) -> None:
    out = stream if stream is not None else sys.stdout
    out.write(render(grid))
    out.flush()
