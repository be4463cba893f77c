# mazesolver/core/types.py
#!/usr/bin/env python3
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple, Optional, Dict, Any

Coord = Tuple[int, int]  # (row, col)


class Cell(Enum):
    PATH = "path"
    PATH_VISITED = "path_visited"
    PATH_SOLUTION = "path_solution"
    WALL = "wall"
    START = "start"
    END = "end"

    @property
    def glyph(self) -> str:
        """Two-character text rendering of the cell."""
        return _GLYPHS[self]


_GLYPHS = {
    Cell.PATH: "  ",
    Cell.PATH_VISITED: "  ",
    Cell.PATH_SOLUTION: ". ",
    Cell.WALL: "# ",
    Cell.START: "S ",
    Cell.END: "E ",
}

# input symbol -> cell; visited/solution states never appear in a maze file
SYMBOLS: Dict[str, Cell] = {
    "#": Cell.WALL,
    " ": Cell.PATH,
    "S": Cell.START,
    "E": Cell.END,
}


@dataclass
class Grid:
    rows: int
    cols: int
    cells: List[List[Cell]]            # [row][col]
    start: Coord
    end: Coord

    def in_bounds(self, c: Coord) -> bool:
        r, col = c
        return 0 <= r < self.rows and 0 <= col < self.cols

    def at(self, c: Coord) -> Cell:
        r, col = c
        return self.cells[r][col]

    def mark(self, c: Coord, cell: Cell) -> None:
        r, col = c
        self.cells[r][col] = cell

    def count(self, cell: Cell) -> int:
        return sum(row.count(cell) for row in self.cells)

    def copy(self) -> "Grid":
        return Grid(self.rows, self.cols, [list(row) for row in self.cells], self.start, self.end)


@dataclass
class StepResult:
    status: str                   # "idle" | "running" | "done" | "no_path"
    opened: List[Coord] = field(default_factory=list)
    closed: List[Coord] = field(default_factory=list)
    current: Optional[Coord] = None
    path: Optional[List[Coord]] = None
    metrics: Dict[str, Any] = field(default_factory=dict)
