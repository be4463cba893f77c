# mazesolver/core/dfs.py
#!/usr/bin/env python3

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

from mazesolver.core.types import Cell, Coord, Grid, StepResult

logger = logging.getLogger(__name__)

# top, right, bottom, left; this order decides which path is found
NEIGHBOR_OFFSETS = ((-1, 0), (0, 1), (1, 0), (0, -1))


@dataclass
class DepthFirstSolver:
    """Iterative depth-first search over a maze grid.

    Not a shortest-path search. The grid is marked in place: expanded cells
    become PATH_VISITED and, once End is popped, the parent chain from End
    back to Start becomes PATH_SOLUTION.
    """
    name: str = "DFS"

    grid: Optional[Grid] = None
    pristine: Optional[Grid] = None
    stack: List[Coord] = field(default_factory=list)
    visited: Set[Coord] = field(default_factory=set)
    parent: Dict[Coord, Coord] = field(default_factory=dict)
    popped_count: int = 0
    done: bool = False
    no_path: bool = False
    path: Optional[List[Coord]] = None

    def init(self, grid: Grid) -> None:
        self.grid = grid
        self.pristine = grid.copy()
        self.reset()

    def reset(self) -> None:
        if self.grid is None:
            return
        for r, row in enumerate(self.pristine.cells):
            self.grid.cells[r][:] = row
        self.stack.clear()
        self.visited.clear()
        self.parent.clear()
        self.popped_count = 0
        self.done = False
        self.no_path = False
        self.path = None

        self.stack.append(self.grid.start)

    def _neighbors4(self, c: Coord) -> List[Coord]:
        r, col = c
        out: List[Coord] = []
        for dr, dc in NEIGHBOR_OFFSETS:
            n = (r + dr, col + dc)
            if not self.grid.in_bounds(n) or n in self.visited:
                continue
            if self.pristine.at(n) in (Cell.PATH, Cell.END):
                out.append(n)
        return out

    def _reconstruct_path(self) -> List[Coord]:
        start, end = self.grid.start, self.grid.end
        path: List[Coord] = [end]
        cur = self.parent[end]
        while cur != start:
            self.grid.mark(cur, Cell.PATH_SOLUTION)
            path.append(cur)
            cur = self.parent[cur]
        path.append(start)
        path.reverse()
        return path

    def step(self) -> StepResult:
        if self.grid is None:
            return StepResult(status="idle", metrics={"algo": self.name})

        if self.done:
            return StepResult(status="done", path=self.path, metrics=self.metrics())

        if self.no_path:
            return StepResult(status="no_path", metrics=self.metrics())

        if not self.stack:
            self.no_path = True
            logger.info("%s: no path from %s to %s (%s)", self.name, self.grid.start, self.grid.end,
                        self.metrics())
            return StepResult(status="no_path", metrics=self.metrics())

        u = self.stack.pop()
        self.popped_count += 1

        if u == self.grid.end:
            self.done = True
            self.path = self._reconstruct_path()
            logger.info("%s: solved, %s", self.name, self.metrics())
            return StepResult(status="done", current=u, path=self.path, metrics=self.metrics())

        # a cell pushed twice before its first expansion is expanded again,
        # which can re-point parents of frontier cells (last write wins)
        self.visited.add(u)
        if u != self.grid.start:
            self.grid.mark(u, Cell.PATH_VISITED)

        opened_now = self._neighbors4(u)
        for v in opened_now:
            self.parent[v] = u
            self.stack.append(v)
        logger.debug("%s: expanded %s, pushed %s", self.name, u, opened_now)

        return StepResult(status="running", opened=opened_now, closed=[u], current=u,
                          metrics=self.metrics())

    def solve(self) -> StepResult:
        res = self.step()
        while res.status == "running":
            res = self.step()
        return res

    def metrics(self) -> dict:
        return {
            "algo": self.name,
            "popped": self.popped_count,
            "stack_size": len(self.stack),
            "visited_count": len(self.visited),
            "path_len": max(0, len(self.path) - 2) if self.path else 0,
        }


def solve(grid: Grid) -> StepResult:
    """Solve ``grid`` in place and return the final step result."""
    solver = DepthFirstSolver()
    solver.init(grid)
    return solver.solve()
