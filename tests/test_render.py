import io

from mazesolver.core.dfs import solve
from mazesolver.core.loader import parse_maze
from mazesolver.core.render import print_grid, render
from mazesolver.core.types import Cell

from conftest import SCENARIO_1, SEALED_END


class TestRender:
    def test_unsolved_grid_mirrors_input(self):
        grid = parse_maze(SCENARIO_1)
        assert render(grid) == "S     \n  #   \n    E \n"

    def test_two_characters_per_cell(self):
        grid = parse_maze(SCENARIO_1)
        lines = render(grid).splitlines()
        assert len(lines) == grid.rows
        assert all(len(line) == 2 * grid.cols for line in lines)

    def test_glyphs(self):
        assert Cell.PATH.glyph == "  "
        assert Cell.PATH_VISITED.glyph == "  "
        assert Cell.PATH_SOLUTION.glyph == ". "
        assert Cell.WALL.glyph == "# "
        assert Cell.START.glyph == "S "
        assert Cell.END.glyph == "E "

    def test_visited_cells_render_blank(self):
        grid = parse_maze(SEALED_END)
        solve(grid)
        assert grid.count(Cell.PATH_VISITED) > 0
        assert render(grid) == "S   # E \n    # # \n        \n"

    def test_render_is_idempotent(self):
        grid = parse_maze(SCENARIO_1)
        solve(grid)
        assert render(grid) == render(grid)


class TestPrintGrid:
    def test_writes_to_stream(self):
        grid = parse_maze(SCENARIO_1)
        solve(grid)
        out = io.StringIO()
        print_grid(grid, out)
        assert out.getvalue() == "S     \n. #   \n. . E \n"

    def test_defaults_to_stdout(self, capsys):
        grid = parse_maze(SCENARIO_1)
        print_grid(grid)
        print_grid(grid)
        out = capsys.readouterr().out
        assert out == render(grid) * 2
