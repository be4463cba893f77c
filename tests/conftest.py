from pathlib import Path

import pytest

MAZES_DIR = Path(__file__).resolve().parents[1] / "mazes"

# 3x3, wall in the middle
SCENARIO_1 = "3\n3\nS  \n # \n  E\n"

# End sealed off by walls
SEALED_END = "3\n4\nS #E\n  ##\n    \n"


@pytest.fixture
def mazes_dir() -> Path:
    return MAZES_DIR


@pytest.fixture
def write_maze(tmp_path):
    def _write(text: str, name: str = "maze.txt") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write
