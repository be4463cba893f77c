import runpy
import sys
from pathlib import Path

import pytest

from mazesolver.app.cli import build_parser, main
from mazesolver.app.settings import DEFAULT_MAZE, Settings, clamp_speed, configure_logging, log_level_name

from conftest import SCENARIO_1, SEALED_END


class TestSolveCommand:
    def test_prints_solution(self, write_maze, capsys):
        path = write_maze(SCENARIO_1)
        assert main(["solve", str(path)]) == 0
        assert capsys.readouterr().out == "S     \n. #   \n. . E \n"

    def test_unsolvable_still_succeeds(self, write_maze, capsys):
        path = write_maze(SEALED_END)
        assert main(["solve", str(path)]) == 0
        out = capsys.readouterr().out
        assert out == "S   # E \n    # # \n        \n"
        assert "." not in out

    def test_bad_character_exits_nonzero(self, write_maze, capsys):
        path = write_maze("3\n3\nS  \n X \n  E\n")
        assert main(["solve", str(path)]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "error:" in captured.err
        assert "invalid character 'X'" in captured.err

    def test_missing_file_exits_nonzero(self, tmp_path, capsys):
        assert main(["solve", str(tmp_path / "missing.txt")]) == 1
        assert "cannot read maze file" in capsys.readouterr().err

    def test_default_maze_comes_from_env(self, write_maze, monkeypatch, capsys):
        path = write_maze(SCENARIO_1, name="env.txt")
        monkeypatch.setenv("MAZESOLVER_MAZE", str(path))
        assert main(["solve"]) == 0
        assert capsys.readouterr().out.startswith("S ")

    def test_repeated_runs_are_identical(self, mazes_dir, capsys):
        main(["solve", str(mazes_dir / "maze1.txt")])
        first = capsys.readouterr().out
        main(["solve", str(mazes_dir / "maze1.txt")])
        assert capsys.readouterr().out == first
        assert ". " in first


class TestParser:
    def test_command_is_required(self):
        with pytest.raises(SystemExit) as info:
            build_parser(Settings()).parse_args([])
        assert info.value.code == 2

    def test_view_options(self):
        args = build_parser(Settings()).parse_args(["view", "m.txt", "--speed", "20"])
        assert args.command == "view"
        assert args.maze == Path("m.txt")
        assert args.speed == 20

    @pytest.mark.parametrize("level", ["BASIC_FORMAT", "verbose", "10"])
    def test_unknown_log_level_is_a_usage_error(self, level, capsys):
        with pytest.raises(SystemExit) as info:
            build_parser(Settings()).parse_args(["--log-level", level, "solve"])
        assert info.value.code == 2
        assert "invalid choice" in capsys.readouterr().err

    def test_log_level_is_case_insensitive(self):
        args = build_parser(Settings()).parse_args(["--log-level", "debug", "solve"])
        assert args.log_level == "DEBUG"


class TestModuleEntry:
    def test_python_m_exits_with_main_status(self, write_maze, monkeypatch, capsys):
        path = write_maze(SCENARIO_1)
        monkeypatch.setattr(sys, "argv", ["mazesolver", "solve", str(path)])
        with pytest.raises(SystemExit) as info:
            runpy.run_module("mazesolver", run_name="__main__")
        assert info.value.code == 0
        assert capsys.readouterr().out == "S     \n. #   \n. . E \n"


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("MAZESOLVER_MAZE", "MAZESOLVER_LOG_LEVEL", "MAZESOLVER_STEPS_PER_SEC"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings.from_env()
        assert settings.maze_path == DEFAULT_MAZE
        assert settings.log_level == "WARNING"
        assert settings.steps_per_sec == 8

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("MAZESOLVER_MAZE", "other.txt")
        monkeypatch.setenv("MAZESOLVER_LOG_LEVEL", "debug")
        monkeypatch.setenv("MAZESOLVER_STEPS_PER_SEC", "500")
        settings = Settings.from_env()
        assert settings.maze_path == Path("other.txt")
        assert settings.log_level == "DEBUG"
        assert settings.steps_per_sec == 60

    def test_bad_log_level_falls_back_to_default(self, monkeypatch):
        monkeypatch.setenv("MAZESOLVER_LOG_LEVEL", "BASIC_FORMAT")
        assert Settings.from_env().log_level == "WARNING"

    @pytest.mark.parametrize("raw", ["BASIC_FORMAT", "loud", ""])
    def test_log_level_name_rejects_non_levels(self, raw):
        with pytest.raises(ValueError, match="unknown log level"):
            log_level_name(raw)

    def test_configure_logging_rejects_non_levels(self):
        with pytest.raises(ValueError):
            configure_logging("BASIC_FORMAT")

    def test_bad_speed_falls_back_to_default(self, monkeypatch):
        monkeypatch.setenv("MAZESOLVER_STEPS_PER_SEC", "fast")
        assert Settings.from_env().steps_per_sec == 8

    @pytest.mark.parametrize("raw, expected", [(0, 1), (1, 1), (30, 30), (61, 60)])
    def test_clamp_speed(self, raw, expected):
        assert clamp_speed(raw) == expected
