# mazesolver/app/settings.py
#!/usr/bin/env python3
"""
Runtime configuration.

- ENV: MAZESOLVER_MAZE, MAZESOLVER_LOG_LEVEL, MAZESOLVER_STEPS_PER_SEC
- CLI flags override the environment (see mazesolver.app.cli)
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_MAZE = Path("mazes") / "maze1.txt"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_STEPS_PER_SEC = 8
MAX_STEPS_PER_SEC = 60

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def log_level_name(value: str) -> str:
    """Upper-cased level name; raises ValueError for anything else."""
    name = value.strip().upper()
    if name not in LOG_LEVELS:
        raise ValueError(f"unknown log level {value!r}, expected one of {', '.join(LOG_LEVELS)}")
    return name


def clamp_speed(value: int) -> int:
    return int(max(1, min(MAX_STEPS_PER_SEC, value)))


@dataclass
class Settings:
    maze_path: Path = DEFAULT_MAZE
    log_level: str = DEFAULT_LOG_LEVEL
    steps_per_sec: int = DEFAULT_STEPS_PER_SEC

    @classmethod
    def from_env(cls) -> "Settings":
        raw_speed = os.getenv("MAZESOLVER_STEPS_PER_SEC", str(DEFAULT_STEPS_PER_SEC))
        try:
            speed = clamp_speed(int(raw_speed))
        except ValueError:
            speed = DEFAULT_STEPS_PER_SEC
        try:
            level = log_level_name(os.getenv("MAZESOLVER_LOG_LEVEL", DEFAULT_LOG_LEVEL))
        except ValueError:
            level = DEFAULT_LOG_LEVEL
        return cls(
            maze_path=Path(os.getenv("MAZESOLVER_MAZE", str(DEFAULT_MAZE))),
            log_level=level,
            steps_per_sec=speed,
        )


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    # stderr, so logs never interleave with the rendered maze on stdout
    logging.basicConfig(level=getattr(logging, log_level_name(level)), format=LOG_FORMAT)
