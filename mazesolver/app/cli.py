# mazesolver/app/cli.py
#!/usr/bin/env python3
"""
mazesolver command line

    mazesolver solve [MAZE]              -> print the solved maze
    mazesolver view  [MAZE] [--speed N]  -> animate the search (pygame)

Exit codes: 0 ok (solved or not), 1 maze could not be loaded, 2 usage.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from mazesolver.app.settings import LOG_LEVELS, Settings, clamp_speed, configure_logging
from mazesolver.core.dfs import solve
from mazesolver.core.loader import MazeLoadError, load_maze
from mazesolver.core.render import print_grid

logger = logging.getLogger(__name__)


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mazesolver", description="Solve text mazes with depth-first search.")
    parser.add_argument("--log-level", default=settings.log_level, type=str.upper, choices=LOG_LEVELS,
                        help="logging level (default: %(default)s)")
    sub = parser.add_subparsers(dest="command", required=True)

    p_solve = sub.add_parser("solve", help="solve a maze and print it")
    p_solve.add_argument("maze", nargs="?", type=Path, default=settings.maze_path,
                         help="maze file (default: %(default)s)")

    p_view = sub.add_parser("view", help="open the interactive viewer")
    p_view.add_argument("maze", nargs="?", type=Path, default=settings.maze_path,
                        help="maze file (default: %(default)s)")
    p_view.add_argument("--speed", type=int, default=settings.steps_per_sec,
                        help="steps per second (default: %(default)s)")
    return parser


def _cmd_solve(args: argparse.Namespace) -> int:
    grid = load_maze(args.maze)
    res = solve(grid)
    if res.status != "done":
        logger.warning("maze %s has no path from start to end", args.maze)
    print_grid(grid)
    return 0


def _cmd_view(args: argparse.Namespace) -> int:
    grid = load_maze(args.maze)
    from mazesolver.app.viewer import Viewer
    Viewer(grid, title=args.maze.name, steps_per_sec=clamp_speed(args.speed)).run()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    settings = Settings.from_env()
    args = build_parser(settings).parse_args(argv)
    configure_logging(args.log_level)

    handler = _cmd_solve if args.command == "solve" else _cmd_view
    try:
        return handler(args)
    except MazeLoadError as ex:
        logger.error("failed to load maze %s: %s", args.maze, ex)
        print(f"error: {ex}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
