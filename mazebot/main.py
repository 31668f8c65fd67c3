"""Mazebot Solver - command line entry point."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError

from mazebot.client import MazebotClient, MazebotClientError
from mazebot.config import Settings, get_settings
from mazebot.core import (
    Maze,
    MazeParseError,
    MazeValidationError,
    directions_from_string,
    directions_to_string,
    is_valid_solution,
    load_all_mazes,
    load_maze_file,
    render_maze,
    render_solution,
    solve_maze,
)
from mazebot.services.race_service import RaceService, solve_random_maze

logger = logging.getLogger("mazebot")


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mazebot",
        description=f"{settings.app_name}: solve mazebot mazes with A* search",
    )
    parser.add_argument(
        "--version", action="version", version=f"{settings.app_name} {settings.app_version}"
    )
    parser.add_argument("--api-url", help="Override the mazebot API base URL")

    subparsers = parser.add_subparsers(dest="command", required=True)

    random_cmd = subparsers.add_parser("random", help="Solve one random maze")
    random_cmd.add_argument("--show", action="store_true", help="Print the maze and the path")
    random_cmd.add_argument("--min-size", type=int, default=None)
    random_cmd.add_argument("--max-size", type=int, default=None)

    race_cmd = subparsers.add_parser("race", help="Run a full race")
    race_cmd.add_argument("--login", default=None, help="GitHub login (default: MAZEBOT_LOGIN)")
    race_cmd.add_argument("--max-mazes", type=int, default=None)

    solve_cmd = subparsers.add_parser(
        "solve", help="Solve a local maze file, or every *.txt in a directory"
    )
    solve_cmd.add_argument("path", help="Maze file or directory (S = start, E = exit, X = wall)")
    solve_cmd.add_argument("--show", action="store_true", help="Print the maze and the path")

    check_cmd = subparsers.add_parser(
        "check", help="Check a direction string against a local maze"
    )
    check_cmd.add_argument("file", help="Maze file")
    check_cmd.add_argument("directions", help="Moves such as NNEES")
    check_cmd.add_argument("--show", action="store_true", help="Print the maze and the moves")

    return parser


def _show(maze: Maze, moves) -> None:
    print(render_maze(maze))
    print()
    print(render_solution(maze, moves))
    print()


def _solve_local(path: Path, show: bool, max_expansions: Optional[int]) -> int:
    if path.is_dir():
        mazes = load_all_mazes(path)
        if not mazes:
            logger.error(f"No valid mazes in {path}")
            return 1
    else:
        mazes = [load_maze_file(path)]

    exit_code = 0
    for maze in mazes:
        result = solve_maze(maze, max_expansions=max_expansions)
        if show:
            _show(maze, result.moves)
        prefix = f"{maze.name}: " if len(mazes) > 1 else ""
        print(f"{prefix}{result.status.value}: {directions_to_string(result.moves)}")
        if not result.is_solved:
            exit_code = 2
    return exit_code


def _check_local(path: Path, directions: str, show: bool) -> int:
    maze = load_maze_file(path)
    moves = directions_from_string(directions)
    if show:
        _show(maze, moves)
    if is_valid_solution(maze.grid, maze.start, maze.goal, moves):
        print(f"valid: {len(moves)} moves")
        return 0
    print("invalid")
    return 2


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    try:
        settings = get_settings()
    except ValidationError as e:
        configure_logging("INFO")
        logger.error(f"Invalid configuration: {e}")
        return 1

    configure_logging(settings.effective_log_level)
    args = build_parser(settings).parse_args(argv)

    try:
        if args.command == "solve":
            return _solve_local(Path(args.path), args.show, settings.max_expansions)

        if args.command == "check":
            return _check_local(Path(args.file), args.directions, args.show)

        client = MazebotClient(base_url=args.api_url)

        if args.command == "random":
            run = solve_random_maze(
                client,
                min_size=args.min_size,
                max_size=args.max_size,
                max_expansions=settings.max_expansions,
            )
            if args.show:
                _show(run.maze, run.solution.moves)
            print(f"{run.response.result}: {run.response.message}")
            return 0

        summary = RaceService(client).run(login=args.login, max_mazes=args.max_mazes)
        if summary.finished:
            print(f"{summary.message} ({summary.certificate})")
            if summary.certificate_details is not None:
                print(summary.certificate_details.message)
        else:
            print(f"Race stopped after {summary.mazes_solved} mazes")
        return 0

    except (FileNotFoundError, MazeParseError, MazeValidationError) as e:
        logger.error(f"Cannot load maze: {e}")
        return 1
    except MazebotClientError as e:
        logger.error(f"Mazebot API failure: {e}")
        return 1
    except ValueError as e:
        logger.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
