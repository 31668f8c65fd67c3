"""Race service: fetch, solve and submit mazes against the mazebot API."""

import logging
import time
from dataclasses import dataclass, field
from typing import Optional, Union

from mazebot.client import MazebotClient
from mazebot.config import get_settings
from mazebot.core.maze import Maze
from mazebot.core.pathfinder import SolveResult, solve_maze
from mazebot.schemas.mazebot import Certificate, RaceResult, SolutionResult

logger = logging.getLogger(__name__)


@dataclass
class MazeRun:
    """One maze fetched, solved and submitted."""
    maze: Maze
    solution: SolveResult
    response: Union[SolutionResult, RaceResult]
    solve_seconds: float = 0.0


@dataclass
class RaceSummary:
    """Outcome of a race."""
    login: str
    runs: list[MazeRun] = field(default_factory=list)
    finished: bool = False
    message: str = ""
    certificate: str = ""
    certificate_details: Optional[Certificate] = None

    @property
    def mazes_solved(self) -> int:
        return len(self.runs)


def _timed_solve(maze: Maze, max_expansions: Optional[int]) -> tuple[SolveResult, float]:
    start_time = time.perf_counter()
    result = solve_maze(maze, max_expansions=max_expansions)
    return result, time.perf_counter() - start_time


def solve_random_maze(
    client: MazebotClient,
    min_size: Optional[int] = None,
    max_size: Optional[int] = None,
    max_expansions: Optional[int] = None,
) -> MazeRun:
    """
    Fetch one random maze, solve it and submit the moves.

    Returns:
        MazeRun with the maze, the local result and the service's verdict.
    """
    maze = client.get_random_maze(min_size=min_size, max_size=max_size)
    logger.info(f"Fetched '{maze.name}' ({maze.grid.width}x{maze.grid.height})")

    solution, elapsed = _timed_solve(maze, max_expansions)
    response = client.send_solution(maze.maze_path, solution.moves)
    logger.info(f"{response.result}: {response.message}")

    return MazeRun(maze=maze, solution=solution, response=response, solve_seconds=elapsed)


class RaceService:
    """Drives a race: keeps solving mazes until the service says finished."""

    def __init__(self, client: Optional[MazebotClient] = None):
        self.settings = get_settings()
        self.client = client or MazebotClient()

    def run(self, login: Optional[str] = None, max_mazes: Optional[int] = None) -> RaceSummary:
        """
        Run a race.

        Args:
            login: GitHub login to race as. Defaults to the configured login.
            max_mazes: Stop after this many mazes even if the race is not
                finished. None races to the end.

        Returns:
            RaceSummary with every run and, when finished, the certificate
            path and the certificate fetched from it.

        Raises:
            ValueError: If no login is given or configured.
            MazebotClientError: If the service cannot be reached.
        """
        login = login or self.settings.login
        if not login:
            raise ValueError(
                "Login required. Set MAZEBOT_LOGIN environment variable or pass login."
            )

        summary = RaceSummary(login=login)
        next_maze = self.client.start_race(login).next_maze
        logger.info(f"Race started for {login}")

        while next_maze:
            if max_mazes is not None and summary.mazes_solved >= max_mazes:
                logger.info(f"Stopping after {max_mazes} mazes")
                break

            maze = self.client.get_maze(next_maze)
            solution, elapsed = _timed_solve(maze, self.settings.max_expansions)
            if not solution.is_solved:
                logger.warning(f"'{maze.name}': {solution.status.value}, submitting empty solution")

            result = self.client.send_race_solution(next_maze, solution.moves)
            summary.runs.append(
                MazeRun(maze=maze, solution=solution, response=result, solve_seconds=elapsed)
            )

            if result.is_finished:
                summary.finished = True
                summary.message = result.message
                summary.certificate = result.certificate
                logger.info(f"{result.message} ({result.certificate})")
                if result.certificate:
                    summary.certificate_details = self.client.get_certificate(result.certificate)
                    logger.info(summary.certificate_details.message)
                break

            logger.info(
                f"{maze.name}: {result.result} "
                f"({result.your_solution_length}/{result.shortest_solution_length})"
            )
            next_maze = result.next_maze

        return summary
