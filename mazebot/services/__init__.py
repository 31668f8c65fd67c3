from .race_service import MazeRun, RaceService, RaceSummary, solve_random_maze

__all__ = ["MazeRun", "RaceService", "RaceSummary", "solve_random_maze"]
