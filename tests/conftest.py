"""Pytest configuration and fixtures."""

import os
from collections import deque
from typing import Generator, Optional

import pytest

from mazebot.config import get_settings
from mazebot.core.maze import Direction, Grid, Maze, Position


TUTORIAL_MAZE = """XXXXXXXXXX
XS.......X
X.XXXXXX.X
X.X....X.X
X.X.XX.X.X
X.X.XX.X.X
X.X....X.X
X.XXXXXX.X
X........E
XXXXXXXXXX"""


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch) -> Generator:
    """Isolate every test from MAZEBOT_* variables and the settings cache."""
    for key in list(os.environ):
        if key.startswith("MAZEBOT_"):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def tutorial_text() -> str:
    return TUTORIAL_MAZE


@pytest.fixture
def open_grid() -> Grid:
    """3x3 grid without walls."""
    return Grid.from_rows(["...", "...", "..."])


@pytest.fixture
def sample_maze_payload() -> dict:
    """Maze document as served by the mazebot API."""
    return {
        "name": "Maze #236 (10x10)",
        "mazePath": "/mazebot/mazes/ikTcNQMwKhux3bWjV3SSYKfyaVHcL0FXsvbwVGk5ns8",
        "startingPosition": [4, 3],
        "endingPosition": [3, 6],
        "message": "When you have figured out the solution, post it back to this url.",
        "exampleSolution": {"directions": "ENWNNENWNNS"},
        "map": [
            [" ", " ", "X", " ", " ", " ", "X", " ", "X", "X"],
            [" ", "X", " ", " ", " ", " ", " ", " ", " ", " "],
            [" ", "X", " ", "X", "X", "X", "X", "X", "X", " "],
            [" ", "X", " ", " ", "A", " ", " ", " ", "X", " "],
            [" ", "X", "X", "X", "X", "X", "X", "X", " ", " "],
            ["X", " ", " ", " ", "X", " ", " ", " ", "X", " "],
            [" ", " ", "X", "B", "X", " ", "X", " ", "X", " "],
            [" ", " ", "X", " ", "X", " ", "X", " ", " ", " "],
            ["X", " ", "X", "X", "X", "X", "X", "X", "X", "X"],
            [" ", " ", " ", " ", " ", " ", " ", " ", " ", "X"],
        ],
    }


@pytest.fixture
def tutorial_maze(tutorial_text) -> Maze:
    rows = tutorial_text.split("\n")
    return Maze(
        name="Tutorial",
        grid=Grid.from_rows(rows),
        start=Position(1, 1),
        goal=Position(9, 8),
        maze_path="/mazebot/mazes/tutorial",
    )


def bfs_distance(grid: Grid, start: Position, goal: Position) -> Optional[int]:
    """Brute-force shortest path length, None if unreachable."""
    if not grid.is_passable(start) and start != goal:
        return None
    queue = deque([(start, 0)])
    seen = {start}
    while queue:
        pos, dist = queue.popleft()
        if pos == goal:
            return dist
        for direction in Direction:
            nxt = pos.move(direction)
            if nxt not in seen and grid.is_passable(nxt):
                seen.add(nxt)
                queue.append((nxt, dist + 1))
    return None
