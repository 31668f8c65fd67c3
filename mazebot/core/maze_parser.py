"""
Maze Parser for Mazebot.

Builds Maze descriptions from local text files or from the JSON
documents served by the mazebot API.

Text Format:
    S = Start position
    E = Exit (goal)
    X = Wall (impassable)
    any other character = Open path
"""

import logging
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from mazebot.core.maze import Grid, Maze, MazeValidationError, Position, WALL_CHAR
from mazebot.schemas.mazebot import MazePayload

logger = logging.getLogger(__name__)

START_CHAR = "S"
EXIT_CHAR = "E"


class MazeParseError(Exception):
    """Exception raised when maze parsing fails."""

    pass


def parse_maze_text(maze_text: str, name: str = "Unnamed") -> Maze:
    """
    Parse maze text into a Maze.

    Args:
        maze_text: Multi-line string representing the maze grid.
        name: Name of the maze.

    Returns:
        Maze with grid, start and goal.

    Raises:
        MazeParseError: If the maze cannot be parsed.
        MazeValidationError: If the maze is invalid.
    """
    if not maze_text or not maze_text.strip():
        raise MazeParseError("Maze text is empty")

    lines = maze_text.strip("\n").split("\n")
    lines = [line.rstrip("\r") for line in lines]

    # Find start and exit positions
    start_pos: Optional[Position] = None
    exit_pos: Optional[Position] = None

    for y, line in enumerate(lines):
        for x, char in enumerate(line):
            if char == START_CHAR:
                if start_pos is not None:
                    raise MazeValidationError(
                        f"Multiple start positions found: "
                        f"first at ({start_pos.x}, {start_pos.y}), second at ({x}, {y})"
                    )
                start_pos = Position(x, y)
            elif char == EXIT_CHAR:
                if exit_pos is not None:
                    raise MazeValidationError(
                        f"Multiple exit positions found: "
                        f"first at ({exit_pos.x}, {exit_pos.y}), second at ({x}, {y})"
                    )
                exit_pos = Position(x, y)

    if start_pos is None:
        raise MazeValidationError("Maze must have a start position (S)")

    if exit_pos is None:
        raise MazeValidationError("Maze must have an exit position (E)")

    grid = Grid.from_rows(lines, wall=WALL_CHAR)
    return Maze(name=name, grid=grid, start=start_pos, goal=exit_pos).validate()


def maze_from_payload(payload: dict[str, Any]) -> Maze:
    """
    Build a Maze from a mazebot API document.

    Args:
        payload: Decoded JSON with name, mazePath, startingPosition,
            endingPosition and map.

    Raises:
        MazeParseError: If the document does not match the schema.
        MazeValidationError: If the grid is jagged or a position is
            outside it.
    """
    try:
        document = MazePayload.model_validate(payload)
    except ValidationError as e:
        raise MazeParseError(f"Invalid maze document: {e}") from e

    return maze_from_schema(document)


def maze_from_schema(document: MazePayload) -> Maze:
    """Build a Maze from an already validated MazePayload."""
    grid = Grid.from_rows(document.map, wall=WALL_CHAR)
    return Maze(
        name=document.name,
        maze_path=document.maze_path,
        grid=grid,
        start=Position(*document.starting_position),
        goal=Position(*document.ending_position),
    ).validate()


def load_maze_file(file_path: Path | str, name: Optional[str] = None) -> Maze:
    """
    Load and parse a maze file from the filesystem.

    Args:
        file_path: Path to the maze file.
        name: Optional name override. If not provided, uses filename.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        MazeParseError: If the maze cannot be parsed.
        MazeValidationError: If the maze is invalid.
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Maze file not found: {file_path}")

    if not file_path.is_file():
        raise MazeParseError(f"Path is not a file: {file_path}")

    try:
        maze_text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MazeParseError(f"Failed to read maze file: {e}") from e

    if name is None:
        name = file_path.stem.replace("_", " ").replace("-", " ").title()

    return parse_maze_text(maze_text, name=name)


def load_all_mazes(mazes_dir: Path | str) -> list[Maze]:
    """
    Load all maze files from a directory.

    Invalid files are logged and skipped.

    Raises:
        FileNotFoundError: If the directory doesn't exist.
    """
    mazes_dir = Path(mazes_dir)

    if not mazes_dir.exists():
        raise FileNotFoundError(f"Mazes directory not found: {mazes_dir}")

    if not mazes_dir.is_dir():
        raise MazeParseError(f"Path is not a directory: {mazes_dir}")

    mazes = []
    for maze_file in sorted(mazes_dir.glob("*.txt")):
        try:
            mazes.append(load_maze_file(maze_file))
        except (MazeParseError, MazeValidationError) as e:
            logger.warning(f"Failed to load {maze_file}: {e}")

    return mazes
