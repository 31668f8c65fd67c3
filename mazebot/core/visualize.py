"""ASCII rendering of mazes and solutions."""

from typing import Iterable

from mazebot.core.maze import Direction, Maze, Position, replay


def render_maze(maze: Maze) -> str:
    """Render the grid as it was received."""
    return "\n".join(maze.grid.rows)


def render_solution(maze: Maze, moves: Iterable[Direction], marker: str = "o") -> str:
    """
    Render the maze with the path overlaid.

    Moves are replayed from the start; every visited cell inside the
    grid is drawn with marker.

    Args:
        maze: Maze the moves belong to.
        moves: Moves in start-to-goal order.
        marker: Character drawn on visited cells.

    Returns:
        ASCII string representation.
    """
    visited = {pos for pos in replay(maze.start, moves) if maze.grid.in_bounds(pos)}

    lines = []
    for y, row in enumerate(maze.grid.rows):
        line = ""
        for x, cell in enumerate(row):
            if Position(x, y) in visited:
                line += marker
            else:
                line += cell
        lines.append(line)

    return "\n".join(lines)
