# Core module
from .maze import (
    Direction,
    Grid,
    Maze,
    MazeValidationError,
    Position,
    directions_from_string,
    directions_to_string,
    is_valid_solution,
    replay,
)
from .maze_parser import (
    MazeParseError,
    load_all_mazes,
    load_maze_file,
    maze_from_payload,
    parse_maze_text,
)
from .pathfinder import (
    SearchNode,
    SolveResult,
    SolveStatus,
    find_path,
    manhattan_distance,
    solve,
    solve_maze,
)
from .visualize import render_maze, render_solution

__all__ = [
    "Direction",
    "Grid",
    "Maze",
    "MazeValidationError",
    "Position",
    "directions_from_string",
    "directions_to_string",
    "is_valid_solution",
    "replay",
    "MazeParseError",
    "load_all_mazes",
    "load_maze_file",
    "maze_from_payload",
    "parse_maze_text",
    "SearchNode",
    "SolveResult",
    "SolveStatus",
    "find_path",
    "manhattan_distance",
    "solve",
    "solve_maze",
    "render_maze",
    "render_solution",
]
