"""Mazebot Solver: A* pathfinding for mazebot grid mazes."""

__version__ = "1.0.0"
