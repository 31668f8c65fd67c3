"""
Mazebot grid model

Types shared by the pathfinder, the maze parser and the visualizer:
- Direction (the four cardinal moves)
- Position (x = column, y = row)
- Grid (immutable passable/wall matrix)
- Maze (grid plus start and goal)

Coordinate convention:
    Row 0 is the north-most row. Moving NORTH decreases y,
    moving SOUTH increases y, EAST increases x, WEST decreases x.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence, Union


WALL_CHAR = "X"


class MazeValidationError(Exception):
    """Exception raised when a maze violates the solver's preconditions."""

    pass


class Direction(Enum):
    """Cardinal moves, valued by their single-character wire code."""
    NORTH = "N"
    SOUTH = "S"
    EAST = "E"
    WEST = "W"

    @property
    def delta(self) -> tuple[int, int]:
        """Get (dx, dy) for this direction."""
        deltas = {
            Direction.NORTH: (0, -1),
            Direction.SOUTH: (0, 1),
            Direction.EAST: (1, 0),
            Direction.WEST: (-1, 0),
        }
        return deltas[self]

    @property
    def opposite(self) -> "Direction":
        opposites = {
            Direction.NORTH: Direction.SOUTH,
            Direction.SOUTH: Direction.NORTH,
            Direction.EAST: Direction.WEST,
            Direction.WEST: Direction.EAST,
        }
        return opposites[self]

    @classmethod
    def from_char(cls, char: str) -> "Direction":
        """Convert a wire code ("N", "s", ...) to a Direction."""
        try:
            return cls(char.upper())
        except ValueError:
            raise ValueError(
                f"Invalid direction '{char}'. Must be one of: N, S, E, W"
            ) from None


def directions_to_string(moves: Iterable[Direction]) -> str:
    """Concatenate moves into the submission format, e.g. "NNEWS"."""
    return "".join(move.value for move in moves)


def directions_from_string(text: str) -> list[Direction]:
    """Parse a direction string like "NNEWS" back into moves."""
    return [Direction.from_char(char) for char in text]


@dataclass(frozen=True)
class Position:
    """2D position in the maze."""
    x: int
    y: int

    def move(self, direction: Direction) -> "Position":
        """Return new position after moving in direction."""
        dx, dy = direction.delta
        return Position(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class Grid:
    """
    Immutable rectangular grid of cells.

    A cell holding the wall marker is impassable, every other
    character is passable. The shape is checked on construction.

    Raises:
        MazeValidationError: If the grid is empty or jagged.
    """
    rows: tuple[str, ...]
    wall: str = WALL_CHAR

    def __post_init__(self):
        if not self.rows:
            raise MazeValidationError("Grid has no rows")

        width = len(self.rows[0])
        if width == 0:
            raise MazeValidationError("Grid has no columns")

        for y, row in enumerate(self.rows):
            if len(row) != width:
                raise MazeValidationError(
                    f"Grid is not rectangular: row {y} has {len(row)} cells, "
                    f"expected {width}"
                )

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[Union[str, Sequence[str]]],
        wall: str = WALL_CHAR,
    ) -> "Grid":
        """
        Build a grid from strings or lists of single characters.

        Raises:
            MazeValidationError: If a listed cell is not a single character,
                or the grid is empty or jagged.
        """
        normalized = []
        for y, row in enumerate(rows):
            if not isinstance(row, str):
                for x, cell in enumerate(row):
                    if not isinstance(cell, str) or len(cell) != 1:
                        raise MazeValidationError(
                            f"Cell ({x}, {y}) must be a single character, got {cell!r}"
                        )
                row = "".join(row)
            normalized.append(row)

        return cls(rows=tuple(normalized), wall=wall)

    @property
    def width(self) -> int:
        return len(self.rows[0])

    @property
    def height(self) -> int:
        return len(self.rows)

    def in_bounds(self, pos: Position) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def cell(self, pos: Position) -> str:
        """Get the raw character at pos. Out of bounds reads as a wall."""
        if not self.in_bounds(pos):
            return self.wall
        return self.rows[pos.y][pos.x]

    def is_passable(self, pos: Position) -> bool:
        return self.cell(pos) != self.wall

    def cell_id(self, pos: Position) -> int:
        """Unique id of a cell, stable for this grid's width."""
        return pos.y * self.width + pos.x


@dataclass(frozen=True)
class Maze:
    """A maze description: grid plus start and goal."""
    name: str
    grid: Grid
    start: Position
    goal: Position
    maze_path: str = ""

    def validate(self) -> "Maze":
        """
        Check that start and goal lie inside the grid.

        Returns:
            The maze itself, so calls can be chained.

        Raises:
            MazeValidationError: If start or goal is out of bounds.
        """
        for label, pos in (("start", self.start), ("goal", self.goal)):
            if not self.grid.in_bounds(pos):
                raise MazeValidationError(
                    f"Maze '{self.name}' {label} ({pos.x}, {pos.y}) is outside "
                    f"the {self.grid.width}x{self.grid.height} grid"
                )
        return self


def replay(start: Position, moves: Iterable[Direction]) -> list[Position]:
    """Positions visited when applying moves from start, start included."""
    visited = [start]
    current = start
    for move in moves:
        current = current.move(move)
        visited.append(current)
    return visited


def is_valid_solution(
    grid: Grid,
    start: Position,
    goal: Position,
    moves: Sequence[Direction],
) -> bool:
    """
    Check that moves lead from start to goal without leaving the grid
    or stepping onto a wall.
    """
    visited = replay(start, moves)
    if any(not grid.is_passable(pos) for pos in visited[1:]):
        return False
    return visited[-1] == goal

