"""
Mazebot Pathfinder

A* search over a Grid with unit-cost cardinal moves and a Manhattan
distance heuristic.

The search runs backwards: it is rooted at the goal and stops when it
pops the start. Every relaxation records the move that leads from the
neighbor back towards the root, so walking the predecessor chain from
the start already yields the moves in start-to-goal order.

Stale heap entries are left in place and skipped when popped (lazy
deletion); the closed set guards against re-expansion.
"""

import heapq
import itertools
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from mazebot.core.maze import Direction, Grid, Maze, MazeValidationError, Position

logger = logging.getLogger(__name__)

# Fixed expansion order; it decides between equal-length paths.
EXPANSION_ORDER = (Direction.NORTH, Direction.WEST, Direction.EAST, Direction.SOUTH)

UNREACHED = -1


class SolveStatus(Enum):
    """Outcome of a search."""
    SOLVED = "solved"
    ALREADY_AT_GOAL = "already_at_goal"
    UNREACHABLE = "unreachable"
    LIMIT_REACHED = "limit_reached"


@dataclass
class SearchNode:
    """Per-cell search state, owned by a single search."""
    position: Position
    g: int = UNREACHED  # best known cost from the root
    h: int = 0  # estimated cost to the target
    predecessor: Optional[int] = None
    arrival_move: Optional[Direction] = None

    @property
    def f(self) -> int:
        return self.g + self.h


@dataclass
class SolveResult:
    """Result of a search: status, moves and the number of expanded nodes."""
    status: SolveStatus
    moves: list[Direction] = field(default_factory=list)
    expanded: int = 0

    @property
    def is_solved(self) -> bool:
        """True when start and goal are connected (including start == goal)."""
        return self.status in (SolveStatus.SOLVED, SolveStatus.ALREADY_AT_GOAL)

    @property
    def length(self) -> int:
        return len(self.moves)

    def __repr__(self) -> str:
        return (
            f"SolveResult(status={self.status.value}, length={self.length}, "
            f"expanded={self.expanded})"
        )


def manhattan_distance(a: Position, b: Position) -> int:
    return abs(a.x - b.x) + abs(a.y - b.y)


def find_path(
    grid: Grid,
    start: Position,
    goal: Position,
    max_expansions: Optional[int] = None,
) -> SolveResult:
    """
    Find a shortest sequence of moves leading from start to goal.

    Args:
        grid: Grid to search. Walls are impassable.
        start: Start position (must be inside the grid).
        goal: Goal position (must be inside the grid).
        max_expansions: Optional cap on finalized nodes. When it is hit the
            search gives up with LIMIT_REACHED.

    Returns:
        SolveResult. moves is empty unless status is SOLVED.

    Raises:
        MazeValidationError: If start or goal is outside the grid.
    """
    for label, pos in (("start", start), ("goal", goal)):
        if not grid.in_bounds(pos):
            raise MazeValidationError(
                f"{label.capitalize()} ({pos.x}, {pos.y}) is outside "
                f"the {grid.width}x{grid.height} grid"
            )

    if start == goal:
        return SolveResult(status=SolveStatus.ALREADY_AT_GOAL)

    if not grid.is_passable(start) or not grid.is_passable(goal):
        logger.debug("Start or goal is a wall")
        return SolveResult(status=SolveStatus.UNREACHABLE)

    # Search from the goal towards the start.
    root = goal
    target = start

    nodes: dict[int, SearchNode] = {}
    closed: set[int] = set()
    open_list: list[tuple[int, int, int]] = []
    counter = itertools.count()

    root_id = grid.cell_id(root)
    root_node = SearchNode(position=root, g=0, h=manhattan_distance(root, target))
    nodes[root_id] = root_node
    heapq.heappush(open_list, (root_node.f, next(counter), root_id))

    expanded = 0

    while open_list:
        _, _, current_id = heapq.heappop(open_list)
        if current_id in closed:
            continue

        current = nodes[current_id]

        if current.position == target:
            moves = _reconstruct(nodes, current_id, root_id)
            logger.debug(
                f"Path found: {len(moves)} moves, {expanded} nodes expanded"
            )
            return SolveResult(
                status=SolveStatus.SOLVED, moves=moves, expanded=expanded
            )

        if max_expansions is not None and expanded >= max_expansions:
            logger.warning(
                f"Search aborted after {expanded} expansions "
                f"(limit {max_expansions})"
            )
            return SolveResult(status=SolveStatus.LIMIT_REACHED, expanded=expanded)

        closed.add(current_id)
        expanded += 1

        for move in EXPANSION_ORDER:
            # Stepping `move` from the neighbor leads back to current.
            neighbor_pos = current.position.move(move.opposite)
            if not grid.is_passable(neighbor_pos):
                continue

            neighbor_id = grid.cell_id(neighbor_pos)
            if neighbor_id in closed:
                continue

            neighbor = nodes.get(neighbor_id)
            if neighbor is None:
                neighbor = SearchNode(position=neighbor_pos)
                nodes[neighbor_id] = neighbor

            new_g = current.g + 1
            if neighbor.g == UNREACHED or new_g < neighbor.g:
                neighbor.g = new_g
                neighbor.h = manhattan_distance(neighbor_pos, target)
                neighbor.predecessor = current_id
                neighbor.arrival_move = move
                heapq.heappush(open_list, (neighbor.f, next(counter), neighbor_id))

    logger.debug(f"No path: frontier exhausted after {expanded} expansions")
    return SolveResult(status=SolveStatus.UNREACHABLE, expanded=expanded)


def _reconstruct(nodes: dict[int, SearchNode], target_id: int, root_id: int) -> list[Direction]:
    """Follow predecessors from the target up to the root, collecting moves."""
    moves = []
    node_id = target_id
    while node_id != root_id:
        node = nodes[node_id]
        moves.append(node.arrival_move)
        node_id = node.predecessor
    return moves


def solve(grid: Grid, start: Position, goal: Position) -> list[Direction]:
    """
    Shortest move sequence from start to goal.

    Returns an empty list both when start == goal and when the goal is
    unreachable; use find_path() to tell the two apart.
    """
    return find_path(grid, start, goal).moves


def solve_maze(maze: Maze, max_expansions: Optional[int] = None) -> SolveResult:
    """Validate a maze description and search it."""
    maze.validate()
    result = find_path(maze.grid, maze.start, maze.goal, max_expansions=max_expansions)
    logger.info(
        f"Solved '{maze.name}' ({maze.grid.width}x{maze.grid.height}): "
        f"{result.status.value}, {result.length} moves"
    )
    return result
