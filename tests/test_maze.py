"""Tests for grid and coordinate types."""

import pytest

from mazebot.core.maze import (
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


class TestDirection:
    """Tests for Direction."""

    def test_deltas(self):
        assert Direction.NORTH.delta == (0, -1)
        assert Direction.SOUTH.delta == (0, 1)
        assert Direction.EAST.delta == (1, 0)
        assert Direction.WEST.delta == (-1, 0)

    def test_opposites_cancel(self):
        origin = Position(3, 3)
        for direction in Direction:
            assert origin.move(direction).move(direction.opposite) == origin

    def test_from_char_accepts_lowercase(self):
        assert Direction.from_char("n") == Direction.NORTH
        assert Direction.from_char("W") == Direction.WEST

    def test_from_char_rejects_unknown(self):
        with pytest.raises(ValueError, match="Invalid direction"):
            Direction.from_char("Q")

    def test_string_conversion(self):
        moves = [Direction.NORTH, Direction.EAST, Direction.EAST, Direction.SOUTH]
        assert directions_to_string(moves) == "NEES"
        assert directions_from_string("NEES") == moves
        assert directions_to_string([]) == ""


class TestGrid:
    """Tests for Grid construction and lookups."""

    def test_from_strings(self):
        grid = Grid.from_rows(["..X", "X.."])
        assert grid.width == 3
        assert grid.height == 2

    def test_from_character_lists(self):
        grid = Grid.from_rows([[" ", "X"], ["A", "B"]])
        assert grid.rows == (" X", "AB")
        assert grid.is_passable(Position(0, 1))
        assert not grid.is_passable(Position(1, 0))

    def test_empty_grid_rejected(self):
        with pytest.raises(MazeValidationError, match="no rows"):
            Grid.from_rows([])

    def test_empty_row_rejected(self):
        with pytest.raises(MazeValidationError, match="no columns"):
            Grid.from_rows([""])

    def test_jagged_grid_rejected(self):
        with pytest.raises(MazeValidationError, match="not rectangular"):
            Grid.from_rows(["...", ".."])

    def test_out_of_bounds_is_not_passable(self):
        grid = Grid.from_rows(["..", ".."])
        assert not grid.is_passable(Position(-1, 0))
        assert not grid.is_passable(Position(0, 2))
        assert grid.cell(Position(5, 5)) == "X"

    def test_custom_wall_marker(self):
        grid = Grid.from_rows(["#.", ".."], wall="#")
        assert not grid.is_passable(Position(0, 0))
        assert grid.is_passable(Position(1, 0))

    def test_cell_ids_are_unique(self):
        grid = Grid.from_rows(["...."] * 3)
        ids = {grid.cell_id(Position(x, y)) for x in range(4) for y in range(3)}
        assert ids == set(range(12))

    def test_cell_id_is_row_major(self):
        grid = Grid.from_rows(["...."] * 3)
        assert grid.cell_id(Position(3, 2)) == 11
        assert grid.cell_id(Position(0, 1)) == 4

    def test_direct_construction_is_validated(self):
        with pytest.raises(MazeValidationError, match="no rows"):
            Grid(rows=())
        with pytest.raises(MazeValidationError, match="no columns"):
            Grid(rows=("",))
        with pytest.raises(MazeValidationError, match="row 1 has 2 cells, expected 3"):
            Grid(rows=("...", ".."))

    def test_multi_character_list_cell_rejected(self):
        with pytest.raises(MazeValidationError, match=r"Cell \(1, 0\) must be a single character"):
            Grid.from_rows([[".", "XX"], [".", "."]])

    def test_non_string_list_cell_rejected(self):
        with pytest.raises(MazeValidationError, match="single character"):
            Grid.from_rows([[".", 1], [".", "."]])

    def test_grid_is_immutable(self):
        grid = Grid.from_rows(["..."])
        with pytest.raises(AttributeError):
            grid.rows = ("XXX",)


class TestMaze:
    """Tests for Maze validation."""

    def test_validate_returns_maze(self):
        maze = Maze("Ok", Grid.from_rows(["..."]), Position(0, 0), Position(2, 0))
        assert maze.validate() is maze

    def test_start_out_of_bounds(self):
        maze = Maze("Bad", Grid.from_rows(["..."]), Position(3, 0), Position(2, 0))
        with pytest.raises(MazeValidationError, match="start"):
            maze.validate()


class TestReplay:
    """Tests for move replay and solution validation."""

    def test_replay_visits_every_cell(self):
        visited = replay(Position(0, 0), [Direction.EAST, Direction.SOUTH])
        assert visited == [Position(0, 0), Position(1, 0), Position(1, 1)]

    def test_valid_solution(self, open_grid):
        moves = directions_from_string("EESS")
        assert is_valid_solution(open_grid, Position(0, 0), Position(2, 2), moves)

    def test_solution_through_wall(self):
        grid = Grid.from_rows([".X.", "...", "..."])
        moves = directions_from_string("EESS")
        assert not is_valid_solution(grid, Position(0, 0), Position(2, 2), moves)

    def test_solution_leaving_grid(self, open_grid):
        moves = directions_from_string("NSEESS")
        assert not is_valid_solution(open_grid, Position(0, 0), Position(2, 2), moves)

    def test_solution_ending_elsewhere(self, open_grid):
        moves = directions_from_string("EES")
        assert not is_valid_solution(open_grid, Position(0, 0), Position(2, 2), moves)
