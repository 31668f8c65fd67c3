"""Mazebot API schemas for request/response validation."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MazebotModel(BaseModel):
    """Base schema: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(populate_by_name=True)


class MazePayload(MazebotModel):
    """Schema for a maze document returned by the service."""

    name: str = ""
    maze_path: str = Field("", alias="mazePath")
    starting_position: tuple[int, int] = Field(..., alias="startingPosition")
    ending_position: tuple[int, int] = Field(..., alias="endingPosition")
    map: list[list[str]] = Field(..., min_length=1)

    @field_validator("map")
    @classmethod
    def validate_cells(cls, v: list[list[str]]) -> list[list[str]]:
        """Every cell must be a single character."""
        for y, row in enumerate(v):
            for x, cell in enumerate(row):
                if len(cell) != 1:
                    raise ValueError(
                        f"Cell ({x}, {y}) must be a single character, got '{cell}'"
                    )
        return v


class SolutionRequest(MazebotModel):
    """Schema for submitting a solution."""

    directions: str = Field("", pattern="^[NSEW]*$")


class SolutionResult(MazebotModel):
    """Schema for the answer to a single-maze submission."""

    result: str
    message: str = ""
    shortest_solution_length: Optional[int] = Field(None, alias="shortestSolutionLength")
    your_solution_length: Optional[int] = Field(None, alias="yourSolutionLength")
    elapsed: Optional[float] = None

    @property
    def is_success(self) -> bool:
        return self.result == "success"


class RaceStartRequest(MazebotModel):
    """Schema for starting a race."""

    login: str = Field(..., min_length=1)


class RaceStart(MazebotModel):
    """Schema for the answer to a race start."""

    message: str = ""
    next_maze: str = Field(..., alias="nextMaze")


class RaceResult(MazebotModel):
    """Schema for the answer to a race submission."""

    result: str
    next_maze: str = Field("", alias="nextMaze")
    elapsed: float = 0.0
    shortest_solution_length: int = Field(0, alias="shortestSolutionLength")
    your_solution_length: int = Field(0, alias="yourSolutionLength")
    message: str = ""
    certificate: str = ""

    @property
    def is_finished(self) -> bool:
        return self.result == "finished"


class Certificate(MazebotModel):
    """Schema for a race completion certificate."""

    message: str = ""
    elapsed: float = 0.0
    completed: str = ""
