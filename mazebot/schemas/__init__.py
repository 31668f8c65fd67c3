"""Mazebot API schemas."""

from .mazebot import (
    Certificate,
    MazePayload,
    RaceResult,
    RaceStart,
    RaceStartRequest,
    SolutionRequest,
    SolutionResult,
)

__all__ = [
    "Certificate",
    "MazePayload",
    "RaceResult",
    "RaceStart",
    "RaceStartRequest",
    "SolutionRequest",
    "SolutionResult",
]
