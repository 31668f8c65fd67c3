"""
Mazebot API Client

Thin wrapper around the mazebot HTTP API: fetch mazes, submit
solutions and drive a race.

Usage:
    from mazebot.client import MazebotClient
    from mazebot.core import solve_maze

    client = MazebotClient()
    maze = client.get_random_maze()
    result = solve_maze(maze)
    print(client.send_solution(maze.maze_path, result.moves).message)
"""

import logging
from typing import Any, Iterable, Optional, Type, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from mazebot.config import get_settings
from mazebot.core.maze import Direction, Maze, MazeValidationError, directions_to_string
from mazebot.core.maze_parser import MazeParseError, maze_from_payload
from mazebot.schemas.mazebot import (
    Certificate,
    RaceResult,
    RaceStart,
    RaceStartRequest,
    SolutionRequest,
    SolutionResult,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class MazebotClientError(Exception):
    """Base exception for mazebot client errors."""
    pass


class MazeNotFoundError(MazebotClientError):
    """The requested maze or race path does not exist."""
    pass


class InvalidResponseError(MazebotClientError):
    """The service answered with a document we cannot interpret."""
    pass


class MazebotClient:
    """
    Client for the mazebot API.

    Example:
        client = MazebotClient()
        start = client.start_race("octocat")
        maze = client.get_maze(start.next_maze)
    """

    RANDOM_ENDPOINT = "/mazebot/random"
    RACE_START_ENDPOINT = "/mazebot/race/start"

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: API base URL. Defaults to the configured api_url.
            timeout: Request timeout in seconds. Defaults to the configured value.
        """
        settings = get_settings()
        self.base_url = (base_url or settings.api_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.request_timeout_seconds
        self._headers = {"Content-Type": "application/json"}

    def _request(
        self,
        method: str,
        endpoint: str,
        accept_bad_request: bool = False,
        **kwargs: Any,
    ) -> dict:
        """
        Make an API request and decode the JSON body.

        The service reports a wrong solution as 400 with a regular result
        document; accept_bad_request returns that body instead of raising.
        """
        url = f"{self.base_url}{endpoint}"
        logger.debug(f"--> {method} {url}")
        try:
            response = requests.request(
                method, url, headers=self._headers, timeout=self.timeout, **kwargs
            )
            logger.debug(f"<-- {response.status_code} {url}")
            if accept_bad_request and response.status_code == 400:
                return self._decode(response)
            response.raise_for_status()
            return self._decode(response)
        except requests.exceptions.HTTPError as e:
            if e.response is not None and e.response.status_code == 404:
                raise MazeNotFoundError(f"Not found: {endpoint}") from e
            raise MazebotClientError(f"API error: {e}") from e
        except requests.exceptions.RequestException as e:
            raise MazebotClientError(f"Request failed: {e}") from e

    @staticmethod
    def _decode(response: requests.Response) -> dict:
        try:
            data = response.json()
        except ValueError as e:
            raise InvalidResponseError(
                f"Response from {response.url} is not JSON"
            ) from e
        if not isinstance(data, dict):
            raise InvalidResponseError(f"Expected a JSON object, got {type(data).__name__}")
        return data

    @staticmethod
    def _parse(model: Type[ModelT], data: dict) -> ModelT:
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise InvalidResponseError(f"Unexpected {model.__name__} document: {e}") from e

    @staticmethod
    def _to_maze(data: dict) -> Maze:
        try:
            return maze_from_payload(data)
        except (MazeParseError, MazeValidationError) as e:
            raise InvalidResponseError(f"Invalid maze: {e}") from e

    def _directions_body(self, moves: Iterable[Direction]) -> dict:
        request = SolutionRequest(directions=directions_to_string(moves))
        return request.model_dump()

    def get_random_maze(
        self,
        min_size: Optional[int] = None,
        max_size: Optional[int] = None,
    ) -> Maze:
        """
        Fetch a random maze.

        Args:
            min_size: Optional lower bound on the maze size.
            max_size: Optional upper bound on the maze size.
        """
        params = {}
        if min_size is not None:
            params["minSize"] = min_size
        if max_size is not None:
            params["maxSize"] = max_size
        data = self._request("GET", self.RANDOM_ENDPOINT, params=params or None)
        return self._to_maze(data)

    def get_maze(self, path: str) -> Maze:
        """Fetch the maze served at path (e.g. a race's nextMaze)."""
        return self._to_maze(self._request("GET", path))

    def send_solution(self, path: str, moves: Iterable[Direction]) -> SolutionResult:
        """
        Submit moves for a single maze.

        Returns:
            SolutionResult. A rejected solution is a result, not an error.
        """
        data = self._request(
            "POST", path, accept_bad_request=True, json=self._directions_body(moves)
        )
        return self._parse(SolutionResult, data)

    def start_race(self, login: str) -> RaceStart:
        """Start a race for the given GitHub login."""
        body = RaceStartRequest(login=login).model_dump()
        data = self._request("POST", self.RACE_START_ENDPOINT, json=body)
        return self._parse(RaceStart, data)

    def send_race_solution(self, path: str, moves: Iterable[Direction]) -> RaceResult:
        """Submit moves for the current race maze."""
        data = self._request(
            "POST", path, accept_bad_request=True, json=self._directions_body(moves)
        )
        return self._parse(RaceResult, data)

    def get_certificate(self, path: str) -> Certificate:
        """Fetch the certificate awarded at the end of a race."""
        return self._parse(Certificate, self._request("GET", path))
