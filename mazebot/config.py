"""Application configuration using Pydantic settings."""

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root directory
BASE_DIR = Path(__file__).resolve().parent.parent

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """Application settings loaded from MAZEBOT_* environment variables."""

    model_config = SettingsConfigDict(
        env_file=os.path.join(BASE_DIR, ".env"),
        env_file_encoding="utf-8",
        env_prefix="MAZEBOT_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Mazebot Solver"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Mazebot API
    api_url: str = "https://api.noopschallenge.com"
    login: str = ""
    request_timeout_seconds: float = 10.0

    # Search
    max_expansions: Optional[int] = None  # None = search until the frontier is empty

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the log level and reject unknown names."""
        level = v.upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"Unknown log level '{v}'")
        return level

    @field_validator("max_expansions")
    @classmethod
    def validate_max_expansions(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v <= 0:
            raise ValueError("MAX_EXPANSIONS must be a positive integer")
        return v

    @property
    def effective_log_level(self) -> str:
        """DEBUG when debug mode is on, otherwise the configured level."""
        if self.debug:
            return "DEBUG"
        return self.log_level


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
