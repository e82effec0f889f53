"""Process settings and per-request build metadata."""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_VERSION = "dev"


class Settings(BaseSettings):
    """Where and how the server listens. Read once per process."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_host: str = Field(default="0.0.0.0", description="Interface uvicorn binds to")
    api_port: int = Field(default=8000, description="Port uvicorn binds to")
    debug: bool = Field(default=False, description="Auto-reload and DEBUG logging")
    log_level: str = Field(default="INFO", description="Level name for uvicorn and app logs")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level


class BuildInfo(BaseSettings):
    """Build metadata read from the process environment.

    Unlike ``Settings`` this is never cached, so a changed ``GIT_SHA`` is
    visible on the next request. Only the exact ``GIT_SHA`` name is honoured.
    """

    model_config = SettingsConfigDict(case_sensitive=True, extra="ignore")

    git_sha: str = Field(
        default="",
        validation_alias="GIT_SHA",
        description="Commit hash of the deployed build",
    )

    @property
    def version(self) -> str:
        """Version identifier, falling back to ``dev`` when no commit is set."""
        return self.git_sha or DEFAULT_VERSION


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def get_build_info() -> BuildInfo:
    """Read build metadata from the environment."""
    return BuildInfo()
