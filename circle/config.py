"""Application configuration."""

from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CommentSettings(BaseModel):
    """Comment tree configuration."""

    # Maximum nesting levels shown in a thread
    # None: unbounded nesting
    # N: comments at depth >= N (root = 0) are surfaced at root level
    max_depth: int | None = Field(default=None, ge=0)


class PointsSettings(BaseModel):
    """Points and anti-spam configuration."""

    # Trailing window for diminishing returns, in seconds
    # Product rules are phrased per hour
    window_seconds: int = Field(default=3600, gt=0)

    # Hard cap on a user's accumulated points
    max_points: int = Field(default=999_999, gt=0)

    # Default number of rows returned by the leaderboard
    leaderboard_limit: int = Field(default=50, gt=0)


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, using ``__`` for nested sections:

        ENVIRONMENT=production
        COMMENTS__MAX_DEPTH=5
        POINTS__WINDOW_SECONDS=7200
        OBSERVABILITY__LOGFIRE_TOKEN=...
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows POINTS__MAX_POINTS syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Nested settings
    comments: CommentSettings = CommentSettings()
    points: PointsSettings = PointsSettings()
    observability: ObservabilitySettings = ObservabilitySettings()
