"""
Configuration for Short Tracker.

Uses pydantic-settings so every value can come from the environment
(SHORT_TRACKER_*) or a local .env file.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="SHORT_TRACKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    data_dir: Path = Field(
        default=Path.home() / ".short_tracker",
        description="Directory holding workers.json / entries.json"
    )
    export_dir: Path = Field(
        default=Path.home() / "Documents",
        description="Where monthly spreadsheets are written"
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level name"
    )
    notification_ms: int = Field(
        default=3000,
        ge=500,
        le=30000,
        description="How long status bar notifications stay visible"
    )
    default_workers: str = Field(
        default="Worker A,Worker B,Worker C,Worker D",
        description="Comma-separated roster seeded on first launch"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level: {v}")
        return level

    @property
    def default_worker_names(self) -> list[str]:
        return [n.strip() for n in self.default_workers.split(",") if n.strip()]


@lru_cache()
def get_settings() -> AppSettings:
    """
    Cached settings. Call get_settings.cache_clear() to reload.
    """
    return AppSettings()
