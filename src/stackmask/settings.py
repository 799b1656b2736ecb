"""Shared settings loaded from environment / .env file."""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for the masking engine.

    Values are read from ``STACKMASK_``-prefixed environment variables and
    from a ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="STACKMASK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "WARNING"

    # Registry name of the host runtime used when none is passed explicitly
    host: str = "null"

    # Pseudo-path the interactive interpreter reports for its input
    repl_marker: str = "<stdin>"

    # Column recovery clip lengths, tried longest first
    max_clip_length: int = Field(default=6, ge=1)
    min_clip_length: int = Field(default=2, ge=1)

    @model_validator(mode="after")
    def _check_clip_lengths(self) -> Settings:
        if self.min_clip_length > self.max_clip_length:
            raise ValueError(
                f"min_clip_length ({self.min_clip_length}) exceeds "
                f"max_clip_length ({self.max_clip_length})"
            )
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()


def reset_settings() -> None:
    """Drop the cached settings (for tests)."""
    get_settings.cache_clear()


def configure_logging(settings: Settings | None = None) -> None:
    """Apply ``basicConfig`` at the configured level.

    Meant for applications; the library never configures logging itself.
    """
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level.upper())
