"""Runtime configuration — env-driven.

Centralized settings using pydantic-settings.  Reads from a .env file and
ARBOR_* environment variables.
"""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from arbor.models.levels import coerce_level


class ArborSettings(BaseSettings):
    """Arbor configuration with environment variable overrides.

    Examples
    --------
    Override via environment::

        export ARBOR_ISOLATE_FAILURES=false
        export ARBOR_MAX_LOG_LENGTH=1000
        export ARBOR_CONSOLE_MIN_LEVEL=INFO
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="ARBOR_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Dispatch
    isolate_failures: bool = True

    # DebugTree output
    max_log_length: int = Field(default=4000, gt=0)
    max_tag_length: int | None = Field(default=None, gt=0)
    logger_prefix: str = "forest"

    # ConsoleTree
    console_min_level: str = "VERBOSE"

    # Arbor's own diagnostics (stdlib logging)
    log_level: str = "WARNING"

    @field_validator("console_min_level")
    @classmethod
    def _check_level_name(cls, value: str) -> str:
        coerce_level(value)
        return value.upper()

    @field_validator("log_level")
    @classmethod
    def _check_stdlib_level(cls, value: str) -> str:
        name = value.upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"Unknown logging level: {value!r}")
        return name


def configure_logging(config: ArborSettings | None = None) -> logging.Logger:
    """Apply ``log_level`` to the ``arbor`` diagnostics logger and return it."""
    config = config or settings
    pkg_logger = logging.getLogger("arbor")
    pkg_logger.setLevel(config.log_level)
    return pkg_logger


# Module-level singleton — import as `from arbor.config import settings`
settings = ArborSettings()
