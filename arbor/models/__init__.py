"""Arbor data models — severity levels and captured records."""

from arbor.models.levels import (
    Level,
    coerce_level,
    level_letter,
    level_name,
    to_stdlib_level,
)
from arbor.models.records import LogRecord

__all__ = [
    # levels
    "Level",
    "coerce_level",
    "level_letter",
    "level_name",
    "to_stdlib_level",
    # records
    "LogRecord",
]
