"""Captured log records."""

from __future__ import annotations

import threading
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field

from arbor.models.levels import level_name


class LogRecord(BaseModel):
    """Immutable record of one call a tree emitted.

    ``message`` is the final, formatted text (including any appended
    traceback).  ``error`` is the original exception object, if any.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    level: int
    tag: str | None = None
    message: str
    error: BaseException | None = None
    thread_name: str = Field(
        default_factory=lambda: threading.current_thread().name
    )
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )

    @property
    def level_name(self) -> str:
        return level_name(self.level)
