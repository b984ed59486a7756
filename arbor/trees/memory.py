"""In-memory recording tree, for tests and diagnostics."""

from __future__ import annotations

import threading
from collections import deque

from arbor.models.levels import Level
from arbor.models.records import LogRecord
from arbor.trees.base import Tree


class MemoryTree(Tree):
    """Keeps every emitted call as a ``LogRecord``.

    Parameters
    ----------
    capacity:
        When set, only the most recent *capacity* records are kept.
    min_level:
        Calls below this level are dropped.
    """

    def __init__(self, capacity: int | None = None, *, min_level: Level | int = 0) -> None:
        if capacity is not None and capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.min_level = min_level
        self._lock = threading.Lock()
        self._records: deque[LogRecord] = deque(maxlen=capacity)

    def is_loggable(self, tag: str | None, level: Level | int) -> bool:
        return level >= self.min_level

    def emit(
        self,
        level: Level | int,
        tag: str | None,
        message: str,
        error: BaseException | None,
    ) -> None:
        record = LogRecord(level=int(level), tag=tag, message=message, error=error)
        with self._lock:
            self._records.append(record)

    @property
    def records(self) -> tuple[LogRecord, ...]:
        """Snapshot of the recorded calls, oldest first."""
        with self._lock:
            return tuple(self._records)

    def messages(self) -> list[str]:
        return [record.message for record in self.records]

    def clear(self) -> None:
        with self._lock:
            self._records.clear()

    def __len__(self) -> int:
        return len(self._records)
