"""Shared test fixtures for Arbor."""

from __future__ import annotations

from collections.abc import Callable, Iterator

import pytest

from arbor.facade import Arbor
from arbor.forest import Forest
from arbor.models.levels import Level
from arbor.trees import MemoryTree, Tree


class RecordingTree(Tree):
    """A tree that records every ``emit`` call verbatim.

    When *journal* is given, the tree's name is appended to it on every
    emit, so tests can assert the order trees were called in.
    """

    def __init__(self, name: str = "recording", journal: list[str] | None = None) -> None:
        self.name = name
        self.journal = journal
        self.calls: list[tuple[int, str | None, str, BaseException | None]] = []

    def __repr__(self) -> str:
        return f"<RecordingTree {self.name}>"

    def emit(
        self,
        level: Level | int,
        tag: str | None,
        message: str,
        error: BaseException | None,
    ) -> None:
        self.calls.append((level, tag, message, error))
        if self.journal is not None:
            self.journal.append(self.name)


@pytest.fixture
def forest() -> Forest:
    """Provide a fresh, failure-isolating Forest."""
    return Forest(isolate_failures=True)


@pytest.fixture
def memory_tree() -> MemoryTree:
    """Provide an empty MemoryTree."""
    return MemoryTree()


@pytest.fixture
def make_recording_tree() -> Callable[..., RecordingTree]:
    """Factory fixture: build a RecordingTree."""

    def _factory(name: str = "recording", journal: list[str] | None = None) -> RecordingTree:
        return RecordingTree(name, journal)

    return _factory


@pytest.fixture
def clean_default_forest() -> Iterator[None]:
    """Leave the process-wide forest empty before and after the test."""
    Arbor.uproot_all()
    yield
    Arbor.uproot_all()
