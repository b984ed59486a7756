"""Forest — the tree registry and the dispatcher that fans calls out to it.

Registry mutations (``plant``, ``uproot``, ``uproot_all``) serialize on a
single lock that is held only while the tree list is copied and a new
immutable snapshot is published.  Dispatch never takes that lock: it reads
the most recently published tuple, so a concurrent ``plant`` can neither
block a logging call nor hand it a half-mutated list.

Every dispatched call is formatted exactly once and then handed, already
formatted, to every planted tree in planting order.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence
from typing import Any

from arbor.config import ArborSettings
from arbor.config import settings as default_settings
from arbor.errors import (
    InvalidArgumentError,
    InvalidStateError,
    MissingOverrideError,
    TreeDispatchError,
)
from arbor.models.levels import Level
from arbor.trees._formatting import format_message
from arbor.trees.base import Message, Tree, split_call

logger = logging.getLogger(__name__)


class Forest(Tree):
    """A registry of planted trees that is itself a tree.

    Calling a level method on the forest formats the message once and
    forwards it to every planted tree.  Because the forest is a ``Tree`` it
    can be injected anywhere a single tree is expected (``as_tree()``), and
    even planted into *another* forest.

    Parameters
    ----------
    isolate_failures:
        When ``True`` (default from ``ArborSettings``), a tree that raises
        does not stop delivery to the trees after it; the failures are
        collected and raised together as ``TreeDispatchError`` once every
        tree has been called.  When ``False`` the first exception
        propagates immediately.

    Usage
    -----
    >>> from arbor.trees import MemoryTree
    >>> forest = Forest()
    >>> memory = MemoryTree()
    >>> forest.plant(memory)
    >>> forest.tag("Net").info("value=%d", 5)
    >>> memory.records[0].tag, memory.records[0].message
    ('Net', 'value=5')
    """

    def __init__(
        self,
        *,
        isolate_failures: bool | None = None,
        config: ArborSettings | None = None,
    ) -> None:
        config = config or default_settings
        self.isolate_failures = (
            config.isolate_failures if isolate_failures is None else isolate_failures
        )
        # Both guarded by _lock; _snapshot is replaced, never mutated.
        self._lock = threading.Lock()
        self._trees: list[Tree] = []
        self._snapshot: tuple[Tree, ...] = ()

    def __repr__(self) -> str:
        return f"<Forest trees={self.tree_count}>"

    # ------------------------------------------------------------------
    # Registry
    # ------------------------------------------------------------------

    def _validate(self, tree: Any) -> None:
        if tree is None:
            raise InvalidArgumentError("trees contained None")
        if tree is self:
            raise InvalidArgumentError("Cannot plant a forest into itself.")
        if not isinstance(tree, Tree):
            raise InvalidArgumentError(
                f"Cannot plant {tree!r}: not an arbor Tree"
            )

    def plant(self, *trees: Tree) -> None:
        """Add one or more trees, atomically.

        Every entry is validated before any is added, so either all of
        *trees* become visible in a single new snapshot or none do.
        Planting the same tree twice is allowed and doubles its output.

        Raises
        ------
        InvalidArgumentError
            If an entry is ``None``, is this forest, or is not a ``Tree``.
        """
        for tree in trees:
            self._validate(tree)
        if not trees:
            return
        with self._lock:
            self._trees.extend(trees)
            self._snapshot = tuple(self._trees)
        logger.debug("Planted %d tree(s): %s", len(trees), trees)

    def uproot(self, tree: Tree) -> None:
        """Remove the first planted entry that is *tree*.

        Raises
        ------
        InvalidStateError
            If *tree* is not currently planted.  The registry is unchanged.
        """
        with self._lock:
            for index, planted in enumerate(self._trees):
                if planted is tree:
                    del self._trees[index]
                    self._snapshot = tuple(self._trees)
                    break
            else:
                raise InvalidStateError(
                    f"Cannot uproot tree which is not planted: {tree!r}"
                )
        logger.debug("Uprooted tree: %r", tree)

    def uproot_all(self) -> None:
        """Remove every planted tree."""
        with self._lock:
            self._trees.clear()
            self._snapshot = ()
        logger.debug("Uprooted all trees")

    def forest(self) -> tuple[Tree, ...]:
        """Return an immutable, order-preserving copy of the planted trees."""
        return self._snapshot

    @property
    def tree_count(self) -> int:
        return len(self._snapshot)

    def as_tree(self) -> Tree:
        """Return this forest as a plain ``Tree`` for dependency injection."""
        return self

    # ------------------------------------------------------------------
    # Tagging
    # ------------------------------------------------------------------

    def tag(self, label: str) -> Forest:
        """Set a one-time tag for the next call on this thread.

        The label is stored in each currently planted tree's own slot, so
        every one of them sees it on the next call.  Trees planted after
        this call do not receive it.
        """
        for tree in self._snapshot:
            tree.tag(label)
        return self

    def clear_tag(self) -> None:
        for tree in self._snapshot:
            tree.clear_tag()

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _log_call(self, level: Level | int, first: Message, args: Sequence[Any]) -> None:
        trees = self._snapshot
        if not trees:
            return
        error, message, rest = split_call(first, args)
        if not message:
            message = None
        elif rest:
            try:
                message = format_message(message, rest)
            except Exception:
                # The call never reaches the trees, so drop the tag it carried.
                for tree in trees:
                    tree.clear_tag()
                raise
        self._fan_out(trees, level, message, error)

    def receive(
        self,
        level: Level | int,
        message: str | None,
        error: BaseException | None = None,
    ) -> None:
        # Planted inside another forest.  An outer tag() already reached
        # this forest's trees through Forest.tag.
        self._fan_out(self._snapshot, level, message, error)

    def _fan_out(
        self,
        trees: tuple[Tree, ...],
        level: Level | int,
        message: str | None,
        error: BaseException | None,
    ) -> None:
        if not self.isolate_failures:
            for tree in trees:
                tree.receive(level, message, error)
            return

        failures: list[tuple[Tree, BaseException]] = []
        for tree in trees:
            try:
                tree.receive(level, message, error)
            except Exception as exc:  # noqa: BLE001
                logger.error("Tree %r failed during dispatch: %s", tree, exc)
                failures.append((tree, exc))

        if failures:
            if len(failures) < len(trees):
                logger.warning(
                    "%d/%d trees succeeded, %d failed",
                    len(trees) - len(failures),
                    len(trees),
                    len(failures),
                )
            raise TreeDispatchError(failures)

    def emit(
        self,
        level: Level | int,
        tag: str | None,
        message: str,
        error: BaseException | None,
    ) -> None:
        raise MissingOverrideError("Forest dispatches to its trees; it has no emit()")
