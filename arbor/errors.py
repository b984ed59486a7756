"""Arbor error taxonomy.

Every error raised by the facade derives from ``ArborError`` and also from
the closest built-in exception, so callers that only know about
``ValueError`` or ``RuntimeError`` still catch them.

Usage errors (bad ``plant``/``uproot`` calls, instantiating the static
facade, a tree that never implemented ``emit``) fail fast and are raised
synchronously to the immediate caller.  There is no background error
channel.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from arbor.trees import Tree


class ArborError(Exception):
    """Base class for all Arbor errors."""


class InvalidArgumentError(ArborError, ValueError):
    """Raised when ``None``, a non-tree, or the forest itself is planted."""


class InvalidStateError(ArborError, RuntimeError):
    """Raised when uprooting a tree that is not currently planted."""


class ConstructionMisuseError(ArborError, TypeError):
    """Raised when the static-only ``Arbor`` facade is instantiated."""


class MissingOverrideError(ArborError, NotImplementedError):
    """Raised when a tree's ``emit`` primitive was never overridden.

    This is a programming error, not a recoverable condition: the tree type
    provides no actual output behaviour.
    """


class TreeDispatchError(ArborError, RuntimeError):
    """Raised after a dispatch in which one or more trees failed.

    Every planted tree still received the call; the failures are collected
    in ``failures`` in planting order as ``(tree, exception)`` pairs.
    """

    def __init__(self, failures: list[tuple[Tree, BaseException]]) -> None:
        self.failures = list(failures)
        super().__init__(
            f"{len(self.failures)} tree(s) failed during dispatch: "
            + "; ".join(f"{tree!r}: {exc!r}" for tree, exc in self.failures)
        )
