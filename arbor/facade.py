"""Arbor — the static, process-wide logging facade.

``Arbor`` cannot be instantiated; every method is static and forwards to
one process-wide ``Forest`` created lazily from ``ArborSettings``.  Code
that prefers explicit wiring (tests in particular) can construct its own
``Forest`` and inject it instead.
"""

from __future__ import annotations

import threading
from typing import Any

from arbor.config import configure_logging, settings
from arbor.errors import ConstructionMisuseError
from arbor.forest import Forest
from arbor.models.levels import Level
from arbor.trees.base import Message, Tree

_default_forest: Forest | None = None
_default_lock = threading.Lock()


def default_forest() -> Forest:
    """Return the process-wide forest, creating it on first use."""
    global _default_forest
    if _default_forest is None:
        with _default_lock:
            if _default_forest is None:
                configure_logging(settings)
                _default_forest = Forest(config=settings)
    return _default_forest


class Arbor:
    """Logging for lazy people.

    >>> from arbor.trees import DebugTree
    >>> Arbor.plant(DebugTree())          # doctest: +SKIP
    >>> Arbor.tag("Boot").info("ready")   # doctest: +SKIP
    """

    def __new__(cls, *args: Any, **kwargs: Any) -> Arbor:
        raise ConstructionMisuseError("Arbor is a static facade; do not instantiate it.")

    # -- Logging ------------------------------------------------------------

    @staticmethod
    def verbose(message: Message = None, *args: Any) -> None:
        default_forest().verbose(message, *args)

    @staticmethod
    def debug(message: Message = None, *args: Any) -> None:
        default_forest().debug(message, *args)

    @staticmethod
    def info(message: Message = None, *args: Any) -> None:
        default_forest().info(message, *args)

    @staticmethod
    def warn(message: Message = None, *args: Any) -> None:
        default_forest().warn(message, *args)

    @staticmethod
    def error(message: Message = None, *args: Any) -> None:
        default_forest().error(message, *args)

    @staticmethod
    def wtf(message: Message = None, *args: Any) -> None:
        default_forest().wtf(message, *args)

    @staticmethod
    def log(level: Level | int | str, message: Message = None, *args: Any) -> None:
        default_forest().log(level, message, *args)

    v = verbose
    d = debug
    i = info
    w = warn
    warning = warn
    e = error

    # -- Tagging and registry -----------------------------------------------

    @staticmethod
    def tag(label: str) -> Forest:
        """Set a one-time tag for the next call; returns the forest to chain on."""
        return default_forest().tag(label)

    @staticmethod
    def plant(*trees: Tree) -> None:
        default_forest().plant(*trees)

    @staticmethod
    def uproot(tree: Tree) -> None:
        default_forest().uproot(tree)

    @staticmethod
    def uproot_all() -> None:
        default_forest().uproot_all()

    @staticmethod
    def forest() -> tuple[Tree, ...]:
        return default_forest().forest()

    @staticmethod
    def tree_count() -> int:
        return default_forest().tree_count

    @staticmethod
    def as_tree() -> Tree:
        return default_forest()
