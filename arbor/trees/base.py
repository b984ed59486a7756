"""Tree base class for Arbor log routing.

A tree is a pluggable log destination.  Concrete trees override a single
primitive, ``emit(level, tag, message, error)``; every per-level convenience
method funnels into it after consulting ``is_loggable``.

Each tree owns its own thread-local, one-shot tag slot.  ``tag(label)``
fills the slot for the calling thread and the next call on that thread
consumes it, whether or not the call is then filtered out.
"""

from __future__ import annotations

import threading
from collections.abc import Sequence
from typing import Any

from arbor.errors import MissingOverrideError
from arbor.models.levels import Level, coerce_level
from arbor.trees._formatting import format_message, stack_trace_string

Message = str | BaseException | None


def split_call(
    first: Message, args: Sequence[Any]
) -> tuple[BaseException | None, str | None, tuple[Any, ...]]:
    """Decode the three accepted call shapes into ``(error, message, args)``.

    * ``(message, *args)``
    * ``(error, message, *args)``
    * ``(error,)``
    """
    if isinstance(first, BaseException):
        if args:
            return first, args[0], tuple(args[1:])
        return first, None, ()
    return None, first, tuple(args)


class Tree:
    """Base class every Arbor tree extends.

    Subclasses must override ``emit``.  They may override ``is_loggable``
    to filter by tag or level, ``format_message`` to change substitution,
    and ``resolve_tag`` to supply a fallback when no explicit tag was set.

    Examples
    --------
    >>> class PrintTree(Tree):
    ...     def emit(self, level, tag, message, error):
    ...         print(f"{tag}: {message}")
    >>> PrintTree().tag("Boot").info("ready in %dms", 12)
    Boot: ready in 12ms
    """

    # ------------------------------------------------------------------
    # One-shot tag
    # ------------------------------------------------------------------

    def _tag_slot(self) -> threading.local:
        slot = self.__dict__.get("_explicit_tag")
        if slot is None:
            slot = self.__dict__.setdefault("_explicit_tag", threading.local())
        return slot

    def tag(self, label: str) -> Tree:
        """Set a one-time tag for the next logging call on this thread."""
        self._tag_slot().value = label
        return self

    def resolve_tag(self) -> str | None:
        """Return and clear the explicit tag set on the calling thread."""
        slot = self._tag_slot()
        label = getattr(slot, "value", None)
        if label is not None:
            slot.value = None
        return label

    def clear_tag(self) -> None:
        """Discard the explicit tag set on the calling thread, if any."""
        self._tag_slot().value = None

    # ------------------------------------------------------------------
    # Per-level entry points
    # ------------------------------------------------------------------

    def verbose(self, message: Message = None, *args: Any) -> None:
        """Log at VERBOSE a message, an exception and a message, or an exception."""
        self._log_call(Level.VERBOSE, message, args)

    def debug(self, message: Message = None, *args: Any) -> None:
        """Log at DEBUG a message, an exception and a message, or an exception."""
        self._log_call(Level.DEBUG, message, args)

    def info(self, message: Message = None, *args: Any) -> None:
        """Log at INFO a message, an exception and a message, or an exception."""
        self._log_call(Level.INFO, message, args)

    def warn(self, message: Message = None, *args: Any) -> None:
        """Log at WARN a message, an exception and a message, or an exception."""
        self._log_call(Level.WARN, message, args)

    def error(self, message: Message = None, *args: Any) -> None:
        """Log at ERROR a message, an exception and a message, or an exception."""
        self._log_call(Level.ERROR, message, args)

    def wtf(self, message: Message = None, *args: Any) -> None:
        """Log at ASSERT a message, an exception and a message, or an exception."""
        self._log_call(Level.ASSERT, message, args)

    def log(self, level: Level | int | str, message: Message = None, *args: Any) -> None:
        """Log at an arbitrary, possibly custom, *level*."""
        self._log_call(coerce_level(level), message, args)

    v = verbose
    d = debug
    i = info
    w = warn
    warning = warn
    e = error

    def _log_call(self, level: Level | int, first: Message, args: Sequence[Any]) -> None:
        error, message, rest = split_call(first, args)
        self.prepare_log(level, error, message, rest)

    # ------------------------------------------------------------------
    # Processing
    # ------------------------------------------------------------------

    def receive(
        self,
        level: Level | int,
        message: str | None,
        error: BaseException | None = None,
    ) -> None:
        """Accept an already-formatted message from a forest.

        *message* is final text: ``None`` means the call carried no message,
        while any string, even an empty one, is emitted as given.
        """
        self.prepare_log(level, error, message, (), formatted=True)

    def prepare_log(
        self,
        level: Level | int,
        error: BaseException | None,
        message: str | None,
        args: Sequence[Any],
        *,
        formatted: bool = False,
    ) -> None:
        # Consume the tag even when filtered so the next call is not tagged.
        tag = self.resolve_tag()
        if not self.is_loggable(tag, level):
            return

        if message is None or (not formatted and not message):
            if error is None:
                return
            message = stack_trace_string(error)
        else:
            if args:
                message = self.format_message(message, args)
            if error is not None:
                message = f"{message}\n{stack_trace_string(error)}"

        self.emit(level, tag, message, error)

    def is_loggable(self, tag: str | None, level: Level | int) -> bool:
        """Return whether a message at *level* with *tag* should be logged."""
        return True

    def format_message(self, message: str, args: Sequence[Any]) -> str:
        """Format *message* with *args*; only called when *args* is non-empty.

        Consulted only when the tree itself is called.  A forest formats once
        for all of its trees and hands them the result through ``receive``.
        """
        return format_message(message, args)

    def emit(
        self,
        level: Level | int,
        tag: str | None,
        message: str,
        error: BaseException | None,
    ) -> None:
        """Write a fully prepared message to this tree's destination.

        Parameters
        ----------
        level:
            ``Level`` member or custom integer level.
        tag:
            Explicit or inferred tag; may be ``None``.
        message:
            Formatted message, with the error's traceback appended if any.
        error:
            The accompanying exception, or ``None``.
        """
        raise MissingOverrideError(
            f"{type(self).__name__} does not override emit()"
        )
