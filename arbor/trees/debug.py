"""DebugTree — infers tags from the call site and writes to stdlib logging.

When no explicit tag was set, the tag is taken from the first stack frame
outside the ``arbor`` package: the class name of ``self`` (or ``cls``) in
that frame, else the last component of the frame's module name.

Messages longer than ``max_log_length`` are split into chunks, newline
boundaries first, and each chunk is written separately.
"""

from __future__ import annotations

import inspect
import logging
from types import FrameType

from arbor.config import ArborSettings
from arbor.config import settings as default_settings
from arbor.models.levels import Level, to_stdlib_level
from arbor.trees._formatting import chunk_message, clean_tag
from arbor.trees.base import Tree

_IGNORED_PACKAGES: tuple[str, ...] = ("arbor",)


class DebugTree(Tree):
    """A tree for development builds.

    Parameters
    ----------
    max_log_length:
        Longest chunk written in one call.  Defaults to
        ``ArborSettings.max_log_length``.
    max_tag_length:
        Inferred tags are truncated to this length when set; explicit tags
        are used as given.
    logger_prefix:
        Namespace of the stdlib loggers written to; a tagged chunk goes to
        ``logging.getLogger(f"{logger_prefix}.{tag}")``.
    ignored_modules:
        Extra module names (or package prefixes) skipped during tag
        inference, for wrappers that call Arbor on behalf of their caller.
    """

    def __init__(
        self,
        *,
        max_log_length: int | None = None,
        max_tag_length: int | None = None,
        logger_prefix: str | None = None,
        ignored_modules: tuple[str, ...] = (),
        config: ArborSettings | None = None,
    ) -> None:
        config = config or default_settings
        self.max_log_length = max_log_length or config.max_log_length
        self.max_tag_length = max_tag_length or config.max_tag_length
        self.logger_prefix = logger_prefix or config.logger_prefix
        self._ignored = _IGNORED_PACKAGES + tuple(ignored_modules)

    # ------------------------------------------------------------------
    # Tag inference
    # ------------------------------------------------------------------

    def resolve_tag(self) -> str | None:
        explicit = super().resolve_tag()
        if explicit is not None:
            return explicit
        return self._infer_tag()

    def _is_ignored(self, module: str) -> bool:
        return any(
            module == name or module.startswith(name + ".")
            for name in self._ignored
        )

    def _infer_tag(self) -> str | None:
        frame = inspect.currentframe()
        try:
            while frame is not None:
                module = frame.f_globals.get("__name__", "")
                if not self._is_ignored(module):
                    return self.create_stack_element_tag(frame)
                frame = frame.f_back
            return None
        finally:
            del frame

    def create_stack_element_tag(self, frame: FrameType) -> str | None:
        """Extract the tag to use for a call made from *frame*.

        Not called when an explicit tag was set with ``tag()``.
        """
        owner = frame.f_locals.get("self")
        if owner is not None:
            name = type(owner).__name__
        else:
            cls = frame.f_locals.get("cls")
            if isinstance(cls, type):
                name = cls.__name__
            else:
                name = frame.f_globals.get("__name__", "").rpartition(".")[2]
        if not name:
            return None
        return clean_tag(name, self.max_tag_length)

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def emit(
        self,
        level: Level | int,
        tag: str | None,
        message: str,
        error: BaseException | None,
    ) -> None:
        for chunk in chunk_message(message, self.max_log_length):
            self.write(level, tag, chunk)

    def write(self, level: Level | int, tag: str | None, chunk: str) -> None:
        """Write one chunk to the stdlib logger for *tag*."""
        name = f"{self.logger_prefix}.{tag}" if tag else self.logger_prefix
        logging.getLogger(name).log(to_stdlib_level(level), chunk)
