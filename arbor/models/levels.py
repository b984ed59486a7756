"""Severity levels.

The six standard priorities share their numeric values with Android's
``android.util.Log`` constants.  Any other ``int`` is accepted as a custom
level wherever a ``Level`` is.
"""

from __future__ import annotations

import logging
from enum import IntEnum

from arbor.errors import InvalidArgumentError


class Level(IntEnum):
    """Ordered log priorities."""

    VERBOSE = 2
    DEBUG = 3
    INFO = 4
    WARN = 5
    ERROR = 6
    ASSERT = 7


_NAME_ALIASES: dict[str, Level] = {
    "WARNING": Level.WARN,
    "CRITICAL": Level.ASSERT,
    "WTF": Level.ASSERT,
    "TRACE": Level.VERBOSE,
}

_LETTERS: dict[Level, str] = {
    Level.VERBOSE: "V",
    Level.DEBUG: "D",
    Level.INFO: "I",
    Level.WARN: "W",
    Level.ERROR: "E",
    Level.ASSERT: "A",
}

_STDLIB_LEVELS: dict[Level, int] = {
    Level.VERBOSE: 5,
    Level.DEBUG: logging.DEBUG,
    Level.INFO: logging.INFO,
    Level.WARN: logging.WARNING,
    Level.ERROR: logging.ERROR,
    Level.ASSERT: logging.CRITICAL,
}


def coerce_level(value: Level | int | str) -> Level | int:
    """Normalise *value* to a ``Level`` where possible.

    Standard numeric values and names (case-insensitive, with the usual
    stdlib aliases such as ``"warning"``) become ``Level`` members.  Any
    other ``int`` is returned unchanged as a custom level.

    Examples
    --------
    >>> coerce_level("warning")
    <Level.WARN: 5>
    >>> coerce_level(42)
    42
    """
    if isinstance(value, bool):
        raise InvalidArgumentError(f"Not a log level: {value!r}")
    if isinstance(value, Level):
        return value
    if isinstance(value, int):
        try:
            return Level(value)
        except ValueError:
            return value
    if isinstance(value, str):
        name = value.strip().upper()
        if name in Level.__members__:
            return Level[name]
        if name in _NAME_ALIASES:
            return _NAME_ALIASES[name]
        raise InvalidArgumentError(f"Unknown log level name: {value!r}")
    raise InvalidArgumentError(f"Not a log level: {value!r}")


def level_name(level: Level | int) -> str:
    """Return the standard name of *level*, or ``LEVEL_<n>`` for custom ones."""
    level = coerce_level(level)
    if isinstance(level, Level):
        return level.name
    return f"LEVEL_{level}"


def level_letter(level: Level | int) -> str:
    """Return the one-letter console label (``V D I W E A``)."""
    level = coerce_level(level)
    if isinstance(level, Level):
        return _LETTERS[level]
    return str(level)


def to_stdlib_level(level: Level | int) -> int:
    """Map *level* onto the stdlib ``logging`` numeric scale.

    Custom levels take the mapping of the nearest standard level at or
    below them; anything below ``VERBOSE`` maps to 1 so it is never
    ``NOTSET``.
    """
    level = coerce_level(level)
    if isinstance(level, Level):
        return _STDLIB_LEVELS[level]
    below = [std for std in Level if std <= level]
    if not below:
        return 1
    return _STDLIB_LEVELS[max(below)]
