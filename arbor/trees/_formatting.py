"""Shared formatting helpers for Arbor trees.

Message substitution, traceback rendering and length-limited chunking used
by the base tree, the forest and the debug/console trees.
"""

from __future__ import annotations

import re
import traceback
from collections.abc import Iterator, Sequence
from typing import Any

_LAMBDA_OR_LOCALS = re.compile(r"(\.<locals>)?\.?<lambda>$|\.<locals>.*$")


def format_message(message: str, args: Sequence[Any]) -> str:
    """Substitute *args* into *message* with ``%``-style formatting.

    When *args* is empty the template is returned unchanged, so literal
    ``%`` characters in plain messages are never interpreted.

    Examples
    --------
    >>> format_message("value=%d", (5,))
    'value=5'
    >>> format_message("100% done %s", ())
    '100% done %s'
    """
    if not args:
        return message
    return message % tuple(args)


def stack_trace_string(error: BaseException) -> str:
    """Render *error* with its full traceback and chained causes."""
    return "".join(
        traceback.format_exception(type(error), error, error.__traceback__)
    ).rstrip("\n")


def chunk_message(message: str, max_length: int) -> Iterator[str]:
    """Split *message* into pieces no longer than *max_length*.

    Messages that already fit are yielded whole.  Longer ones are split at
    newlines first (the newline itself is dropped), and any line that is
    still too long is cut into fixed-size pieces.

    Examples
    --------
    >>> list(chunk_message("ab\\ncdef", 3))
    ['ab', 'cde', 'f']
    """
    if max_length <= 0:
        raise ValueError(f"max_length must be positive, got {max_length}")
    if len(message) < max_length:
        yield message
        return

    i = 0
    length = len(message)
    while i < length:
        newline = message.find("\n", i)
        if newline == -1:
            newline = length
        while True:
            end = min(newline, i + max_length)
            yield message[i:end]
            i = end
            if i >= newline:
                break
        i += 1


def clean_tag(name: str, max_length: int | None = None) -> str:
    """Strip ``<locals>``/``<lambda>`` qualifiers and optionally truncate."""
    tag = _LAMBDA_OR_LOCALS.sub("", name) or name
    if max_length is not None and len(tag) > max_length:
        tag = tag[:max_length]
    return tag
