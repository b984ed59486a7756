"""Arbor trees — the pluggable log destinations a forest dispatches to.

All trees extend ``Tree`` and override one primitive,
``emit(level, tag, message, error)``.  The forest calls ``receive`` on
every planted tree for every dispatched call.
"""

from arbor.trees.base import Message, Tree, split_call
from arbor.trees.console import ConsoleTree
from arbor.trees.debug import DebugTree
from arbor.trees.memory import MemoryTree

__all__ = [
    "ConsoleTree",
    "DebugTree",
    "MemoryTree",
    "Message",
    "Tree",
    "split_call",
]
