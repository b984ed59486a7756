"""Arbor: an in-process logging facade with pluggable trees.

Log calls are formatted once and fanned out to every planted tree:
  - Static facade (``Arbor`` / module-level functions) over a default forest
  - Injectable ``Forest`` instances for explicit wiring and tests
  - Copy-on-write registry: dispatch never blocks on plant/uproot
  - Thread-local, one-shot tags via ``tag(label)``
  - DebugTree (stdlib logging), ConsoleTree (Rich), MemoryTree
  - Env-driven configuration (ARBOR_*)
"""

__version__ = "1.0.0"
__description__ = "In-process logging facade with pluggable trees"

from arbor.errors import (
    ArborError,
    ConstructionMisuseError,
    InvalidArgumentError,
    InvalidStateError,
    MissingOverrideError,
    TreeDispatchError,
)
from arbor.facade import Arbor, default_forest
from arbor.forest import Forest
from arbor.models.levels import Level
from arbor.trees import ConsoleTree, DebugTree, MemoryTree, Tree

verbose = v = Arbor.verbose
debug = d = Arbor.debug
info = i = Arbor.info
warn = w = warning = Arbor.warn
error = e = Arbor.error
wtf = Arbor.wtf
log = Arbor.log
tag = Arbor.tag
plant = Arbor.plant
uproot = Arbor.uproot
uproot_all = Arbor.uproot_all
tree_count = Arbor.tree_count
as_tree = Arbor.as_tree

__all__ = [
    "Arbor",
    "ArborError",
    "ConsoleTree",
    "ConstructionMisuseError",
    "DebugTree",
    "Forest",
    "InvalidArgumentError",
    "InvalidStateError",
    "Level",
    "MemoryTree",
    "MissingOverrideError",
    "Tree",
    "TreeDispatchError",
    "__version__",
    "as_tree",
    "d",
    "debug",
    "default_forest",
    "e",
    "error",
    "i",
    "info",
    "log",
    "plant",
    "tag",
    "tree_count",
    "uproot",
    "uproot_all",
    "v",
    "verbose",
    "w",
    "warn",
    "warning",
    "wtf",
]
