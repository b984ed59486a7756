"""Rich console tree.

Prints each chunk as ``<letter>/<tag>: <message>`` with a colour per level.

Color scheme
------------
- dim        : VERBOSE
- cyan       : DEBUG
- green      : INFO
- yellow     : WARN
- bold red   : ERROR
- reverse red: ASSERT
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from arbor.config import ArborSettings
from arbor.config import settings as default_settings
from arbor.models.levels import Level, coerce_level, level_letter
from arbor.trees.debug import DebugTree

_LEVEL_STYLES: dict[Level, str] = {
    Level.VERBOSE: "dim",
    Level.DEBUG: "cyan",
    Level.INFO: "green",
    Level.WARN: "yellow",
    Level.ERROR: "bold red",
    Level.ASSERT: "reverse bold red",
}


class ConsoleTree(DebugTree):
    """DebugTree that renders to a Rich ``Console`` instead of stdlib logging.

    Parameters
    ----------
    console:
        Rich Console instance.  A new one writing to stderr is created if
        not provided.
    min_level:
        Calls below this level are dropped.  Defaults to
        ``ArborSettings.console_min_level``.
    """

    def __init__(
        self,
        console: Console | None = None,
        *,
        min_level: Level | int | str | None = None,
        config: ArborSettings | None = None,
        **kwargs,
    ) -> None:
        config = config or default_settings
        super().__init__(config=config, **kwargs)
        self.console = console or Console(stderr=True)
        self.min_level = coerce_level(
            min_level if min_level is not None else config.console_min_level
        )

    def is_loggable(self, tag: str | None, level: Level | int) -> bool:
        return level >= self.min_level

    def write(self, level: Level | int, tag: str | None, chunk: str) -> None:
        style = _LEVEL_STYLES.get(coerce_level(level), "")
        prefix = f"{level_letter(level)}/{tag or '-'}: "
        self.console.print(
            Text.assemble((prefix, style), chunk),
            highlight=False,
            soft_wrap=True,
        )
