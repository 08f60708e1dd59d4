"""Logging setup.

Why here:
- Modules only call `logging.getLogger(__name__)`; the handler is installed
  once by the entry point.
- Logs go to stderr through Rich so they never mix with the converted value
  on stdout (pipelines read stdout).
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_NAME = "temp-convert"


def configure_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """Attach a single `RichHandler` to the root logger and set *level*.

    Calling it again only updates the level.
    """

    root = logging.getLogger()
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    if not any(getattr(h, "name", None) == _HANDLER_NAME for h in root.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=False,
        )
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(handler)

    root.setLevel(level)
    return root
