"""Logging configuration for the CLI.

Library modules only create module-level loggers; handlers are installed
here, once, by the CLI entry point.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: int = logging.WARNING, console: Console | None = None) -> None:
    """Configure the root logger to write through Rich to stderr.

    A Rich handler installed by an earlier call is replaced, so repeated
    calls (e.g. tests invoking the CLI several times) do not duplicate
    output. Other handlers are left alone.

    Args:
        level: Root log level.
        console: Console to log to. Defaults to a new stderr console.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in list(root_logger.handlers):
        if isinstance(handler, RichHandler):
            root_logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(handler)
