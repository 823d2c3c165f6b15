"""Logger configuration for command-line use.

The library modules only create loggers; handlers are installed here and
only when the CLI starts.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "fileutil"


def setup_logging(verbose: bool = False, console: Console | None = None) -> logging.Logger:
    """Set up the package logger with a Rich handler.

    Args:
        verbose: Log at DEBUG instead of WARNING.
        console: Console to log to. Defaults to a stderr console.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    level = logging.DEBUG if verbose else logging.WARNING
    logger.setLevel(level)

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
    )
    handler.setLevel(level)
    logger.addHandler(handler)
    return logger
