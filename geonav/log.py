"""Logging setup for command-line use.

Library modules only create loggers with ``logging.getLogger(__name__)``;
handlers are installed here, by the application entry point.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

CONSOLE = Console()


def setup_logging(level: int | str = logging.INFO, console: Console | None = None) -> None:
    """Route ``geonav`` log records through a rich handler.

    Args:
        level: Level for the ``geonav`` logger, as a number or name.
        console: Console to write to. Defaults to the shared module console so
            that log lines and live displays do not overwrite each other.
    """
    if isinstance(level, str):
        name = level
        level = logging.getLevelName(name.upper())
        if not isinstance(level, int):
            msg = f"unknown log level: {name}"
            raise ValueError(msg)

    handler = RichHandler(
        console=console or CONSOLE,
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    logger = logging.getLogger("geonav")
    for existing in list(logger.handlers):
        if isinstance(existing, RichHandler):
            logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
