"""Logging setup for the command line."""

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(verbose: bool = False) -> None:
    """Send log records to stderr through rich; DEBUG when ``verbose``."""
    level = logging.DEBUG if verbose else logging.WARNING

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    root_logger = logging.getLogger("jsgettext")
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
