"""Logging setup for the stepmatch CLI.

Only the ``stepmatch`` logger hierarchy is configured, so embedding the
library never changes an application's root logging. Search modules log
candidate and match counts at debug level.
"""

import logging
import sys
from typing import TextIO

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "stepmatch"


def log_level(verbosity: int = 0, quiet: bool = False) -> int:
    """Map -v/-q flags to a level; quiet wins over any verbosity."""
    if quiet:
        return logging.WARNING
    if verbosity >= 1:
        return logging.DEBUG
    return logging.INFO


def configure_logging(
    verbosity: int = 0,
    quiet: bool = False,
    no_color: bool = False,
    stream: TextIO | None = None,
) -> Console:
    """Send stepmatch log records to stderr through rich.

    Args:
        verbosity: Number of -v flags; -vv also shows times and source paths
        quiet: Only log warnings and errors
        no_color: Disable colored output
        stream: Log destination (defaults to stderr)

    Returns:
        Console for command results on stdout, sharing the color setting
    """
    handler = RichHandler(
        console=Console(file=stream or sys.stderr, no_color=no_color),
        show_time=verbosity >= 2,
        show_path=verbosity >= 2,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers[:] = [handler]
    logger.setLevel(log_level(verbosity, quiet))
    logger.propagate = False

    return Console(no_color=no_color)
