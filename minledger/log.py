"""Logging setup for the minledger CLI."""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "minledger"


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """Send minledger log records to stderr through rich.

    Safe to call more than once; the previous handler is replaced.

    Args:
        level: Log level name (e.g., "DEBUG", "WARNING").

    Returns:
        The package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    logger.handlers.clear()

    handler = RichHandler(console=Console(stderr=True), show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)

    return logger
