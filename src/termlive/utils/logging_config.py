"""
Centralized logging configuration.

Widgets own stdout while they animate, so log records go to stderr through a
RichHandler and never land inside a live region.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "termlive"


class NullHandler(logging.Handler):
    """Handler that discards all log records."""

    def emit(self, record):
        pass


def setup_logging(verbose: bool = False) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        verbose: If True, emit lifecycle debug records. Otherwise only warnings.

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=verbose,
        markup=False,
        rich_tracebacks=True,
    )
    logger.handlers = [handler]
    return logger


def silence_logging() -> None:
    """Drop every record from the package logger."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(logging.CRITICAL)
    logger.propagate = False
    logger.handlers = [NullHandler()]
