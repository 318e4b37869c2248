"""Logging setup for applications embedding hashetag."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "hashetag"


def setup_logging(verbosity: int) -> logging.Logger:
    """Route hashetag's log records to stderr through rich.

    Only the ``hashetag`` logger is configured; the root logger and the
    host application's handlers are left alone. Calling this again replaces
    the handler installed by the previous call.

    Args:
        verbosity: 0=WARNING, 1=INFO, 2+=DEBUG

    Returns:
        The configured ``hashetag`` logger.
    """
    level = {0: logging.WARNING, 1: logging.INFO, 2: logging.DEBUG}.get(verbosity, logging.DEBUG)
    logger = logging.getLogger(LOGGER_NAME)
    for handler in [h for h in logger.handlers if isinstance(h, RichHandler)]:
        logger.removeHandler(handler)

    handler = RichHandler(console=Console(stderr=True), show_time=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
