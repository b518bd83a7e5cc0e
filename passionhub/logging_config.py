"""Operational log channel for Passion Hub."""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "passionhub"


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Configure the ``passionhub`` logger.

    Records go to stderr so they never interleave with command output.
    Calling again only adjusts the level.

    Args:
        level: Log level name, e.g. "INFO". Unknown names fall back to WARNING.

    Returns:
        The configured package logger.
    """
    resolved = getattr(logging, str(level).upper(), None)
    if not isinstance(resolved, int):
        resolved = logging.WARNING

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(resolved)

    if logger.handlers:
        return logger

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)

    return logger
