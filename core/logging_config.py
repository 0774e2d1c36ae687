"""
Logging setup

Console output goes through a RichHandler bound to the shared console,
optionally mirrored to a plain-text log file.
"""

import logging
from pathlib import Path
from typing import Optional

from rich.logging import RichHandler

LOGGER_NAMES = ('core', 'bealert')


def setup_logging(level: str = 'WARNING', log_file: Optional[Path] = None,
                  console=None) -> logging.Logger:
    """
    Configure the package loggers.

    Args:
        level: Log level name for the console handler
        log_file: Optional path; receives DEBUG and up
        console: Optional rich Console to log through

    Returns:
        The 'bealert' logger
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING

    handlers = []

    rich_handler = RichHandler(console=console, show_path=False, rich_tracebacks=True)
    rich_handler.setLevel(numeric_level)
    rich_handler.setFormatter(logging.Formatter("%(message)s"))
    handlers.append(rich_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
        ))
        handlers.append(file_handler)

    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.setLevel(logging.DEBUG if log_file is not None else numeric_level)
        # Re-running setup (tests, interactive loop) must not stack handlers
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        for handler in handlers:
            logger.addHandler(handler)
        logger.propagate = False

    return logging.getLogger('bealert')
