"""Logging with rich console output.

Usage:
    from bubbles.logger import get_logger

    logger = get_logger(__name__)
    logger.info("Committed highlight")
"""

import logging
import os
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

console = Console(stderr=True)


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """Get a logger that writes through rich.

    Args:
        name: Logger name (typically __name__ of the module)
        level: Logging level. If None, uses LOG_LEVEL or defaults to INFO.

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Avoid adding multiple handlers if logger already configured
    if logger.handlers:
        return logger

    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO")
    level = level.upper()
    # Unknown names from the environment must not break imports
    if not isinstance(logging.getLevelName(level), int):
        level = "INFO"
    logger.setLevel(level)

    rich_handler = RichHandler(
        console=console,
        show_time=False,
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    rich_handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    logger.addHandler(rich_handler)

    # Keep propagation so pytest caplog can capture records
    logger.propagate = True

    return logger


def set_level(level: str) -> None:
    """Change the level of every bubbles logger created so far."""
    level = level.upper()
    for name, obj in logging.Logger.manager.loggerDict.items():
        if name.startswith("bubbles") and isinstance(obj, logging.Logger):
            obj.setLevel(level)
