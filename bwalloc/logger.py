"""Logging helpers.

Library modules only obtain named loggers. Handlers are installed by
configure_logging(), which the command-line entry point calls.
"""

import logging
import sys
from typing import Optional

from .config import get_config


_LOGGER_INITIALIZED = False


def configure_logging(level: Optional[str] = None, force: bool = False) -> None:
    """Configure the root logger once.

    Args:
        level: Level name; falls back to the configured log_level
        force: Reconfigure even if logging was already set up
    """
    global _LOGGER_INITIALIZED
    if _LOGGER_INITIALIZED and not force:
        return

    resolved_level = (level or get_config().log_level).upper()

    logging.basicConfig(
        level=resolved_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        stream=sys.stderr,
        force=force,
    )
    _LOGGER_INITIALIZED = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for the requested module without touching handlers."""
    return logging.getLogger(name)
