# mutant_dna/logging/logger.py
"""
Logging setup for mutant-dna.

Every module gets its logger through get_logger(__name__) so that the
whole package hangs off the "mutant_dna" logger and can be configured
in one place.

Usage:
    from mutant_dna.logging.logger import get_logger
    from mutant_dna.logging.tags import STORAGE

    logger = get_logger(__name__)
    logger.info(f"{STORAGE} Store opened")
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "mutant_dna"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def configure_logging(level: str = "INFO", format_string: Optional[str] = None) -> None:
    """
    Configure the package root logger.

    Safe to call more than once; later calls only change the level.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR)
        format_string: Custom format string (uses DEFAULT_FORMAT if None)
    """
    global _configured

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    if _configured:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root.addHandler(handler)
    root.propagate = False
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """
    Get logger for a module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger", "ROOT_LOGGER_NAME"]
