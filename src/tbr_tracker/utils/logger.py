"""Centralized logger configuration.

Usage:
    from tbr_tracker.utils import get_logger
    logger = get_logger(__name__)
"""

import logging
import os

DEFAULT_LEVEL = os.getenv("TBR_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = DEFAULT_LEVEL, force: bool = False) -> None:
    """Configure the root logger; force replaces handlers set up earlier."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        force=force,
    )


def get_logger(name: str) -> logging.Logger:
    if not logging.getLogger().handlers:
        setup_logging()
    return logging.getLogger(name)
