"""
Logging Configuration
Sets up the logger for the 'cachematrix' namespace.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional

from .config import settings

LOGGER_NAME = "cachematrix"


def setup_logging(level: Optional[int] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the logger for the 'cachematrix' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG). Defaults to
            CACHEMATRIX_LOG_LEVEL, else WARNING.
        log_file: Optional path to save logs to a file.
    """
    if level is None:
        level = settings.log_level

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Avoid duplicate output when called repeatedly
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger
