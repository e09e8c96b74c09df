"""Logging setup for the mycadlib command-line demo.

Library modules only create loggers; handlers are attached here, and only
when the demo entry point asks for them.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

LOGGER_NAME = "mycadlib"


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """Configure the ``mycadlib`` logger.

    Args:
        level: Logging level (e.g. ``logging.DEBUG``).
        log_file: Optional path; when given, records are also written there.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Re-running setup must not stack handlers or leak open log files
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    # stdout carries the demo's results
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger


__all__ = ["setup_logging", "LOGGER_NAME"]
