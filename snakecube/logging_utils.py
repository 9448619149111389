"""Logger setup for the snakecube package."""

from __future__ import annotations

import logging

from .config import LOG_FORMAT, LOGGER_NAME


def get_logger() -> logging.Logger:
    """
    Return the logger shared by the whole package.

    The first call attaches a stderr handler at INFO level so library messages
    are visible without any logging configuration by the caller.
    """
    logger = logging.getLogger(LOGGER_NAME)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)

    return logger


def set_verbose(verbose: bool) -> None:
    get_logger().setLevel(logging.DEBUG if verbose else logging.INFO)
