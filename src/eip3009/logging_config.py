"""
Logging configuration for eip3009
"""

import logging
import sys
from typing import TextIO

PACKAGE_LOGGER = "eip3009"

DEFAULT_FORMAT = "%(asctime)s - %(levelname)-8s %(name)s %(filename)s:%(lineno)d %(message)s"


def setup_logging(
    level: int = logging.INFO,
    stream: TextIO | None = None,
    logger_name: str = PACKAGE_LOGGER,
) -> logging.Logger:
    """
    Attach a console handler to the eip3009 package logger.

    Only the package logger is touched, so applications embedding the library
    keep control of the root logger. Calling this twice replaces the handler
    instead of stacking a second one.

    Args:
        level: Logging level (default: INFO)
        stream: Output stream (default: stdout)
        logger_name: Logger to configure (default: the package logger)

    Returns:
        The configured logger
    """
    formatter = logging.Formatter(fmt=DEFAULT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    logger = logging.getLogger(logger_name)
    logger.setLevel(level)

    for handler in logger.handlers[:]:
        if getattr(handler, "_eip3009_handler", False):
            logger.removeHandler(handler)

    console_handler = logging.StreamHandler(stream or sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    console_handler._eip3009_handler = True  # type: ignore[attr-defined]
    logger.addHandler(console_handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the given name (typically __name__)"""
    return logging.getLogger(name)
