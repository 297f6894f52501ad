"""Logging configuration for the addrspec package.

The package logs through the ``addrspec`` logger hierarchy only. Until
`setup_logging` is called, records go to a NullHandler and are dropped
unless the host application configures logging itself.
"""

import logging
import sys
from typing import Literal, Optional, TextIO

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

PACKAGE_LOGGER = "addrspec"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())

_handler: Optional[logging.Handler] = None


def setup_logging(level: LogLevel = "INFO", stream: Optional[TextIO] = None) -> None:
    """Send addrspec log records to ``stream`` (default: stdout).

    Calling this again replaces the handler installed by the previous call
    instead of adding a second one.

    Args:
        level: The logging level for the package loggers.
        stream: Where formatted records are written.
    """
    global _handler

    logger = logging.getLogger(PACKAGE_LOGGER)
    if _handler is not None:
        logger.removeHandler(_handler)

    _handler = logging.StreamHandler(stream or sys.stdout)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(_handler)
    logger.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the given name.

    Args:
        name: The name for the logger (typically __name__).

    Returns:
        A logger under the ``addrspec`` hierarchy when ``name`` is a module
        of this package.
    """
    return logging.getLogger(name)
