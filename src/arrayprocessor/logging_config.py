"""
Logging Configuration
=====================
Opt-in console output for the ``arrayprocessor`` logger namespace.

The operations only emit DEBUG records (rejected input, kernel calls), so an
embedding application sees nothing unless it calls ``setup_logging`` with
``logging.DEBUG`` or configures the namespace itself.
"""
import logging
import sys
from typing import Optional, TextIO

PACKAGE_LOGGER = "arrayprocessor"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: int = logging.INFO, stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Attach a single stream handler to the package logger.

    Calling it again replaces the previous handler instead of adding another.

    Args:
        level: Threshold for the package logger and its handler.
        stream: Destination of the records; stdout when omitted.

    Returns:
        The package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    logger.handlers.clear()

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S'))
    logger.addHandler(handler)

    logger.debug(f"Package logging set to {logging.getLevelName(level)}.")
    return logger
