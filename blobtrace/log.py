# log.py
# console logging for the package logger (the CLI calls this, the library never does)

import logging
from typing import Optional

from .config import LOG_LEVEL, LOG_FORMAT


def setup_logging(level: Optional[str] = None, name: str = "blobtrace") -> logging.Logger:
    """
    Attach a console handler to the package logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        name: Logger name

    Returns:
        Configured logger instance
    """
    if level is None:
        level = LOG_LEVEL

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    # one console handler, even if called again (CLI + tests)
    for handler in logger.handlers:
        if getattr(handler, "_blobtrace", False):
            handler.setLevel(logger.level)
            return logger

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logger.level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    console_handler._blobtrace = True
    logger.addHandler(console_handler)

    return logger
