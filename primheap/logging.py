"""Package logging for primheap.

All modules log through children of the ``primheap`` logger, which gets one
stdout handler the first time `get_logger` runs. At DEBUG the driver emits a
line per heap extraction, so the debug format adds the emitting function and
line to tell the seed phase from the main loop.
"""

import logging
import sys

ROOT_LOGGER_NAME = "primheap"

INFO_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEBUG_FORMAT = "%(asctime)s - %(name)s:%(funcName)s:%(lineno)d - %(levelname)s - %(message)s"

_configured = False


def _configure() -> logging.Logger:
    global _configured

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    if _configured:
        return root_logger

    root_logger.setLevel(logging.INFO)
    root_logger.handlers.clear()
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(INFO_FORMAT))
    root_logger.addHandler(handler)
    # Propagate so pytest's caplog sees the records
    root_logger.propagate = True

    _configured = True
    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``primheap`` hierarchy.

    Args:
        name: Logger name (typically __name__ from calling module).
    """
    _configure()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)  # Inherit from parent
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the package logger and its handlers.

    Handlers switch to `DEBUG_FORMAT` at DEBUG and back to `INFO_FORMAT`
    otherwise.

    Args:
        level: Logging level (e.g., logging.DEBUG, logging.WARNING).
    """
    root_logger = _configure()
    root_logger.setLevel(level)
    fmt = DEBUG_FORMAT if level <= logging.DEBUG else INFO_FORMAT
    for handler in root_logger.handlers:
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(fmt))


def reset_logging() -> None:
    """Drop the package handler and level (mainly for testing)."""
    global _configured
    _configured = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)
