"""
Logging handlers for the conversion UI and CLI.

Forwards pipeline log records to Flet PubSub topics through a
callback, and provides the console handler used by the CLI.
"""
from __future__ import annotations

import logging
from typing import Callable

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%H:%M:%S"


class PubSubLogHandler(logging.Handler):
    """Logging handler that forwards formatted messages to a callback."""

    def __init__(self, callback: Callable[[str], None]):
        """
        Initialize the handler.

        Args:
            callback: Function to call with formatted log messages.
                     Typically sends messages to page.pubsub.
        """
        super().__init__()
        self.callback = callback
        self.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            self.callback(msg)
        except Exception:
            self.handleError(record)


def setup_logger(
    name: str,
    callback: Callable[[str], None],
    level: int = logging.INFO
) -> logging.Logger:
    """
    Route a logger (and its children) to a PubSub callback.

    Existing handlers are replaced so repeated setup does not
    duplicate messages.

    Args:
        name: Logger name, e.g. "core" to capture every pipeline module.
        callback: Function to receive log messages.
        level: Logging level (default: INFO).

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers.clear()

    handler = PubSubLogHandler(callback)
    handler.setLevel(level)
    logger.addHandler(handler)

    # Prevent propagation to root logger
    logger.propagate = False

    return logger


def create_console_handler(level: int = logging.DEBUG) -> logging.Handler:
    """
    Create a console handler for the CLI and debugging.

    Args:
        level: Logging level (default: DEBUG).

    Returns:
        Configured StreamHandler.
    """
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
    return handler
