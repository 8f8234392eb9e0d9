"""
UI package for the Flet desktop app.

Contains the main layout, views, and logging handlers shared with the CLI.
"""
from .log_handler import PubSubLogHandler, create_console_handler, setup_logger

__all__ = [
    "PubSubLogHandler",
    "setup_logger",
    "create_console_handler",
]
