"""Logging module for collectionops."""

from .log_level import LogLevel
from .logger import configure_from_settings, get_logger, reset_logging, setup_logging

__all__ = [
    "LogLevel",
    "setup_logging",
    "configure_from_settings",
    "get_logger",
    "reset_logging",
]
