"""Structured logging configuration for collectionops using structlog.

The library never installs handlers on its own. ``get_logger`` only makes
sure structlog routes through the standard library so that the host
application's logging configuration decides what is emitted. Applications
that want ready-made output call ``setup_logging`` or
``configure_from_settings``, or set ``COLLECTIONOPS_AUTO_SETUP_LOGGING=1``.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import structlog

from .log_level import LogLevel

if TYPE_CHECKING:
    from ..config.settings import CollectionOpsSettings


def setup_logging(
    level: str | LogLevel = "INFO",
    log_file: Path | None = None,
    structured: bool = False,
    console: bool = True,
    add_timestamp: bool = True,
    add_caller_info: bool = False,
    colorize: bool = False,
) -> None:
    """Configure structured logging for collectionops.

    Args:
        level: Log level (TRACE, DEBUG, INFO, WARN, ERROR, FATAL, OFF)
        log_file: Optional path to log file
        structured: Use JSON structured output
        console: Enable console output on stderr
        add_timestamp: Add timestamps to logs
        add_caller_info: Add caller information
        colorize: Colorize console output (only for non-structured)
    """
    python_level = LogLevel(level).to_python_level()

    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
    ]

    if add_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if add_caller_info:
        processors.append(
            structlog.processors.CallsiteParameterAdder(
                parameters=[
                    structlog.processors.CallsiteParameter.FILENAME,
                    structlog.processors.CallsiteParameter.LINENO,
                    structlog.processors.CallsiteParameter.FUNC_NAME,
                ]
            )
        )

    processors.extend(
        [
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
        ]
    )

    if structured:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=colorize and console))

    structlog.configure(
        processors=processors,
        context_class=dict,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handlers: list[logging.Handler] = []

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        handlers.append(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter("%(message)s"))
        handlers.append(file_handler)

    if not handlers:
        handlers.append(logging.NullHandler())

    logging.basicConfig(
        format="%(message)s",
        level=python_level,
        handlers=handlers,
        force=True,
    )


def configure_from_settings(settings: CollectionOpsSettings) -> None:
    """Apply ``setup_logging`` using values from a settings object.

    Args:
        settings: Loaded settings instance
    """
    level = LogLevel.DEBUG if settings.debug_mode else settings.log_level
    setup_logging(
        level=level,
        log_file=settings.log_file,
        structured=settings.structured_logging,
        add_caller_info=settings.debug_mode,
        colorize=settings.colorize,
    )


# Global state for lazy initialization
_logging_initialized = False


def _route_through_stdlib() -> None:
    """Point structlog at stdlib logging without touching handlers or levels."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.format_exc_info,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        context_class=dict,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def _ensure_logging_initialized() -> None:
    """Ensure logging is initialized (called lazily, not at import time)."""
    global _logging_initialized

    if _logging_initialized:
        return

    from ..base_exceptions import CollectionOpsException
    from ..config.settings import get_settings

    try:
        settings = get_settings()
        if settings.auto_setup_logging:
            configure_from_settings(settings)
        elif not structlog.is_configured():
            _route_through_stdlib()
    except (OSError, ValueError, CollectionOpsException):
        # Invalid settings or an unwritable log file: fall back to stdlib routing
        _route_through_stdlib()

    _logging_initialized = True


def reset_logging() -> None:
    """Drop any structlog configuration and route through stdlib again (mainly for testing)."""
    global _logging_initialized
    structlog.reset_defaults()
    _logging_initialized = False
    _ensure_logging_initialized()


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structured logger instance
    """
    _ensure_logging_initialized()
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))
