"""Structured logging configuration.

This module initializes structlog with a stable structured format.
Modules call ``get_logger(__name__)`` and emit snake_case events with
keyword fields; the CLI picks the level once at startup.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from core.constants import DEFAULT_LOG_LEVEL, SUPPORTED_LOG_LEVELS

_LEVELS = {
    "error": logging.ERROR,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Install process-wide structlog processors and level filtering.

    Args:
        level: One of ``error``, ``info`` or ``debug``.

    Raises:
        ValueError: If level is not supported.
    """
    if level not in SUPPORTED_LOG_LEVELS:
        raise ValueError(f"Unsupported log level '{level}'.")
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_LEVELS[level]),
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=False,
    )


def _stderr_logger_factory(*_args: Any) -> structlog.PrintLogger:
    return structlog.PrintLogger(file=sys.stderr)


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger with structured output.
    """
    return structlog.get_logger(name)
