"""Structured logging configuration.

This module initializes structlog with a stable JSON format on stderr.
The level filter is applied once so detection debug events stay silent
unless a caller asks for them.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from core.constants import DEFAULT_LOG_LEVEL, SUPPORTED_LOG_LEVELS
from core.errors import LangsiftConfigError


def configure_logging(level_name: str = DEFAULT_LOG_LEVEL) -> None:
    """Configure structlog processors and level filtering.

    Args:
        level_name: Minimum level name, e.g. "INFO".

    Raises:
        LangsiftConfigError: If the level name is unsupported.
    """
    level = _resolve_level(level_name)
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger with structured output.
    """
    return structlog.get_logger(name)


def _stderr_logger_factory(*_args: Any) -> Any:
    """Create a print logger bound to the current stderr stream."""
    return structlog.PrintLogger(file=sys.stderr)


def _resolve_level(level_name: str) -> int:
    """Map a level name onto a stdlib logging level.

    Args:
        level_name: Case-insensitive level name.

    Returns:
        Numeric logging level.

    Raises:
        LangsiftConfigError: If the level name is unsupported.
    """
    normalized = level_name.strip().upper()
    if normalized not in SUPPORTED_LOG_LEVELS:
        supported = ", ".join(SUPPORTED_LOG_LEVELS)
        raise LangsiftConfigError(
            f"Unsupported log level '{level_name}'. Choose one of: {supported}."
        )
    return int(getattr(logging, normalized))


configure_logging()
