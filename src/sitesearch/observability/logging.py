"""Structured logging configuration using structlog.

Logs go to stderr so that ``sitesearch query`` can keep stdout for its
JSON output.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO

import structlog

if TYPE_CHECKING:
    from sitesearch.config.settings import ObservabilitySettings

_LEVELS = {"debug", "info", "warning", "error"}


def build_processors(log_format: str) -> list:
    """Return the structlog processor chain for the given output format."""
    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if log_format == "console":
        processors.append(structlog.dev.ConsoleRenderer())
    else:
        processors.append(structlog.processors.JSONRenderer())
    return processors


def setup_logging(settings: ObservabilitySettings | None = None, stream: TextIO | None = None) -> None:
    """Configure structured logging for SiteSearch.

    Args:
        settings: Observability settings. Uses defaults if None.
        stream: Destination of log lines; defaults to stderr.

    Raises:
        ValueError: If the configured log level is unknown.
    """
    log_level = settings.log_level.lower() if settings else "info"
    log_format = settings.log_format if settings else "json"
    if log_level not in _LEVELS:
        raise ValueError(f"Unknown log level '{log_level}', expected one of {sorted(_LEVELS)}")

    structlog.configure(
        processors=build_processors(log_format),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=stream or sys.stderr,
        level=getattr(logging, log_level.upper()),
        force=True,
    )

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(service="sitesearch")
