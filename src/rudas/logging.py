"""Centralized structlog configuration helpers."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping

import structlog
from structlog.types import Processor

LOG_LEVELS: dict[str, int] = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}
LOG_FORMATS = ("console", "json")

LOG_LEVEL_ENV = "RUDAS_LOG_LEVEL"
LOG_FORMAT_ENV = "RUDAS_LOG_FORMAT"


def configure_logging(
    level: str = "info",
    *,
    json_output: bool = False,
) -> None:
    """Initialize structlog with a consistent processor chain."""

    normalized = level.lower()
    if normalized not in LOG_LEVELS:
        valid = ", ".join(sorted(LOG_LEVELS))
        raise ValueError(f"Unsupported log level {level!r}. Choose one of: {valid}.")
    level_value = LOG_LEVELS[normalized]

    logging.basicConfig(level=level_value, format="%(message)s", stream=sys.stderr)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    renderer: structlog.types.Processor
    if json_output:
        renderer = structlog.processors.JSONRenderer(sort_keys=True)
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=shared_processors + [renderer],
        wrapper_class=structlog.make_filtering_bound_logger(level_value),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging_from_env(environ: Mapping[str, str] | None = None) -> None:
    """Configure logging from ``RUDAS_LOG_LEVEL`` and ``RUDAS_LOG_FORMAT``."""
    env = os.environ if environ is None else environ
    level = env.get(LOG_LEVEL_ENV, "info")
    log_format = env.get(LOG_FORMAT_ENV, "console").lower()
    if log_format not in LOG_FORMATS:
        valid = ", ".join(LOG_FORMATS)
        raise ValueError(f"Unsupported log format {log_format!r}. Choose one of: {valid}.")
    configure_logging(level=level, json_output=log_format == "json")


__all__ = [
    "LOG_FORMATS",
    "LOG_FORMAT_ENV",
    "LOG_LEVELS",
    "LOG_LEVEL_ENV",
    "configure_logging",
    "configure_logging_from_env",
]
