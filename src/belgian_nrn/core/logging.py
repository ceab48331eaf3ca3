"""Structured logging for belgian_nrn.

Modules obtain a named logger with ``structlog.get_logger("belgian_nrn.<module>")``.
Nothing is configured on import; applications that want the library's events
rendered call :func:`configure_logging` once at startup.

Configuration via environment (see :class:`~belgian_nrn.core.config.NrnSettings`):
- BELGIAN_NRN_LOG_LEVEL: stdlib level name (DEBUG/INFO/WARNING/...)
- BELGIAN_NRN_LOG_FORMAT: output format (console/json)
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import structlog

from belgian_nrn.core.config import get_settings


def configure_logging(level: Optional[str] = None, format: Optional[str] = None) -> None:
    """Route structlog through stdlib logging with console or JSON rendering.

    Args:
        level: stdlib level name, defaults to the configured ``log_level``
        format: "console" or "json", defaults to the configured ``log_format``
    """
    settings = get_settings()
    level = (level or settings.log_level).upper()
    format = format or settings.log_format

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level, logging.INFO),
        force=True,
    )

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if format == "json":
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=False),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
