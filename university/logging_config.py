"""
Logging Configuration

structlog setup shared by the demo entry point. Log events are written to the
current standard error so standard output stays reserved for program output.
"""

import logging
import sys
from typing import Any

import structlog

from university.config import get_settings


def _stderr_logger_factory(*args: Any) -> structlog.PrintLogger:
    # Resolved per logger so redirected streams are honoured.
    return structlog.PrintLogger(file=sys.stderr)


def configure_logging(level: str | None = None, fmt: str | None = None) -> None:
    """
    Configure structlog for the process.

    Args:
        level: Minimum log level name (defaults to ``settings.log_level``)
        fmt: ``json`` or ``text`` (defaults to ``settings.log_format``)
    """
    current = get_settings()
    level = (level or current.log_level).upper()
    fmt = fmt or current.log_format

    renderer: Any
    if fmt == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level)
        ),
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=False,
    )
