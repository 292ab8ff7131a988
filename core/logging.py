"""
Structured logging configuration.

Every module logs through structlog key/value events. Development gets
colored console lines; staging and production get one JSON object per
line, which is also the shape access events take on the way out.
"""

import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import Processor

from core.config import settings


def _resolve_level(level_name: str) -> int:
    """Map a level name like "debug" to its logging constant, INFO if unknown."""
    level = logging.getLevelName(level_name.upper())
    return level if isinstance(level, int) else logging.INFO


def _build_processors(json_output: bool) -> list[Processor]:
    """Processor chain ending in a console or JSON renderer."""
    processors: list[Processor] = [
        # Request-scoped method/path bound by the access log middleware
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if json_output:
        processors += [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors += [
            structlog.processors.StackInfoRenderer(),
            structlog.dev.ConsoleRenderer(colors=True),
        ]
    return processors


def configure_logging(
    level: Optional[str] = None,
    json_output: Optional[bool] = None,
) -> None:
    """
    Configure structlog and the standard library root logger.

    Args:
        level: Level name, defaults to settings.log_level
        json_output: Render JSON lines, defaults to True outside development
    """
    numeric_level = _resolve_level(level or settings.log_level)
    if json_output is None:
        json_output = not settings.is_development

    structlog.configure(
        processors=_build_processors(json_output),
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )

    # uvicorn and other stdlib loggers
    logging.basicConfig(
        format="%(message)s",
        level=numeric_level,
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def get_logger(name: str | None = None, **initial_context: Any) -> structlog.BoundLogger:
    """
    Get a logger, optionally with context bound up front.

    Usage:
        logger = get_logger(__name__)
        logger.info("Record created", record_id=1)
    """
    logger = structlog.get_logger(name)
    if initial_context:
        logger = logger.bind(**initial_context)
    return logger
