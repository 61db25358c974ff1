"""Structured logging for match analytics.

Library modules only call ``structlog.get_logger``; an application embedding
the package calls ``setup_logging`` once at startup.
"""

import logging
from typing import Any, List, Optional

import structlog

from .config import get_global_settings

PACKAGE_LOGGER = "match_analytics"


def _processors(json_logs: bool) -> List[Any]:
    renderer = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    return [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        renderer,
    ]


def setup_logging(log_level: Optional[str] = None, json_logs: bool = True) -> None:
    """
    Route package events through the standard library as structlog records.

    :param log_level: Level name for the package logger; the ``log_level``
        setting when omitted
    :param json_logs: Render events as JSON lines, or as key=value text
    """
    level_name = (log_level or get_global_settings().log_level).upper()

    logging.basicConfig(format="%(message)s")
    logging.getLogger(PACKAGE_LOGGER).setLevel(
        getattr(logging, level_name, logging.INFO)
    )

    structlog.configure(
        processors=_processors(json_logs),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> Any:
    """Bound structlog logger for a module name."""
    return structlog.get_logger(name)
