"""
Logging setup built on structlog.

Call configure_logging() once at startup (main.py does); modules obtain a logger
with get_logger(__name__) at import time. Loggers are lazy proxies, so getting
one before configure_logging() runs is fine.
"""

import logging
import sys
from typing import Optional

import structlog

from src.config.settings import get_settings


def _processors(json_output: bool) -> list:
    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        renderer,
    ]


def configure_logging(level: Optional[str] = None, json_output: bool = False) -> None:
    """
    Configure stdlib logging and structlog.

    Args:
        level: Level name such as "DEBUG" or "INFO". Defaults to the
               LITERALS_LOG_LEVEL setting.
        json_output: Render events as JSON lines instead of console text.
    """
    if level is None:
        level = get_settings().log_level

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level.upper())
    logging.getLogger().setLevel(level.upper())

    structlog.configure(
        processors=_processors(json_output),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to name."""
    return structlog.get_logger(name)
