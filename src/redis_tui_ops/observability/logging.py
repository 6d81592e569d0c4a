"""Structured logging for the CLI, written to stderr."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog
from structlog.contextvars import bind_contextvars, merge_contextvars

if TYPE_CHECKING:
    from redis_tui_core.config.settings import Settings

# redis-py and asyncio log connection churn at INFO/DEBUG
_QUIET_LOGGERS = ("redis", "asyncio")

_PRE_CHAIN: list[structlog.types.Processor] = [
    merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.UnicodeDecoder(),
]


def configure_logging(settings: Settings) -> None:
    """Route structlog and stdlib logging to one stderr handler.

    Stdout is reserved for command output.
    """
    level = _resolve_level(settings.log_level)

    structlog.configure(
        processors=[*_PRE_CHAIN, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(settings.log_format),
            ],
            foreign_pre_chain=_PRE_CHAIN,
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


def bind_session_context(endpoint: str) -> None:
    """Tag every later log entry with the connection endpoint."""
    bind_contextvars(endpoint=endpoint)


def _renderer(log_format: str) -> structlog.types.Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def _resolve_level(level_name: str) -> int:
    """Map a level name to its number; unknown names fall back to WARNING."""
    return logging.getLevelNamesMapping().get(level_name.upper(), logging.WARNING)
