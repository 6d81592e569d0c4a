"""Observability: structured logging."""

from redis_tui_ops.observability.logging import bind_session_context, configure_logging

__all__ = [
    "bind_session_context",
    "configure_logging",
]
