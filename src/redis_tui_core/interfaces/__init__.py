"""Public interface re-exports for redis_tui_core."""

from redis_tui_core.interfaces.client import KeyspaceClient
from redis_tui_core.interfaces.diagnostics import DiagnosticSink

__all__ = [
    "DiagnosticSink",
    "KeyspaceClient",
]
