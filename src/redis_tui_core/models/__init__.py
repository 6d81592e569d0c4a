"""Domain models for redis-tui."""

from redis_tui_core.models.config import ConnectionConfig
from redis_tui_core.models.diagnostics import Diagnostic, Severity
from redis_tui_core.models.keys import KeyDetail
from redis_tui_core.models.server_info import ServerInfoSummary

__all__ = [
    "ConnectionConfig",
    "Diagnostic",
    "KeyDetail",
    "ServerInfoSummary",
    "Severity",
]
