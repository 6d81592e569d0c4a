"""Abstract diagnostic sink."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from redis_tui_core.models.diagnostics import Severity


@runtime_checkable
class DiagnosticSink(Protocol):
    """Anything that accepts (severity, message) pairs without blocking."""

    def emit(self, severity: Severity, message: str) -> None:
        """Hand a diagnostic to the presentation layer."""
        ...
