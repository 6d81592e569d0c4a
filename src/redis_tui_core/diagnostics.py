"""Bounded, non-blocking diagnostic channel."""

from __future__ import annotations

import asyncio

import structlog

from redis_tui_core.constants import DIAGNOSTICS_BUFFER_SIZE
from redis_tui_core.models.diagnostics import Diagnostic, Severity

logger = structlog.get_logger()


class DiagnosticChannel:
    """Queue of diagnostics consumed by the presentation layer.

    ``emit`` never blocks: when the buffer is full the oldest pending
    diagnostic is dropped to make room for the new one.
    """

    def __init__(self, maxsize: int = DIAGNOSTICS_BUFFER_SIZE) -> None:
        """Initialize with the maximum number of pending diagnostics."""
        self._queue: asyncio.Queue[Diagnostic] = asyncio.Queue(maxsize=maxsize)
        self.dropped = 0

    def emit(self, severity: Severity, message: str) -> None:
        """Enqueue a diagnostic, dropping the oldest if the buffer is full."""
        diagnostic = Diagnostic(severity=severity, message=message)
        try:
            self._queue.put_nowait(diagnostic)
        except asyncio.QueueFull:
            self._queue.get_nowait()
            self.dropped += 1
            self._queue.put_nowait(diagnostic)
            logger.debug("diagnostic_dropped", dropped=self.dropped)

    async def get(self) -> Diagnostic:
        """Wait for the next diagnostic."""
        return await self._queue.get()

    def drain(self) -> list[Diagnostic]:
        """Return and remove every pending diagnostic, oldest first."""
        pending: list[Diagnostic] = []
        while not self._queue.empty():
            pending.append(self._queue.get_nowait())
        return pending

    def __len__(self) -> int:
        return self._queue.qsize()
