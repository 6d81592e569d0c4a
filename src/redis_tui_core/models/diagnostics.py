"""Diagnostic messages handed to the presentation layer."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Literal

from pydantic import BaseModel, Field

Severity = Literal["debug", "info", "warning", "error"]


class Diagnostic(BaseModel):
    """A single (severity, message) pair."""

    severity: Severity = Field(description="How prominently to display the message")
    message: str = Field(description="Human-readable text")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(UTC), description="When it was emitted"
    )
