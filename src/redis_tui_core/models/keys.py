"""Key inspection models."""

from __future__ import annotations

from pydantic import BaseModel, Field

KeyValue = str | list[str] | list[tuple[str, float]] | dict[str, str] | None


class KeyDetail(BaseModel):
    """Type, TTL and value of a single key."""

    key: str = Field(description="Key name")
    type: str = Field(description="Redis type name, 'none' when the key is missing")
    ttl: int = Field(description="Seconds to live; -1 persistent, -2 missing")
    value: KeyValue = Field(default=None, description="Decoded value for known types")

    @property
    def exists(self) -> bool:
        """Whether the key was present when inspected."""
        return self.type != "none"
