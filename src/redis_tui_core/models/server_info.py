"""Server INFO summary model."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ServerInfoSummary(BaseModel):
    """The handful of INFO fields shown in the status bar."""

    version: str = Field(description="redis_version, empty when unreported")
    memory: str = Field(description="used_memory_human, empty when unreported")
    host: str = Field(description="Configured host")
    port: int = Field(description="Configured port")
    db: int = Field(description="Selected database index")
    keyspace: str = Field(description="Keyspace stats for the selected db, or a placeholder")

    @property
    def endpoint(self) -> str:
        """Return ``host:port/db``."""
        return f"{self.host}:{self.port}/{self.db}"

    def render(self) -> str:
        """Format as two status lines."""
        return (
            f" RedisVersion: {self.version}    Memory: {self.memory}    "
            f"Server: {self.endpoint}\n KeySpace: {self.keyspace}"
        )
