"""Connection configuration model."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from redis_tui_core.constants import DEFAULT_HOST, DEFAULT_PORT


class ConnectionConfig(BaseModel):
    """Resolved connection parameters, immutable once built."""

    model_config = ConfigDict(frozen=True)

    host: str = Field(default=DEFAULT_HOST, description="Server hostname")
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535, description="Server port")
    password: SecretStr | None = Field(default=None, description="AUTH password")
    db: int = Field(default=0, ge=0, description="Logical database index")
    cluster: bool = Field(default=False, description="Use cluster-aware routing")
    debug: bool = Field(default=False, description="Trace every command as a diagnostic")
    tls: bool = Field(default=False, description="Connect over TLS")
    tls_verify: bool = Field(default=True, description="Verify the server certificate")
    tls_cert: Path | None = Field(default=None, description="Client certificate file")
    tls_key: Path | None = Field(default=None, description="Client private key file")
    tls_ca_cert: Path | None = Field(default=None, description="CA certificate file")

    @property
    def address(self) -> str:
        """Return ``host:port``."""
        return f"{self.host}:{self.port}"

    @property
    def endpoint(self) -> str:
        """Return ``host:port/db``."""
        return f"{self.host}:{self.port}/{self.db}"

    def password_value(self) -> str | None:
        """Return the plain password, or None when unset."""
        if self.password is None:
            return None
        return self.password.get_secret_value()
