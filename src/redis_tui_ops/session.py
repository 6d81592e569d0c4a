"""One connection and its key cache for the lifetime of the process."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

from redis_tui_core.constants import KEY_CACHE_TTL_SECONDS
from redis_tui_core.diagnostics import DiagnosticChannel
from redis_tui_core.interfaces.client import KeyspaceClient
from redis_tui_core.models.config import ConnectionConfig
from redis_tui_core.models.keys import KeyDetail
from redis_tui_core.models.server_info import ServerInfoSummary
from redis_tui_infra.connection.factory import create_client
from redis_tui_ops.executor import execute_command
from redis_tui_ops.keyspace.cache import KeyCache
from redis_tui_ops.keyspace.inspector import inspect_key
from redis_tui_ops.server_info import fetch_server_info

if TYPE_CHECKING:
    from redis_tui_core.config.settings import Settings

logger = structlog.get_logger()


class RedisSession:
    """Everything the presentation layer talks to.

    Owns the shared client, the key cache and the diagnostic channel.
    """

    def __init__(
        self,
        config: ConnectionConfig,
        client: KeyspaceClient,
        diagnostics: DiagnosticChannel,
        *,
        key_cache_ttl_seconds: float = KEY_CACHE_TTL_SECONDS,
    ) -> None:
        """Initialize from an already built client."""
        self.config = config
        self.client = client
        self.diagnostics = diagnostics
        self.key_cache = KeyCache(client, ttl_seconds=key_cache_ttl_seconds)

    @classmethod
    def connect(cls, config: ConnectionConfig, settings: Settings) -> RedisSession:
        """Build the client for ``config`` and wrap it in a session."""
        diagnostics = DiagnosticChannel(maxsize=settings.diagnostics_buffer_size)
        client = create_client(config, diagnostics)
        logger.info("session_opened", endpoint=config.endpoint, variant=client.variant)
        return cls(
            config,
            client,
            diagnostics,
            key_cache_ttl_seconds=settings.key_cache_ttl_seconds,
        )

    async def keys(self, pattern: str) -> list[str]:
        """Every key matching ``pattern``."""
        return await self.key_cache.keys(pattern)

    async def all_keys(self, use_cache: bool = True) -> list[str]:
        """A sample of the keyspace, cached for a short window."""
        return await self.key_cache.all_keys(use_cache)

    async def server_info(self) -> ServerInfoSummary:
        """Summary of the server's INFO output."""
        return await fetch_server_info(self.client, self.config)

    async def execute(self, line: str, quoted: bool = False) -> Any:
        """Pass a raw command line through to the store."""
        return await execute_command(self.client, line, quoted=quoted)

    async def inspect(self, key: str) -> KeyDetail:
        """Type, TTL and value of one key."""
        return await inspect_key(self.client, key)

    async def aclose(self) -> None:
        """Close the client connections."""
        await self.client.aclose()
        logger.info("session_closed", endpoint=self.config.endpoint)
