"""INFO parsing and status summary."""

from __future__ import annotations

from collections.abc import Mapping

from redis_tui_core.constants import NO_KEYSPACE_PLACEHOLDER
from redis_tui_core.interfaces.client import KeyspaceClient
from redis_tui_core.models.config import ConnectionConfig
from redis_tui_core.models.server_info import ServerInfoSummary


def parse_info(text: str) -> dict[str, str]:
    """Parse ``key:value`` lines of INFO output.

    Section headers (``#``) and blank lines are skipped. Lines that do not
    split into a non-empty key and value on the first colon are dropped.
    """
    pairs: dict[str, str] = {}
    for raw_line in text.split("\n"):
        line = raw_line.rstrip("\r")
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.partition(":")
        if not sep or not key or not value:
            continue
        pairs[key] = value
    return pairs


def summarize_info(config: ConnectionConfig, pairs: Mapping[str, str]) -> ServerInfoSummary:
    """Pick the status-bar fields out of parsed INFO pairs."""
    return ServerInfoSummary(
        version=pairs.get("redis_version", ""),
        memory=pairs.get("used_memory_human", ""),
        host=config.host,
        port=config.port,
        db=config.db,
        keyspace=pairs.get(f"db{config.db}", NO_KEYSPACE_PLACEHOLDER),
    )


async def fetch_server_info(client: KeyspaceClient, config: ConnectionConfig) -> ServerInfoSummary:
    """Run INFO and summarize it."""
    return summarize_info(config, parse_info(await client.info()))
