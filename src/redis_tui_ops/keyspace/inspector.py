"""Read a single key's type, TTL and value."""

from __future__ import annotations

from collections.abc import Awaitable, Callable

import structlog

from redis_tui_core.interfaces.client import KeyspaceClient
from redis_tui_core.models.keys import KeyDetail, KeyValue

logger = structlog.get_logger()


async def _read_string(client: KeyspaceClient, key: str) -> KeyValue:
    return await client.get(key)


async def _read_list(client: KeyspaceClient, key: str) -> KeyValue:
    return await client.lrange(key, 0, -1)


async def _read_set(client: KeyspaceClient, key: str) -> KeyValue:
    return sorted(await client.smembers(key))


async def _read_zset(client: KeyspaceClient, key: str) -> KeyValue:
    return await client.zrange_withscores(key, 0, -1)


async def _read_hash(client: KeyspaceClient, key: str) -> KeyValue:
    return await client.hgetall(key)


_READERS: dict[str, Callable[[KeyspaceClient, str], Awaitable[KeyValue]]] = {
    "string": _read_string,
    "list": _read_list,
    "set": _read_set,
    "zset": _read_zset,
    "hash": _read_hash,
}


async def inspect_key(client: KeyspaceClient, key: str) -> KeyDetail:
    """Fetch a key's type and TTL, plus its value for the basic types.

    Types without a reader (streams, modules) come back with ``value=None``.
    Redis errors propagate unchanged.
    """
    key_type = await client.type(key)
    ttl = await client.ttl(key)

    reader = _READERS.get(key_type)
    value = await reader(client, key) if reader is not None else None
    if reader is None and key_type != "none":
        logger.debug("key_type_not_rendered", key=key, type=key_type)

    return KeyDetail(key=key, type=key_type, ttl=ttl, value=value)
