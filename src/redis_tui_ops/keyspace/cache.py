"""Session-owned cache of the sampled key listing."""

from __future__ import annotations

import time
from collections.abc import Callable

import structlog

from redis_tui_core.constants import ALL_KEYS_MAX_PAGES, ALL_KEYS_PATTERN, KEY_CACHE_TTL_SECONDS
from redis_tui_core.interfaces.client import KeyspaceClient
from redis_tui_ops.keyspace.lock import ReadWriteLock
from redis_tui_ops.keyspace.scanner import scan_keys

logger = structlog.get_logger()


class KeyCache:
    """Bounded key sample shared by every caller of one session.

    The sample and its refresh time are replaced together under the
    exclusive lock, so readers never see one without the other.
    """

    def __init__(
        self,
        client: KeyspaceClient,
        ttl_seconds: float = KEY_CACHE_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize with the session client, freshness window and clock."""
        self._client = client
        self._ttl_seconds = ttl_seconds
        self._clock = clock
        self._lock = ReadWriteLock()
        self._keys: tuple[str, ...] = ()
        self._refreshed_at: float | None = None

    async def keys(self, pattern: str) -> list[str]:
        """Return every key matching ``pattern``. Never served from cache."""
        return await scan_keys(self._client, pattern)

    async def all_keys(self, use_cache: bool = True) -> list[str]:
        """Return a sample of at most ten pages of keys.

        Served from cache when ``use_cache`` is set and the last refresh is
        younger than the freshness window; otherwise rescanned and stored.
        """
        if use_cache:
            async with self._lock.read():
                if self._is_fresh():
                    logger.debug("key_cache_hit", keys=len(self._keys))
                    return list(self._keys)

        async with self._lock.write():
            keys = await scan_keys(self._client, ALL_KEYS_PATTERN, ALL_KEYS_MAX_PAGES)
            self._keys = tuple(keys)
            self._refreshed_at = self._clock()
            logger.debug("key_cache_refreshed", keys=len(keys))
            return list(keys)

    async def invalidate(self) -> None:
        """Forget the cached sample so the next listing rescans."""
        async with self._lock.write():
            self._keys = ()
            self._refreshed_at = None

    @property
    def refreshed_at(self) -> float | None:
        """Clock reading of the last refresh, or None if never refreshed."""
        return self._refreshed_at

    def _is_fresh(self) -> bool:
        if self._refreshed_at is None:
            return False
        return self._clock() - self._refreshed_at < self._ttl_seconds
