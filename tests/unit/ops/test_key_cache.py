"""Tests for KeyCache."""

from __future__ import annotations

import asyncio

import pytest

from redis_tui_core.exceptions import ScanError
from redis_tui_ops.keyspace.cache import KeyCache
from tests.mocks.mock_client import FakeKeyspaceClient, make_pages


class _Clock:
    """Manually advanced monotonic clock."""

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.mark.unit
class TestKeyCachePattern:
    """Test exact-pattern listing."""

    @pytest.mark.asyncio
    async def test_pattern_query_always_scans(self) -> None:
        """Pattern listings run a full scan every time."""
        client = FakeKeyspaceClient(make_pages(2))
        cache = KeyCache(client)

        first = await cache.keys("key:*")
        second = await cache.keys("key:*")

        assert first == second
        assert len(client.scan_calls) == 4
        assert cache.refreshed_at is None

    @pytest.mark.asyncio
    async def test_pattern_query_is_unbounded(self) -> None:
        """Pattern listings are not limited to ten pages."""
        client = FakeKeyspaceClient(make_pages(15))
        keys = await KeyCache(client).keys("*")
        assert len(keys) == 45


@pytest.mark.unit
class TestKeyCacheAllKeys:
    """Test the cached all-keys sample."""

    @pytest.mark.asyncio
    async def test_sample_is_bounded_to_ten_pages(self) -> None:
        """A miss scans at most ten pages of '*'."""
        client = FakeKeyspaceClient(make_pages(15))
        keys = await KeyCache(client).all_keys()

        assert len(keys) == 30
        assert len(client.scan_calls) == 10
        assert {match for _, match, _ in client.scan_calls} == {"*"}

    @pytest.mark.asyncio
    async def test_fresh_cache_is_served(self) -> None:
        """A second call within the window does not scan again."""
        clock = _Clock()
        client = FakeKeyspaceClient(make_pages(2))
        cache = KeyCache(client, ttl_seconds=60, clock=clock)

        first = await cache.all_keys(use_cache=True)
        clock.now += 59
        second = await cache.all_keys(use_cache=True)

        assert first == second
        assert len(client.scan_calls) == 2

    @pytest.mark.asyncio
    async def test_stale_cache_is_refreshed(self) -> None:
        """After the window the sample is rescanned."""
        clock = _Clock()
        client = FakeKeyspaceClient(make_pages(2))
        cache = KeyCache(client, ttl_seconds=60, clock=clock)

        await cache.all_keys()
        clock.now += 60
        await cache.all_keys()

        assert len(client.scan_calls) == 4
        assert cache.refreshed_at == clock.now

    @pytest.mark.asyncio
    async def test_no_cache_requested_always_scans(self) -> None:
        """use_cache=False rescans and refreshes the stored sample."""
        clock = _Clock()
        client = FakeKeyspaceClient(make_pages(1))
        cache = KeyCache(client, clock=clock)

        await cache.all_keys(use_cache=False)
        clock.now += 1
        await cache.all_keys(use_cache=False)

        assert len(client.scan_calls) == 2
        assert cache.refreshed_at == clock.now

    @pytest.mark.asyncio
    async def test_returned_list_is_a_copy(self) -> None:
        """Mutating a result does not change what the cache serves."""
        client = FakeKeyspaceClient([["a", "b"]])
        cache = KeyCache(client)

        first = await cache.all_keys()
        first.append("injected")
        second = await cache.all_keys()

        assert second == ["a", "b"]

    @pytest.mark.asyncio
    async def test_failed_refresh_keeps_previous_sample(self) -> None:
        """A scan failure propagates and the old sample stays cached."""
        clock = _Clock()
        client = FakeKeyspaceClient([["a", "b"]])
        cache = KeyCache(client, clock=clock)
        await cache.all_keys()
        refreshed_at = cache.refreshed_at

        client.fail_on_page = len(client.scan_calls) + 1
        with pytest.raises(ScanError):
            await cache.all_keys(use_cache=False)

        assert cache.refreshed_at == refreshed_at
        assert await cache.all_keys() == ["a", "b"]

    @pytest.mark.asyncio
    async def test_invalidate_forces_rescan(self) -> None:
        """After invalidate the next cached call scans."""
        client = FakeKeyspaceClient([["a"]])
        cache = KeyCache(client)

        await cache.all_keys()
        await cache.invalidate()
        assert cache.refreshed_at is None
        await cache.all_keys()

        assert len(client.scan_calls) == 2

    @pytest.mark.asyncio
    async def test_concurrent_readers_share_fresh_cache(self) -> None:
        """Many concurrent cached reads of a fresh sample scan nothing new."""
        client = FakeKeyspaceClient(make_pages(3))
        cache = KeyCache(client)
        expected = await cache.all_keys()

        results = await asyncio.gather(*(cache.all_keys() for _ in range(20)))

        assert all(result == expected for result in results)
        assert len(client.scan_calls) == 3
