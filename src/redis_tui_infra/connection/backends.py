"""Standalone and cluster backends implementing ``KeyspaceClient``."""

from __future__ import annotations

from typing import Any, Literal

from redis.asyncio import Redis, RedisCluster

from redis_tui_core.interfaces.diagnostics import DiagnosticSink


def raw_info_reply(response: Any, **_options: Any) -> str:
    """Keep the INFO reply as text instead of redis-py's parsed dict."""
    if isinstance(response, bytes):
        return response.decode("utf-8", errors="replace")
    return str(response)


def format_command(args: tuple[Any, ...]) -> str:
    """Render command arguments the way they were typed."""
    return " ".join(
        a.decode("utf-8", errors="replace") if isinstance(a, bytes) else str(a) for a in args
    )


class CommandTraceMixin:
    """Emit every command as a debug diagnostic before it is sent.

    Results and errors are passed through untouched.
    """

    trace_sink: DiagnosticSink | None = None

    async def execute_command(self, *args: Any, **options: Any) -> Any:
        if self.trace_sink is not None:
            self.trace_sink.emit("debug", f"redis: <{format_command(args)}>")
        return await super().execute_command(*args, **options)  # type: ignore[misc]


class TracedRedis(CommandTraceMixin, Redis):  # type: ignore[misc]
    """Standalone client with command tracing."""


class TracedRedisCluster(CommandTraceMixin, RedisCluster):  # type: ignore[misc]
    """Cluster client with command tracing."""


class _RedisBackend:
    """Key lookups shared by both variants."""

    variant: Literal["standalone", "cluster"]

    def __init__(self, redis: Any) -> None:
        """Initialize with a redis-py asyncio client using decoded responses."""
        self._redis = redis
        self._redis.set_response_callback("INFO", raw_info_reply)

    @property
    def redis(self) -> Any:
        """The wrapped redis-py client."""
        return self._redis

    async def execute(self, *args: str) -> Any:
        """Send an arbitrary command and return the native reply."""
        return await self._redis.execute_command(*args)

    async def type(self, key: str) -> str:
        """Return the type name of a key."""
        return str(await self._redis.type(key))

    async def ttl(self, key: str) -> int:
        """Return the remaining time to live of a key in seconds."""
        return int(await self._redis.ttl(key))

    async def get(self, key: str) -> str | None:
        """Return a string value."""
        return await self._redis.get(key)

    async def lrange(self, key: str, start: int, stop: int) -> list[str]:
        """Return a slice of a list."""
        return list(await self._redis.lrange(key, start, stop))

    async def smembers(self, key: str) -> set[str]:
        """Return the members of a set."""
        return set(await self._redis.smembers(key))

    async def zrange_withscores(self, key: str, start: int, stop: int) -> list[tuple[str, float]]:
        """Return a slice of a sorted set with scores."""
        members = await self._redis.zrange(key, start, stop, withscores=True)
        return [(member, float(score)) for member, score in members]

    async def hgetall(self, key: str) -> dict[str, str]:
        """Return all fields of a hash."""
        return dict(await self._redis.hgetall(key))

    async def aclose(self) -> None:
        """Release the underlying connections."""
        await self._redis.aclose()


class StandaloneBackend(_RedisBackend):
    """Backend over a single ``redis.asyncio.Redis`` node."""

    variant: Literal["standalone", "cluster"] = "standalone"

    async def scan(self, cursor: int, match: str, count: int) -> tuple[int, list[str]]:
        """Fetch one SCAN page."""
        next_cursor, keys = await self._redis.scan(cursor=cursor, match=match, count=count)
        return int(next_cursor), list(keys)

    async def info(self) -> str:
        """Return the raw INFO text."""
        return raw_info_reply(await self._redis.execute_command("INFO"))


class ClusterBackend(_RedisBackend):
    """Backend over ``redis.asyncio.RedisCluster``.

    SCAN and INFO are pinned to the cluster's default node: SCAN cursors are
    only meaningful on the node that issued them.
    """

    variant: Literal["standalone", "cluster"] = "cluster"

    async def scan(self, cursor: int, match: str, count: int) -> tuple[int, list[str]]:
        """Fetch one SCAN page from the default node."""
        next_cursor, keys = await self._redis.scan(
            cursor=cursor,
            match=match,
            count=count,
            target_nodes=RedisCluster.DEFAULT_NODE,
        )
        # redis-py reports cluster cursors per node
        if isinstance(next_cursor, dict):
            next_cursor = next(iter(next_cursor.values()), 0)
        return int(next_cursor), list(keys)

    async def info(self) -> str:
        """Return the raw INFO text of the default node."""
        reply = await self._redis.execute_command("INFO", target_nodes=RedisCluster.DEFAULT_NODE)
        if isinstance(reply, dict):
            reply = next(iter(reply.values()), "")
        return raw_info_reply(reply)
