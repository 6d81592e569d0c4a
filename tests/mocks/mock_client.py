"""Scripted in-memory KeyspaceClient for unit tests."""

from __future__ import annotations

from typing import Any, Literal

from redis.exceptions import ConnectionError as RedisConnectionError


def cursor_for_page(index: int) -> int:
    """Cursor the fake hands out to fetch page ``index`` (page 0 is cursor 0)."""
    return 0 if index == 0 else 1000 + index


class FakeKeyspaceClient:
    """Serves SCAN from a fixed list of pages and keys from a dict.

    ``fail_on_page`` makes the n-th SCAN call (1-based) raise a redis
    ConnectionError, as a dropped connection would.
    """

    def __init__(
        self,
        pages: list[list[str]] | None = None,
        *,
        fail_on_page: int | None = None,
        info_text: str = "",
        values: dict[str, tuple[str, Any]] | None = None,
        ttls: dict[str, int] | None = None,
        reply: Any = None,
        variant: Literal["standalone", "cluster"] = "standalone",
    ) -> None:
        self.pages = pages or [[]]
        self.fail_on_page = fail_on_page
        self.info_text = info_text
        self.values = values or {}
        self.ttls = ttls or {}
        self.reply = reply
        self.variant = variant
        self.scan_calls: list[tuple[int, str, int]] = []
        self.executed: list[tuple[str, ...]] = []
        self.closed = False

    async def scan(self, cursor: int, match: str, count: int) -> tuple[int, list[str]]:
        self.scan_calls.append((cursor, match, count))
        if self.fail_on_page == len(self.scan_calls):
            msg = "Connection reset by peer"
            raise RedisConnectionError(msg)
        index = 0 if cursor == 0 else cursor - 1000
        next_index = index + 1
        next_cursor = cursor_for_page(next_index) if next_index < len(self.pages) else 0
        return next_cursor, list(self.pages[index])

    async def info(self) -> str:
        return self.info_text

    async def execute(self, *args: str) -> Any:
        self.executed.append(args)
        if isinstance(self.reply, Exception):
            raise self.reply
        return self.reply

    async def type(self, key: str) -> str:
        return self.values[key][0] if key in self.values else "none"

    async def ttl(self, key: str) -> int:
        if key not in self.values:
            return -2
        return self.ttls.get(key, -1)

    async def get(self, key: str) -> str | None:
        return self.values[key][1]

    async def lrange(self, key: str, start: int, stop: int) -> list[str]:
        items = list(self.values[key][1])
        return items[start:] if stop == -1 else items[start : stop + 1]

    async def smembers(self, key: str) -> set[str]:
        return set(self.values[key][1])

    async def zrange_withscores(self, key: str, start: int, stop: int) -> list[tuple[str, float]]:
        items = sorted(self.values[key][1], key=lambda pair: pair[1])
        return items[start:] if stop == -1 else items[start : stop + 1]

    async def hgetall(self, key: str) -> dict[str, str]:
        return dict(self.values[key][1])

    async def aclose(self) -> None:
        self.closed = True


def make_pages(page_count: int, per_page: int = 3, prefix: str = "key") -> list[list[str]]:
    """Build ``page_count`` pages of distinct key names."""
    return [
        [f"{prefix}:{page}:{i}" for i in range(per_page)]
        for page in range(page_count)
    ]
