"""Capability interface shared by the standalone and cluster backends."""

from __future__ import annotations

from typing import Any, Literal, Protocol, runtime_checkable


@runtime_checkable
class KeyspaceClient(Protocol):
    """Everything the operations layer needs from a connection.

    Callers depend only on this; whether the store is a single node or a
    cluster is decided once by the connection factory.
    """

    variant: Literal["standalone", "cluster"]

    async def scan(self, cursor: int, match: str, count: int) -> tuple[int, list[str]]:
        """Fetch one SCAN page, returning the next cursor (0 when done) and keys."""
        ...

    async def info(self) -> str:
        """Return the raw INFO text."""
        ...

    async def execute(self, *args: str) -> Any:
        """Send an arbitrary command and return the native reply."""
        ...

    async def type(self, key: str) -> str:
        """Return the type name of a key."""
        ...

    async def ttl(self, key: str) -> int:
        """Return the remaining time to live of a key in seconds."""
        ...

    async def get(self, key: str) -> str | None:
        """Return a string value."""
        ...

    async def lrange(self, key: str, start: int, stop: int) -> list[str]:
        """Return a slice of a list."""
        ...

    async def smembers(self, key: str) -> set[str]:
        """Return the members of a set."""
        ...

    async def zrange_withscores(self, key: str, start: int, stop: int) -> list[tuple[str, float]]:
        """Return a slice of a sorted set with scores."""
        ...

    async def hgetall(self, key: str) -> dict[str, str]:
        """Return all fields of a hash."""
        ...

    async def aclose(self) -> None:
        """Release the underlying connections."""
        ...
