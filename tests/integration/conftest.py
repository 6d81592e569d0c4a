"""Integration test fixtures: a real Redis on localhost:6379, db 15."""

from __future__ import annotations

import socket
import time
from collections.abc import AsyncGenerator

import pytest

from redis_tui_core.diagnostics import DiagnosticChannel
from redis_tui_core.models.config import ConnectionConfig
from redis_tui_infra.connection.factory import create_client
from redis_tui_ops.session import RedisSession

TEST_DB = 15


def _tcp_reachable(
    host: str,
    port: int,
    timeout: float = 1.0,
    retries: int = 3,
    delay: float = 1.0,
) -> bool:
    """Check if a TCP service is reachable, retrying on failure."""
    for attempt in range(retries):
        try:
            with socket.create_connection((host, port), timeout=timeout):
                return True
        except OSError:
            if attempt < retries - 1:
                time.sleep(delay)
    return False


_redis_up = _tcp_reachable("localhost", 6379)

skip_no_redis = pytest.mark.skipif(not _redis_up, reason="Redis not reachable on localhost:6379")


@pytest.fixture
def live_config() -> ConnectionConfig:
    """Config pointing at the scratch database."""
    return ConnectionConfig(host="localhost", port=6379, db=TEST_DB)


@pytest.fixture
async def live_session(live_config: ConnectionConfig) -> AsyncGenerator[RedisSession, None]:
    """A session on a flushed scratch database, flushed again afterwards."""
    diagnostics = DiagnosticChannel()
    client = create_client(live_config, diagnostics)
    session = RedisSession(live_config, client, diagnostics)
    await session.execute("FLUSHDB")
    yield session
    await session.execute("FLUSHDB")
    await session.aclose()
