"""Build the standalone or cluster client from a resolved config."""

from __future__ import annotations

from typing import Any

import structlog
from redis.asyncio import Redis, RedisCluster
from redis.asyncio.cluster import ClusterNode

from redis_tui_core.constants import (
    READ_TIMEOUT_SECONDS,
    REPLY_ENCODING_ERRORS,
    WRITE_TIMEOUT_SECONDS,
)
from redis_tui_core.exceptions import TLSBuildError
from redis_tui_core.interfaces.client import KeyspaceClient
from redis_tui_core.interfaces.diagnostics import DiagnosticSink
from redis_tui_core.models.config import ConnectionConfig
from redis_tui_infra.connection.backends import (
    ClusterBackend,
    StandaloneBackend,
    TracedRedis,
    TracedRedisCluster,
)
from redis_tui_infra.connection.tls import build_tls_options

logger = structlog.get_logger()


def create_client(config: ConnectionConfig, diagnostics: DiagnosticSink) -> KeyspaceClient:
    """Create the client for ``config``.

    A TLS failure never aborts: it is reported once on ``diagnostics`` and
    the connection proceeds without TLS. With ``config.debug`` every command
    is echoed to ``diagnostics`` before it runs.
    """
    tls_options = _tls_options_or_plain(config, diagnostics)

    if config.cluster:
        return ClusterBackend(_create_cluster(config, tls_options, diagnostics))
    return StandaloneBackend(_create_standalone(config, tls_options, diagnostics))


def _tls_options_or_plain(config: ConnectionConfig, diagnostics: DiagnosticSink) -> dict[str, Any]:
    if not config.tls:
        return {}
    try:
        return build_tls_options(config)
    except TLSBuildError as exc:
        logger.info("tls_build_failed", error=str(exc), endpoint=config.address)
        diagnostics.emit("error", f"TLS configuration error: {exc}")
        return {}


def _create_standalone(
    config: ConnectionConfig,
    tls_options: dict[str, Any],
    diagnostics: DiagnosticSink,
) -> Redis:
    redis_cls = TracedRedis if config.debug else Redis
    client = redis_cls(
        host=config.host,
        port=config.port,
        db=config.db,
        password=config.password_value(),
        socket_timeout=READ_TIMEOUT_SECONDS,
        socket_connect_timeout=WRITE_TIMEOUT_SECONDS,
        decode_responses=True,
        encoding_errors=REPLY_ENCODING_ERRORS,
        **tls_options,
    )
    if config.debug:
        client.trace_sink = diagnostics
    logger.debug(
        "client_created", variant="standalone", endpoint=config.endpoint, tls=bool(tls_options)
    )
    return client


def _create_cluster(
    config: ConnectionConfig,
    tls_options: dict[str, Any],
    diagnostics: DiagnosticSink,
) -> RedisCluster:
    redis_cls = TracedRedisCluster if config.debug else RedisCluster
    client = redis_cls(
        startup_nodes=[ClusterNode(config.host, config.port)],
        password=config.password_value(),
        socket_timeout=READ_TIMEOUT_SECONDS,
        socket_connect_timeout=WRITE_TIMEOUT_SECONDS,
        decode_responses=True,
        encoding_errors=REPLY_ENCODING_ERRORS,
        **tls_options,
    )
    if config.debug:
        client.trace_sink = diagnostics
    logger.debug("client_created", variant="cluster", seed=config.address, tls=bool(tls_options))
    return client
