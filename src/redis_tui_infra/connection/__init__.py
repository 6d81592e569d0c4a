"""Connection resolution and client construction."""

from redis_tui_infra.connection.factory import create_client
from redis_tui_infra.connection.tls import build_tls_options
from redis_tui_infra.connection.url import apply_redis_url, parse_redis_url, resolve_config

__all__ = [
    "apply_redis_url",
    "build_tls_options",
    "create_client",
    "parse_redis_url",
    "resolve_config",
]
