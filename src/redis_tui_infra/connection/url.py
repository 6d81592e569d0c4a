"""Connection URL parsing and configuration precedence.

Format: ``redis://[user[:password]@]host[:port][/db][?cluster=true]``, or
``rediss://`` for TLS connections.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import parse_qs, unquote, urlsplit

import structlog
from pydantic import ValidationError

from redis_tui_core.constants import URL_SCHEMES
from redis_tui_core.exceptions import (
    ConfigurationError,
    InvalidDatabaseError,
    InvalidPortError,
    InvalidSchemeError,
)
from redis_tui_core.models.config import ConnectionConfig

logger = structlog.get_logger()


def parse_redis_url(url: str) -> dict[str, Any]:
    """Parse a connection URL into the config fields it sets.

    Only fields present in the URL appear in the result. The username is
    ignored; ``cluster=true`` can switch cluster mode on but never off.
    """
    parts = urlsplit(url)

    scheme = parts.scheme.lower()
    if scheme not in URL_SCHEMES:
        msg = f"invalid scheme: {parts.scheme!r}"
        raise InvalidSchemeError(msg)
    fields: dict[str, Any] = {"tls": URL_SCHEMES[scheme]}

    if parts.hostname:
        fields["host"] = parts.hostname

    try:
        port = parts.port
    except ValueError as exc:
        msg = f"invalid port in {url!r}"
        raise InvalidPortError(msg) from exc
    if port is not None:
        fields["port"] = port

    if parts.password is not None:
        fields["password"] = unquote(parts.password)

    if parts.path and parts.path != "/":
        db_str = parts.path.removeprefix("/")
        if not (db_str.isascii() and db_str.isdigit()):
            msg = f"invalid database number: {db_str!r}"
            raise InvalidDatabaseError(msg)
        fields["db"] = int(db_str)

    query = parse_qs(parts.query)
    if query.get("cluster", [""])[-1] == "true":
        fields["cluster"] = True

    return fields


def apply_redis_url(config: ConnectionConfig, url: str) -> ConnectionConfig:
    """Return a copy of ``config`` updated from ``url``.

    Either every field from the URL is applied or, on any error, none is.
    """
    return _merge(config, parse_redis_url(url))


def resolve_config(
    *,
    env_url: str | None = None,
    flags: Mapping[str, Any] | None = None,
    override_url: str | None = None,
    base: ConnectionConfig | None = None,
) -> ConnectionConfig:
    """Resolve the connection config from every source.

    Precedence, lowest first: defaults, the environment URL, flags the
    user actually supplied (``None`` values are skipped), the override URL.
    """
    config = base or ConnectionConfig()

    if env_url:
        config = apply_redis_url(config, env_url)
        logger.debug("config_env_url_applied", endpoint=config.endpoint)

    supplied = {name: value for name, value in (flags or {}).items() if value is not None}
    if supplied:
        config = _merge(config, supplied)
        logger.debug("config_flags_applied", fields=sorted(supplied))

    if override_url:
        config = apply_redis_url(config, override_url)
        logger.debug("config_override_url_applied", endpoint=config.endpoint)

    return config


def _merge(config: ConnectionConfig, updates: Mapping[str, Any]) -> ConnectionConfig:
    """Validate ``updates`` on top of ``config`` into a new model."""
    try:
        return ConnectionConfig.model_validate({**config.model_dump(), **updates})
    except ValidationError as exc:
        fields = {str(err["loc"][0]) for err in exc.errors() if err["loc"]}
        if "port" in fields:
            raise InvalidPortError(str(exc)) from exc
        if "db" in fields:
            raise InvalidDatabaseError(str(exc)) from exc
        raise ConfigurationError(str(exc)) from exc
