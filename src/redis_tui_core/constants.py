"""Shared constants for redis-tui."""

from __future__ import annotations

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 6379

# URL schemes and whether they imply TLS
URL_SCHEMES: dict[str, bool] = {
    "redis": False,
    "rediss": True,
}

# Transport timeouts (seconds)
READ_TIMEOUT_SECONDS = 2.0
WRITE_TIMEOUT_SECONDS = 3.0

# Keys and values are binary-safe; undecodable bytes are shown escaped
REPLY_ENCODING_ERRORS = "backslashreplace"

# Keyspace scanning
SCAN_PAGE_SIZE = 100
ALL_KEYS_PATTERN = "*"
ALL_KEYS_MAX_PAGES = 10  # at most 1000 keys per sample
KEY_CACHE_TTL_SECONDS = 60.0

# Server info
NO_KEYSPACE_PLACEHOLDER = "-"

DIAGNOSTICS_BUFFER_SIZE = 100
