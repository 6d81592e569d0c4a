"""Cursor-based keyspace iteration."""

from __future__ import annotations

import structlog

from redis_tui_core.constants import SCAN_PAGE_SIZE
from redis_tui_core.exceptions import ScanError
from redis_tui_core.interfaces.client import KeyspaceClient

logger = structlog.get_logger()


async def scan_keys(
    client: KeyspaceClient,
    pattern: str,
    max_pages: int | None = None,
    *,
    page_size: int = SCAN_PAGE_SIZE,
) -> list[str]:
    """Collect keys matching ``pattern`` page by page.

    With ``max_pages=None`` the scan runs until the cursor returns to 0.
    Otherwise at most ``max_pages`` pages are fetched, so the result is a
    sample and may miss keys even if the server had few left. Keys are
    returned in page order without deduplication; a key moved by a rehash
    on the server can show up twice.

    Raises:
        ScanError: a page failed. Keys gathered so far are discarded.
        ValueError: ``max_pages`` is less than 1.
    """
    if max_pages is not None and max_pages < 1:
        msg = f"max_pages must be at least 1, got {max_pages}"
        raise ValueError(msg)

    keys: list[str] = []
    cursor = 0
    pages = 0
    while max_pages is None or pages < max_pages:
        pages += 1
        try:
            cursor, page = await client.scan(cursor, pattern, page_size)
        except Exception as exc:
            logger.warning("scan_failed", pattern=pattern, page=pages, error=str(exc))
            msg = f"scan of {pattern!r} failed on page {pages}: {exc}"
            raise ScanError(msg) from exc

        keys.extend(page)
        if cursor == 0:
            break

    logger.debug(
        "scan_completed", pattern=pattern, pages=pages, keys=len(keys), exhausted=cursor == 0
    )
    return keys
