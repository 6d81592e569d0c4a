"""Raw command passthrough."""

from __future__ import annotations

import shlex
from typing import Any

import structlog

from redis_tui_core.exceptions import CommandSyntaxError
from redis_tui_core.interfaces.client import KeyspaceClient

logger = structlog.get_logger()


def split_command(line: str, quoted: bool = False) -> list[str]:
    """Split a command line into arguments.

    By default the line is split on single spaces with no quoting, so an
    argument cannot contain a space and doubled spaces yield empty
    arguments. ``quoted=True`` applies shell-style quoting instead, and an
    unbalanced quote raises ``CommandSyntaxError``.
    """
    if quoted:
        try:
            return shlex.split(line)
        except ValueError as exc:
            raise CommandSyntaxError(f"cannot parse command line: {exc}") from exc
    return line.split(" ")


async def execute_command(client: KeyspaceClient, line: str, quoted: bool = False) -> Any:
    """Send a command line as-is and return the native reply.

    Errors from the store are raised unchanged.
    """
    args = split_command(line, quoted=quoted)
    if not args:
        raise CommandSyntaxError("empty command line")
    logger.debug("command_execute", command=args[0] if args else "", argc=len(args))
    return await client.execute(*args)
