"""CLI entrypoint using typer."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TypeVar

import structlog
import typer
from click.core import ParameterSource
from redis.exceptions import RedisError
from rich.console import Console

from redis_tui_core.config.settings import Settings
from redis_tui_core.constants import DEFAULT_HOST, DEFAULT_PORT
from redis_tui_core.exceptions import ConfigurationError, RedisTuiError
from redis_tui_core.models.config import ConnectionConfig
from redis_tui_core.models.diagnostics import Diagnostic
from redis_tui_core.models.keys import KeyDetail
from redis_tui_infra.connection.url import resolve_config
from redis_tui_ops.observability import bind_session_context, configure_logging
from redis_tui_ops.session import RedisSession

VERSION = "0.1.0"

app = typer.Typer(
    name="redis-tui",
    help="Inspect and operate a Redis server or cluster",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)
logger = structlog.get_logger()

T = TypeVar("T")

_SEVERITY_STYLES = {
    "debug": "dim",
    "info": "cyan",
    "warning": "yellow",
    "error": "red",
}


@dataclass
class CliState:
    """Resolved settings shared by every subcommand."""

    settings: Settings
    config: ConnectionConfig


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"redis-tui v{VERSION}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    host: str = typer.Option(DEFAULT_HOST, "-h", "--host", help="Server hostname"),
    port: int = typer.Option(DEFAULT_PORT, "-p", "--port", help="Server port"),
    password: str | None = typer.Option(
        None, "-a", "--password", help="Password to use when connecting to the server"
    ),
    db: int = typer.Option(0, "-n", "--db", help="Database number"),
    cluster: bool = typer.Option(False, "-c", "--cluster", help="Enable cluster mode"),
    debug: bool = typer.Option(
        False, "--debug", "-vvv", help="Echo every command sent to the server"
    ),
    tls: bool = typer.Option(False, "--tls", help="Enable TLS/SSL connection"),
    tls_cert: Path | None = typer.Option(None, "--tls-cert", help="TLS client certificate file"),
    tls_key: Path | None = typer.Option(None, "--tls-key", help="TLS client key file"),
    tls_ca_cert: Path | None = typer.Option(None, "--tls-ca-cert", help="TLS CA certificate file"),
    tls_verify: bool = typer.Option(
        True, "--tls-verify/--no-tls-verify", help="Verify the server certificate"
    ),
    url: str | None = typer.Option(
        None, "--url", help="Redis URL (overrides REDIS_URL and every other connection option)"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
    show_version: bool = typer.Option(
        False,
        "-v",
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Resolve connection options shared by all commands."""
    settings = Settings()
    if verbose:
        settings.log_level = "DEBUG"
    configure_logging(settings)

    given: dict[str, Any] = {
        "host": host,
        "port": port,
        "password": password,
        "db": db,
        "cluster": cluster,
        "debug": debug,
        "tls": tls,
        "tls_cert": tls_cert,
        "tls_key": tls_key,
        "tls_ca_cert": tls_ca_cert,
        "tls_verify": tls_verify,
    }
    # Only flags typed on the command line override REDIS_URL
    flags = {
        name: value
        for name, value in given.items()
        if ctx.get_parameter_source(name) is ParameterSource.COMMANDLINE
    }

    try:
        config = resolve_config(env_url=settings.redis_url, flags=flags, override_url=url)
    except ConfigurationError as exc:
        err_console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    bind_session_context(config.endpoint)
    ctx.obj = CliState(settings=settings, config=config)


@app.command()
def info(ctx: typer.Context) -> None:
    """Show server version, memory and keyspace stats."""
    summary = _run_in_session(ctx, lambda session: session.server_info())
    console.print(summary.render(), markup=False, highlight=False)


@app.command()
def keys(
    ctx: typer.Context,
    pattern: str = typer.Argument("*", help="Glob-style key pattern"),
    sample: bool = typer.Option(
        False, "--sample", help="List a bounded sample of all keys instead of a full scan"
    ),
) -> None:
    """List keys matching a pattern."""
    if sample:
        found = _run_in_session(ctx, lambda session: session.all_keys(use_cache=False))
    else:
        found = _run_in_session(ctx, lambda session: session.keys(pattern))

    for key in found:
        console.print(key, markup=False, highlight=False)
    suffix = " (sample)" if sample else ""
    console.print(f"[dim]{len(found)} keys{suffix}[/dim]")


@app.command("exec")
def exec_command(
    ctx: typer.Context,
    line: str = typer.Argument(..., help="Command line, e.g. 'SET foo bar'"),
    quoted: bool = typer.Option(
        False, "--quoted", help="Honour shell-style quotes instead of splitting on spaces"
    ),
) -> None:
    """Send a raw command to the server."""
    reply = _run_in_session(ctx, lambda session: session.execute(line, quoted=quoted))
    console.print(format_reply(reply), markup=False, highlight=False)


@app.command()
def inspect(
    ctx: typer.Context,
    key: str = typer.Argument(..., help="Key to inspect"),
) -> None:
    """Show the type, TTL and value of a key."""
    detail = _run_in_session(ctx, lambda session: session.inspect(key))
    if not detail.exists:
        console.print(f"[yellow]Key not found:[/yellow] {key}")
        raise typer.Exit(code=1)
    console.print(format_key_detail(detail), markup=False, highlight=False)


@app.command()
def version() -> None:
    """Show version."""
    console.print(f"redis-tui v{VERSION}")


def format_reply(reply: Any) -> str:
    """Render a command reply roughly the way redis-cli does."""
    if reply is None:
        return "(nil)"
    if isinstance(reply, bool):
        # redis-py turns +OK status replies into True
        return "OK" if reply else "(integer) 0"
    if isinstance(reply, int):
        return f"(integer) {reply}"
    if isinstance(reply, dict):
        reply = [item for pair in reply.items() for item in pair]
    if isinstance(reply, list | tuple | set):
        if not reply:
            return "(empty array)"
        return "\n".join(f"{i}) {format_reply(item)}" for i, item in enumerate(reply, 1))
    return str(reply)


def format_key_detail(detail: KeyDetail) -> str:
    """Render a key's metadata followed by its value."""
    ttl = "persistent" if detail.ttl == -1 else f"{detail.ttl}s"
    lines = [f"key:  {detail.key}", f"type: {detail.type}", f"ttl:  {ttl}"]
    if isinstance(detail.value, dict):
        lines.extend(f"  {field} => {value}" for field, value in detail.value.items())
    elif isinstance(detail.value, list):
        for item in detail.value:
            if isinstance(item, tuple):
                member, score = item
                lines.append(f"  {member} ({score:g})")
            else:
                lines.append(f"  {item}")
    elif detail.value is not None:
        lines.append(detail.value)
    return "\n".join(lines)


def _run_in_session(ctx: typer.Context, action: Callable[[RedisSession], Awaitable[T]]) -> T:
    """Open a session, run one action, print diagnostics and close."""
    state: CliState = ctx.obj
    try:
        return asyncio.run(_session_action(state, action))
    except (RedisTuiError, RedisError) as exc:
        err_console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1) from exc


async def _session_action(state: CliState, action: Callable[[RedisSession], Awaitable[T]]) -> T:
    session = RedisSession.connect(state.config, state.settings)
    try:
        return await action(session)
    finally:
        _print_diagnostics(session.diagnostics.drain())
        await session.aclose()


def _print_diagnostics(diagnostics: list[Diagnostic]) -> None:
    for diagnostic in diagnostics:
        style = _SEVERITY_STYLES.get(diagnostic.severity, "")
        err_console.print(diagnostic.message, style=style, markup=False, highlight=False)


if __name__ == "__main__":
    app()
