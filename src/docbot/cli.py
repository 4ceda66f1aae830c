import asyncio
import json
import logging
import sys

from dataclasses import asdict
from rich.console import Console
from rich.table import Table
from typing import Optional

import typer

from docbot import __version__
from docbot.cache import SnapshotCache
from docbot.config import load_config
from docbot.formatting import NO_MATCHES_MESSAGE, NOT_FOUND_MESSAGE, format_result, kind_emoji
from docbot.models import NotFound
from docbot.refresh import RefreshLoop
from docbot.resolver import resolve_entity_or_member, suggest
from docbot.store import DocStore

app = typer.Typer(
    help="Docbot - documentation lookup for TypeScript module APIs",
    no_args_is_help=True,
)

console = Console()


def _load_store() -> DocStore:
    config = load_config()
    return DocStore.from_cache(SnapshotCache(config.cache_path))


def _filter_none(d):
    if isinstance(d, dict):
        return {k: _filter_none(v) for k, v in d.items() if v is not None}
    elif isinstance(d, list):
        return [_filter_none(item) for item in d]
    else:
        return d


@app.command()
def doc(
    name: str,
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
):
    """Show documentation for an entity or one of its members.

    Args:
        name: Entity name, or "Owner#member" for a property or method

    Examples:
        docbot doc Client
        docbot doc "Client#connect"
    """
    result = resolve_entity_or_member(_load_store(), name)

    if isinstance(result, NotFound):
        typer.echo(f"Error: {NOT_FOUND_MESSAGE}", err=True)
        raise typer.Exit(code=1)

    if json_output:
        typer.echo(json.dumps(_filter_none(asdict(result)), indent=2, ensure_ascii=False))
    else:
        typer.echo(format_result(result))


@app.command()
def search(
    query: str,
    limit: Optional[int] = typer.Option(None, "--limit", "-n", help="Maximum number of results"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
):
    """Search documented names containing QUERY.

    Include '#' in the query to search class and interface members too.
    """
    if limit is None:
        limit = load_config().search_limit

    hits = suggest(_load_store(), query, limit)

    if json_output:
        typer.echo(json.dumps([asdict(hit) for hit in hits], indent=2, ensure_ascii=False))
        return

    if not hits:
        typer.echo(NO_MATCHES_MESSAGE)
        return

    table = Table(title="Search Results")
    table.add_column("Kind")
    table.add_column("Name")
    for hit in hits:
        table.add_row(f"{kind_emoji(hit.kind)} {hit.kind}", hit.name)
    console.print(table)


@app.command()
def refresh():
    """Fetch the documentation once and update the cache file."""
    config = load_config()
    if not config.module:
        typer.echo("Error: no documentation module configured in .docbot", err=True)
        raise typer.Exit(code=1)

    cache = SnapshotCache(config.cache_path)
    store = DocStore.from_cache(cache)
    refresher = RefreshLoop(config, store, cache)

    if not asyncio.run(refresher.refresh_once()):
        typer.echo(f"Error: failed to fetch documentation for {config.module}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Fetched {len(store.snapshot)} documented entities into {config.cache_path}")


@app.command()
def mcp_server():
    """Start the MCP server exposing documentation lookup tools.

    Queries are answered from the cached snapshot while a background task
    refreshes it from the configured documentation endpoint.
    """
    from docbot.mcp_server import main

    # stdout carries the protocol
    logging.basicConfig(
        level=logging.INFO,
        stream=sys.stderr,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )
    asyncio.run(main())


def _version_callback(value: bool):
    """Show version and exit."""
    if value:
        console.print(f"docbot version {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    )):
    pass
