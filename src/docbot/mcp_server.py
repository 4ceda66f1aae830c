"""MCP server exposing documentation lookup as chat tools.

The server answers ``docs_get`` and ``docs_search`` tool calls from the
in-memory snapshot while a background task keeps that snapshot fresh.
"""

import asyncio
import contextlib
import logging
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from docbot.cache import SnapshotCache
from docbot.config import DocbotConfig, load_config
from docbot.formatting import format_result, format_search_results
from docbot.member_index import DEFAULT_LIMIT
from docbot.refresh import RefreshLoop
from docbot.resolver import resolve_entity_or_member, suggest
from docbot.store import DocStore

logger = logging.getLogger(__name__)


class DocServer:
    """Binds a DocStore to an MCP server's tool handlers."""

    def __init__(self, store: DocStore, search_limit: int = DEFAULT_LIMIT):
        self.store = store
        self.search_limit = search_limit
        self.server = Server("docbot")
        self.server.list_tools()(self.list_tools)
        self.server.call_tool()(self.call_tool)

    async def list_tools(self) -> list[Tool]:
        """Declare available tools."""
        return [
            Tool(
                name="docs_get",
                description=(
                    "See documentation for a class, interface, function, type alias or enum, "
                    "or for a method or property using 'Owner#member' syntax. Returns the "
                    "entity's description, type information and members."
                ),
                inputSchema={
                    "type": "object",
                    "properties": {
                        "name": {
                            "type": "string",
                            "description": "Name to see documentation of (e.g., 'Client', 'Client#connect')",
                        }
                    },
                    "required": ["name"],
                },
            ),
            Tool(
                name="docs_search",
                description=(
                    "Search for something in the docs. Matches names containing the query; "
                    "include '#' to also search members (e.g., 'Client#con')."
                ),
                inputSchema={
                    "type": "object",
                    "properties": {
                        "query": {
                            "type": "string",
                            "description": "Query to search with.",
                        }
                    },
                    "required": ["query"],
                },
            ),
        ]

    async def call_tool(self, name: str, arguments: Any) -> list[TextContent]:
        """Handle tool calls by routing to the resolver."""
        if name == "docs_get":
            return self._handle_get(arguments["name"])
        elif name == "docs_search":
            return self._handle_search(arguments["query"])

        raise ValueError(f"Unknown tool: {name}")

    def _handle_get(self, query: str) -> list[TextContent]:
        result = resolve_entity_or_member(self.store, query)
        return [TextContent(type="text", text=format_result(result))]

    def _handle_search(self, query: str) -> list[TextContent]:
        hits = suggest(self.store, query, self.search_limit)
        return [TextContent(type="text", text=format_search_results(hits))]


async def main(config: DocbotConfig | None = None):
    """Run the MCP server with a background documentation refresh."""
    if config is None:
        config = load_config()

    cache = SnapshotCache(config.cache_path)
    store = DocStore.from_cache(cache)
    doc_server = DocServer(store, config.search_limit)

    refresh_task = None
    if config.module:
        refresh_task = RefreshLoop(config, store, cache).start()
    else:
        logger.warning("No documentation module configured, serving cached docs only")

    try:
        async with stdio_server() as (read_stream, write_stream):
            await doc_server.server.run(
                read_stream, write_stream, doc_server.server.create_initialization_options()
            )
    finally:
        if refresh_task is not None:
            refresh_task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await refresh_task


if __name__ == "__main__":
    asyncio.run(main())
