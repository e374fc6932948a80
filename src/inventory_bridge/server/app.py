# SPDX-License-Identifier: Apache-2.0
"""File: src/inventory_bridge/server/app.py

Project: inventory-bridge

Description:
    MCP server exposing the inventory tools. Exactly two handlers are
    registered: list_tools returns the static catalog and call_tool hands
    the invocation to the ToolDispatcher. Results are always sent as a
    normal (non-error) result with one text item; callers detect failure
    by the "Error:" prefix of that text.

"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from ..clients.inventory_api import InventoryApiClient
from ..runtime.dispatcher import ToolDispatcher
from ..runtime.registry import ToolRegistry
from ..tools import build_tools
from .config import Settings

logger = logging.getLogger(__name__)

SERVER_NAME = "inventory-mcp-server"
SERVER_VERSION = "1.0.0"


def create_dispatcher(client: InventoryApiClient) -> ToolDispatcher:
    return ToolDispatcher(ToolRegistry(build_tools(client)))


def create_server(dispatcher: ToolDispatcher) -> Server:
    """Create the MCP server bound to ``dispatcher``"""
    server: Server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return [
            types.Tool(
                name=d.name,
                description=d.description,
                inputSchema=d.input_schema,
                annotations=types.ToolAnnotations(readOnlyHint=d.read_only),
            )
            for d in dispatcher.list_tools()
        ]

    # argument checks belong to the dispatcher so they come back as "Error:" text
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> List[types.TextContent]:
        result = await dispatcher.invoke(name, arguments)
        return [types.TextContent(type="text", text=result.to_text())]

    return server


async def serve(settings: Settings) -> None:
    """Run the server over stdio until the client closes the stream."""
    async with InventoryApiClient(settings) as client:
        server = create_server(create_dispatcher(client))
        async with stdio_server() as (read_stream, write_stream):
            logger.info(f"Inventory MCP Server running on stdio (API: {settings.api_url})")
            await server.run(read_stream, write_stream, server.create_initialization_options())


__all__ = ["SERVER_NAME", "SERVER_VERSION", "create_dispatcher", "create_server", "serve"]
