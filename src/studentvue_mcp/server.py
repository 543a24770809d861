"""MCP stdio server exposing the StudentVue tool catalogue."""

from __future__ import annotations

import asyncio
import logging

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from studentvue_mcp import __version__
from studentvue_mcp.tools import ToolDispatcher, get_all_tool_schemas

LOGGER = logging.getLogger(__name__)

SERVER_NAME = "studentvue-mcp-server"


class ToolCallError(Exception):
    """Raised from call_tool so the SDK reports an isError result."""


def tool_definitions() -> list[Tool]:
    """Return the catalogue as MCP Tool objects."""
    return [
        Tool(
            name=schema["name"],
            description=schema["description"],
            inputSchema=schema["inputSchema"],
        )
        for schema in get_all_tool_schemas()
    ]


async def handle_call(
    dispatcher: ToolDispatcher, name: str, arguments: dict | None
) -> list[TextContent]:
    """
    Run one tool call off the event loop.

    Raises:
        ToolCallError: The tool failed; message is the "Error: ..." text.
    """
    result = await asyncio.to_thread(dispatcher.dispatch, name, arguments)
    if not result.success:
        raise ToolCallError(result.text)
    return [TextContent(type="text", text=result.text)]


def build_server(dispatcher: ToolDispatcher) -> Server:
    """Create the MCP server with list_tools and call_tool handlers."""
    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        return tool_definitions()

    @server.call_tool()
    async def call_tool(name: str, arguments: dict) -> list[TextContent]:
        return await handle_call(dispatcher, name, arguments)

    return server


async def run_stdio(dispatcher: ToolDispatcher) -> None:
    """Serve MCP over stdin/stdout until the host closes the stream."""
    server = build_server(dispatcher)
    async with stdio_server() as (read_stream, write_stream):
        LOGGER.info("StudentVue MCP Server running on stdio")
        await server.run(
            read_stream, write_stream, server.create_initialization_options()
        )
