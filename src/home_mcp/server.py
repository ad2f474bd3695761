"""Expose the dispatcher as an MCP server over stdio."""

import asyncio
from typing import Any, Optional

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from .catalogue import ToolCatalogue
from .config import HomeConfig
from .dispatcher import ToolDispatcher
from .logger import get_logger, setup_logging
from .models import ToolRequest, ToolResponse

logger = get_logger(__name__)

SERVER_NAME = "home-mcp"
SERVER_VERSION = "1.0.0"

__all__ = ["create_server", "serve", "main", "to_mcp_tools", "to_mcp_content"]


class ToolCallFailed(Exception):
    """Carries the text of an error response to the MCP server, which reports it with isError set."""

    pass


def to_mcp_tools(catalogue: ToolCatalogue) -> list[types.Tool]:
    return [
        types.Tool(name=tool.name, description=tool.description, inputSchema=tool.parameters) for tool in catalogue
    ]


def to_mcp_content(response: ToolResponse) -> list[types.TextContent]:
    return [types.TextContent(type="text", text=block.text) for block in response.content]


def create_server(dispatcher: Optional[ToolDispatcher] = None) -> Server:
    """Build a low-level MCP server whose tools are served by ``dispatcher``.

    Args:
        dispatcher: The dispatcher to route tool calls to. Defaults to one built from ``HomeConfig()``.

    Returns:
        The configured server, not yet connected to a transport.
    """
    dispatcher = dispatcher or ToolDispatcher()
    server: Server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        return to_mcp_tools(dispatcher.catalogue)

    @server.call_tool()
    async def handle_call_tool(name: str, arguments: Optional[dict[str, Any]]) -> list[types.TextContent]:
        request = ToolRequest(name=name, arguments=arguments or {})
        # The external program blocks; keep the event loop free while it runs.
        response = await asyncio.to_thread(dispatcher.dispatch, request)
        if response.is_error:
            raise ToolCallFailed(response.joined_text)
        return to_mcp_content(response)

    return server


async def serve(config: HomeConfig) -> None:
    server = create_server(ToolDispatcher(config))
    async with stdio_server() as (read_stream, write_stream):
        logger.info("Home MCP server running on stdio")
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    """Console entry point: configure from the environment and serve over stdio."""
    config = HomeConfig.from_env()
    setup_logging(config.log_level)
    try:
        asyncio.run(serve(config))
    except KeyboardInterrupt:
        logger.info("Home MCP server stopped.")
