"""perplexity_mcp.mcp.server

MCP (Model Context Protocol) server for the Perplexity search adapter.

- Tools:
  - search
- Transports:
  - stdio (this module)
  - SSE + POST messages (`perplexity_mcp.main`)

Both transports run the same `Server` built by `create_server`.
"""

from __future__ import annotations

import anyio
import mcp.types as types
from mcp.server.lowlevel import NotificationOptions, Server
from mcp.server.models import InitializationOptions
from mcp.server.stdio import stdio_server

from perplexity_mcp.clients.perplexity import PerplexityClient
from perplexity_mcp.config.settings import settings
from perplexity_mcp.mcp.dispatcher import call_tool
from perplexity_mcp.mcp.tools import list_tools
from perplexity_mcp.utils.logger import get_logger

logger = get_logger(__name__)


SERVER_NAME = "perplexity-search-server"


def create_server(client: PerplexityClient) -> Server:
    server = Server(
        SERVER_NAME,
        version=settings.service_version,
        instructions=(
            "Web search backed by Perplexity. "
            "Call search with a natural-language query; results include citations."
        ),
    )

    async def handle_list_tools(_: types.ListToolsRequest) -> types.ServerResult:
        return types.ServerResult(types.ListToolsResult(tools=list_tools()))

    async def handle_call_tool(req: types.CallToolRequest) -> types.ServerResult:
        result = await call_tool(req.params.name, req.params.arguments, client)
        return types.ServerResult(result)

    # Registered directly: the call_tool() decorator converts every exception,
    # McpError included, into an isError result instead of a JSON-RPC error.
    server.request_handlers[types.ListToolsRequest] = handle_list_tools
    server.request_handlers[types.CallToolRequest] = handle_call_tool

    return server


def initialization_options(server: Server) -> InitializationOptions:
    return server.create_initialization_options(
        notification_options=NotificationOptions(
            prompts_changed=False,
            resources_changed=False,
            tools_changed=False,
        ),
        experimental_capabilities={},
    )


async def _run_stdio(server: Server) -> None:
    async with stdio_server() as (read_stream, write_stream):
        logger.info("Perplexity Search MCP server running on stdio")
        await server.run(read_stream, write_stream, initialization_options(server))


def run_stdio(server: Server) -> None:
    anyio.run(_run_stdio, server)
