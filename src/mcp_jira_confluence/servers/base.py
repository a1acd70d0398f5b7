"""Low-level MCP server factory shared by the Jira and Confluence adapters."""

import logging
import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError
from mcp.types import (
    METHOD_NOT_FOUND,
    CallToolRequest,
    ErrorData,
    ServerResult,
    Tool,
)

from ..client import VendorClient
from ..exceptions import UnknownToolError
from ..utils.env import is_read_only_mode
from .registry import ToolRegistry

logger = logging.getLogger("mcp-jira-confluence.servers")


@dataclass
class AppContext:
    """Per-process context handed to every request handler."""

    client: VendorClient
    registry: ToolRegistry


def create_server(
    name: str,
    version: str,
    registry: ToolRegistry,
    client: VendorClient,
    started_message: str | None = None,
) -> Server:
    """Build an MCP server exposing ``registry`` backed by ``client``.

    Args:
        name: Server name reported during initialization
        version: Server version reported during initialization
        registry: Tools served by this process
        client: Vendor client shared by every tool invocation
        started_message: Line written to stderr once the transport is attached

    Returns:
        The configured low-level MCP server
    """

    @asynccontextmanager
    async def server_lifespan(server: Server) -> AsyncIterator[AppContext]:
        logger.info(f"Starting {name} v{version}")
        logger.info(
            f"Read-only mode: {'ENABLED' if is_read_only_mode() else 'DISABLED'}"
        )
        logger.info(f"Serving {len(registry)} {registry.service_name} tools")
        if started_message:
            print(started_message, file=sys.stderr, flush=True)
        try:
            yield AppContext(client=client, registry=registry)
        finally:
            logger.info(f"{name} shutting down")

    app = Server(name, version=version, lifespan=server_lifespan)

    @app.list_tools()
    async def list_tools() -> list[Tool]:
        """List the tools of this adapter."""
        return registry.list_tools(read_only=is_read_only_mode())

    async def call_tool(req: CallToolRequest) -> ServerResult:
        """Route a tool call to its handler.

        Unknown tool names are answered with a JSON-RPC error instead of a
        tool result.
        """
        ctx = app.request_context.lifespan_context
        try:
            result = await ctx.registry.dispatch(
                req.params.name, req.params.arguments, ctx.client
            )
        except UnknownToolError as e:
            logger.warning(str(e))
            raise McpError(ErrorData(code=METHOD_NOT_FOUND, message=str(e))) from e
        return ServerResult(result)

    # Registered directly rather than through ``app.call_tool()``, which
    # would turn every exception, routing faults included, into an
    # isError result.
    app.request_handlers[CallToolRequest] = call_tool

    return app


async def run_stdio(app: Server) -> None:
    """Serve ``app`` over stdin/stdout until the client disconnects."""
    async with stdio_server() as (read_stream, write_stream):
        await app.run(read_stream, write_stream, app.create_initialization_options())
