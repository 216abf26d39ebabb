# MCP SDK Server
"""MCP Server using the official SDK, shared by the stdio and HTTP transports."""

import logging
from contextvars import ContextVar
from typing import Optional

import mcp.types as types
from mcp.server import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager

from microcms_mcp.config import settings
from microcms_mcp.handlers import (
    handle_read_resource,
    handle_resource_templates_list,
    handle_tools_call,
    handle_tools_list,
)
from microcms_mcp.handlers.tools_list import TOOL_DEFINITIONS
from microcms_mcp.services.microcms_client import mask_api_key
from microcms_mcp.services.tool_converter import ToolConverter

logger = logging.getLogger("microcms.server")

# Set by the HTTP transport before SDK handlers run
ctx_correlation_id: ContextVar[Optional[str]] = ContextVar("ctx_correlation_id", default=None)

server = Server(settings.mcp_server_name, version=settings.mcp_server_version)

# Session manager for Streamable HTTP transport
session_manager = StreamableHTTPSessionManager(
    app=server,
    json_response=True,
    stateless=True,
)


@server.list_tools()
async def sdk_list_tools() -> list[types.Tool]:
    """List available tools via SDK transport."""
    result = await handle_tools_list()
    return ToolConverter.to_sdk_tools(result.tools)


@server.call_tool()
async def sdk_call_tool(name: str, arguments: dict) -> types.CallToolResult:
    """Execute a tool via SDK transport."""
    result = await handle_tools_call(
        name=name,
        arguments=arguments or {},
        correlation_id=ctx_correlation_id.get(),
    )
    return types.CallToolResult(
        content=[
            types.TextContent(type="text", text=block.text)
            for block in result.content
        ],
        isError=result.isError,
    )


@server.list_resource_templates()
async def sdk_list_resource_templates() -> list[types.ResourceTemplate]:
    """List resource templates via SDK transport."""
    templates = await handle_resource_templates_list()
    return [ToolConverter.to_sdk_resource_template(t) for t in templates]


@server.read_resource()
async def sdk_read_resource(uri: types.AnyUrl) -> list[ReadResourceContents]:
    """Read a content item or content list by URI."""
    result = await handle_read_resource(str(uri))
    return [ReadResourceContents(content=result.text, mime_type=result.mimeType)]


def log_startup_banner() -> None:
    """Log connection settings (API key masked) and the tool catalog."""
    logger.info(f"microCMS Base URL: {settings.microcms_base_url}")
    logger.info(f"API Key: {mask_api_key(settings.microcms_api_key)}")
    logger.info("Available tools:")
    for tool in TOOL_DEFINITIONS:
        logger.info(f"- {tool.name}: {tool.description}")
