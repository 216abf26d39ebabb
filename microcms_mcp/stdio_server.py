#!/usr/bin/env python3
"""
MCP STDIO Server for desktop MCP clients.

The client launches this as a subprocess and talks JSON-RPC over
stdin/stdout, so all logging goes to stderr.

Usage:
    microcms-mcp

Environment:
    MICROCMS_API_KEY: microCMS API key (required)
    MICROCMS_BASE_URL: microCMS service URL (e.g. https://example.microcms.io)
    LOG_LEVEL: Logging level (default: INFO, use DEBUG to see request URLs)
"""

import asyncio
import logging
import sys

from mcp.server.stdio import stdio_server

from microcms_mcp.config import settings
from microcms_mcp.exceptions import ConfigurationError
from microcms_mcp.server import log_startup_banner, server
from microcms_mcp.services.microcms_client import microcms_client

logger = logging.getLogger("microcms.stdio")


async def serve() -> None:
    """Run the SDK server over stdio until the client disconnects."""
    try:
        async with stdio_server() as (read_stream, write_stream):
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(),
            )
    finally:
        await microcms_client.close()
        logger.info("MCP STDIO server stopped")


def main() -> None:
    """Console entry point."""
    # Configure logging to stderr (stdout is for JSON-RPC)
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        settings.require_credentials()
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)

    logger.info("Starting microCMS MCP server (stdio)")
    log_startup_banner()

    try:
        asyncio.run(serve())
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
