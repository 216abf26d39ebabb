# MCP Resources Handler
"""Handles MCP resource templates and reads for microCMS contents."""

import json
import logging
from typing import List, Optional, Tuple

from microcms_mcp.exceptions import MicroCMSError
from microcms_mcp.models.mcp import MCPResourceContents, MCPResourceTemplate
from microcms_mcp.services.microcms_client import microcms_client

logger = logging.getLogger("microcms.handlers.resources")

URI_SCHEME = "microcms://"

RESOURCE_TEMPLATES: List[MCPResourceTemplate] = [
    MCPResourceTemplate(
        uriTemplate=URI_SCHEME + "{endpoint}/{contentId}",
        name="content",
        description="A single microCMS content item",
        mimeType="application/json",
    ),
    MCPResourceTemplate(
        uriTemplate=URI_SCHEME + "{endpoint}",
        name="contents",
        description="The content list of a microCMS endpoint",
        mimeType="application/json",
    ),
]


def parse_resource_uri(uri: str) -> Tuple[str, Optional[str]]:
    """
    Split a microcms:// URI into endpoint and optional content ID.

    Raises:
        ValueError: If the URI does not match a resource template
    """
    if not uri.startswith(URI_SCHEME):
        raise ValueError(f"Resource not found: {uri}")

    segments = [s for s in uri[len(URI_SCHEME):].split("/") if s]
    if len(segments) == 1:
        return segments[0], None
    if len(segments) == 2:
        return segments[0], segments[1]
    raise ValueError(f"Resource not found: {uri}")


async def handle_resource_templates_list() -> List[MCPResourceTemplate]:
    """Handle MCP resources/templates/list request."""
    return list(RESOURCE_TEMPLATES)


async def handle_read_resource(uri: str) -> MCPResourceContents:
    """
    Handle MCP resources/read request.

    microCMS failures are returned as error text in the contents rather
    than raised.

    Raises:
        ValueError: If the URI does not match a resource template
    """
    endpoint, content_id = parse_resource_uri(uri)

    try:
        if content_id is None:
            data = await microcms_client.get_list(endpoint)
        else:
            data = await microcms_client.get_content(endpoint, content_id)
    except MicroCMSError as e:
        logger.warning(f"Failed to read resource {uri}: {e}")
        return MCPResourceContents(
            uri=uri,
            text=f"Error: {e}",
            mimeType="text/plain",
            isError=True,
        )

    return MCPResourceContents(
        uri=uri,
        text=json.dumps(data, indent=2, ensure_ascii=False, default=str),
    )
