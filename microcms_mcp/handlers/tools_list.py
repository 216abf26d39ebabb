# MCP Tools List Handler
"""Handles MCP tools/list request with the fixed microCMS tool set."""

import logging
from typing import Any, Dict, List, Optional

from microcms_mcp.models.mcp import MCPTool, MCPToolsListResponse

logger = logging.getLogger("microcms.handlers.tools_list")


def _string(description: str, min_length: int = 0) -> Dict[str, Any]:
    schema: Dict[str, Any] = {"type": "string", "description": description}
    if min_length:
        schema["minLength"] = min_length
    return schema


def _integer(description: str, minimum: Optional[int] = None, maximum: Optional[int] = None) -> Dict[str, Any]:
    schema: Dict[str, Any] = {"type": "integer", "description": description}
    if minimum is not None:
        schema["minimum"] = minimum
    if maximum is not None:
        schema["maximum"] = maximum
    return schema


def _object_schema(properties: Dict[str, Any], required: List[str]) -> Dict[str, Any]:
    return {"type": "object", "properties": properties, "required": required}


ENDPOINT = _string("microCMS API endpoint (e.g. 'blog')", min_length=1)
CONTENT_ID = _string("Content ID", min_length=1)
LIMIT = _integer("Number of items to fetch (default 10, max 100)", minimum=0, maximum=100)
OFFSET = _integer("Offset of the first item", minimum=0)
ORDERS = _string("Sort order (e.g. 'publishedAt' or '-publishedAt')")
Q = _string("Full-text search query")
FILTERS = _string("Filter conditions (e.g. 'title[contains]news')")
FIELDS = _string("Fields to return (e.g. 'id,title,publishedAt')")
DEPTH = _integer("Reference expansion depth (1-3)", minimum=1, maximum=3)
DRAFT_KEY = _string("Draft key for fetching unpublished content")
DATA = {
    "type": "object",
    "description": "Content fields as a JSON object",
    "additionalProperties": True,
}
STATUS = {
    "type": "string",
    "enum": ["draft", "publish"],
    "description": "Publish status (draft or publish)",
}


TOOL_DEFINITIONS: List[MCPTool] = [
    # Read operations
    MCPTool(
        name="get_contents",
        description="Get a list of contents from a microCMS endpoint.",
        inputSchema=_object_schema(
            {
                "endpoint": ENDPOINT,
                "limit": LIMIT,
                "offset": OFFSET,
                "orders": ORDERS,
                "q": Q,
                "filters": FILTERS,
                "fields": FIELDS,
                "depth": DEPTH,
            },
            ["endpoint"],
        ),
    ),
    MCPTool(
        name="get_content",
        description="Get a single content item by ID.",
        inputSchema=_object_schema(
            {
                "endpoint": ENDPOINT,
                "contentId": CONTENT_ID,
                "fields": FIELDS,
                "depth": DEPTH,
                "draftKey": DRAFT_KEY,
            },
            ["endpoint", "contentId"],
        ),
    ),
    MCPTool(
        name="search_contents",
        description="Full-text search over the contents of an endpoint.",
        inputSchema=_object_schema(
            {
                "endpoint": ENDPOINT,
                "q": _string("Search keywords", min_length=1),
                "limit": LIMIT,
                "offset": OFFSET,
                "fields": FIELDS,
                "depth": DEPTH,
            },
            ["endpoint", "q"],
        ),
    ),
    MCPTool(
        name="filter_contents",
        description="Get contents matching microCMS filter conditions.",
        inputSchema=_object_schema(
            {
                "endpoint": ENDPOINT,
                "filters": _string(
                    "Filter conditions (e.g. 'category[equals]news[and]createdAt[greater_than]2023-01-01')",
                    min_length=1,
                ),
                "limit": LIMIT,
                "offset": OFFSET,
                "fields": FIELDS,
                "depth": DEPTH,
            },
            ["endpoint", "filters"],
        ),
    ),
    # Write operations
    MCPTool(
        name="create_content",
        description="Create content with a server-generated ID (POST).",
        inputSchema=_object_schema(
            {"endpoint": ENDPOINT, "data": DATA, "status": STATUS},
            ["endpoint", "data"],
        ),
        readOnly=False,
    ),
    MCPTool(
        name="put_content",
        description="Create or replace content under a given ID (PUT).",
        inputSchema=_object_schema(
            {"endpoint": ENDPOINT, "contentId": CONTENT_ID, "data": DATA, "status": STATUS},
            ["endpoint", "contentId", "data"],
        ),
        readOnly=False,
    ),
    MCPTool(
        name="patch_content",
        description="Partially update existing content (PATCH).",
        inputSchema=_object_schema(
            {"endpoint": ENDPOINT, "contentId": CONTENT_ID, "data": DATA},
            ["endpoint", "contentId", "data"],
        ),
        readOnly=False,
    ),
    MCPTool(
        name="update_content",
        description=(
            "Replace existing content (PUT). Deprecated: use put_content or "
            "patch_content instead."
        ),
        inputSchema=_object_schema(
            {"endpoint": ENDPOINT, "contentId": CONTENT_ID, "data": DATA},
            ["endpoint", "contentId", "data"],
        ),
        readOnly=False,
    ),
    MCPTool(
        name="delete_content",
        description="Delete content by ID.",
        inputSchema=_object_schema(
            {"endpoint": ENDPOINT, "contentId": CONTENT_ID},
            ["endpoint", "contentId"],
        ),
        readOnly=False,
        destructive=True,
    ),
    # Batch operations
    MCPTool(
        name="batch_create_contents",
        description=(
            "Create several contents in one call. Failed items are reported "
            "individually and do not stop the batch."
        ),
        inputSchema=_object_schema(
            {
                "endpoint": ENDPOINT,
                "contents": {
                    "type": "array",
                    "items": {"type": "object"},
                    "description": "Contents to create",
                },
                "method": {
                    "type": "string",
                    "enum": ["post", "put"],
                    "default": "post",
                    "description": "post: server-generated IDs, put: IDs taken from each item's 'id'",
                },
            },
            ["endpoint", "contents"],
        ),
        readOnly=False,
    ),
]

_TOOLS_BY_NAME: Dict[str, MCPTool] = {tool.name: tool for tool in TOOL_DEFINITIONS}


def get_tool(name: str) -> Optional[MCPTool]:
    """Look up a tool definition by name."""
    return _TOOLS_BY_NAME.get(name)


async def handle_tools_list() -> MCPToolsListResponse:
    """
    Handle MCP tools/list request.

    Returns:
        List of MCP tools
    """
    logger.debug(f"Returning {len(TOOL_DEFINITIONS)} tools")
    return MCPToolsListResponse(tools=list(TOOL_DEFINITIONS))
