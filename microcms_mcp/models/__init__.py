# microCMS Gateway Models
"""Pydantic models for MCP protocol responses and batch results."""

from .content import (
    BatchItemOutcome,
    BatchMethod,
    BatchReport,
)
from .mcp import (
    MCPErrorCode,
    MCPResourceContents,
    MCPResourceTemplate,
    MCPTextContent,
    MCPTool,
    MCPToolsCallResponse,
    MCPToolsListResponse,
)

__all__ = [
    # MCP models
    "MCPErrorCode",
    "MCPTool",
    "MCPTextContent",
    "MCPToolsListResponse",
    "MCPToolsCallResponse",
    "MCPResourceTemplate",
    "MCPResourceContents",
    # Batch models
    "BatchMethod",
    "BatchItemOutcome",
    "BatchReport",
]
