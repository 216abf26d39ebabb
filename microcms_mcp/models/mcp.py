# MCP Protocol Models
"""Pydantic models for MCP (Model Context Protocol) messages."""

from enum import Enum
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field


class MCPErrorCode(str, Enum):
    """MCP error codes."""

    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    TOOL_NOT_FOUND = "TOOL_NOT_FOUND"
    API_ERROR = "API_ERROR"
    EXECUTION_ERROR = "EXECUTION_ERROR"


class MCPTool(BaseModel):
    """MCP tool definition."""

    name: str = Field(..., description="Tool name")
    description: str = Field(..., description="Tool description")
    inputSchema: Dict[str, Any] = Field(..., description="JSON Schema for tool input")
    readOnly: bool = Field(default=True, description="Tool does not modify content")
    destructive: bool = Field(default=False, description="Tool may delete content")


class MCPTextContent(BaseModel):
    """MCP text content block."""

    type: Literal["text"] = "text"
    text: str = Field(..., description="Text content")


class MCPToolsListResponse(BaseModel):
    """MCP tools/list response."""

    tools: List[MCPTool] = Field(..., description="Available tools")


class MCPToolsCallResponse(BaseModel):
    """MCP tools/call response."""

    content: List[MCPTextContent] = Field(..., description="Result content")
    isError: bool = Field(default=False, description="Error flag")


class MCPResourceTemplate(BaseModel):
    """MCP resource template definition."""

    uriTemplate: str = Field(..., description="RFC 6570 URI template")
    name: str = Field(..., description="Template name")
    description: Optional[str] = Field(default=None, description="Template description")
    mimeType: Optional[str] = Field(default=None, description="Content MIME type")


class MCPResourceContents(BaseModel):
    """Text contents of a read resource."""

    uri: str = Field(..., description="Resource URI that was read")
    text: str = Field(..., description="Resource body")
    mimeType: str = Field(default="application/json", description="Content MIME type")
    isError: bool = Field(default=False, description="Whether the read failed")
