# Tool Converter Service
"""
Converts internal tool and resource models to MCP SDK types.

The internal models keep the camelCase field names MCP uses, so the
conversion mostly copies fields and derives tool annotations from the
readOnly / destructive flags.
"""

from typing import List

import mcp.types as types

from microcms_mcp.models.mcp import MCPResourceTemplate, MCPTool


class ToolConverter:
    """Converts MCPTool and MCPResourceTemplate models to SDK types."""

    @staticmethod
    def to_sdk_tool(tool: MCPTool) -> types.Tool:
        """
        Convert an MCPTool to an MCP SDK types.Tool with annotations.

        Args:
            tool: MCPTool instance (internal model)

        Returns:
            MCP SDK types.Tool with ToolAnnotations
        """
        return types.Tool(
            name=tool.name,
            description=tool.description,
            inputSchema=tool.inputSchema,
            annotations=types.ToolAnnotations(
                readOnlyHint=tool.readOnly,
                destructiveHint=tool.destructive,
                idempotentHint=tool.readOnly,
                openWorldHint=True,
            ),
        )

    @staticmethod
    def to_sdk_tools(tools: List[MCPTool]) -> List[types.Tool]:
        """Convert a list of MCPTools to MCP SDK types.Tool list."""
        return [ToolConverter.to_sdk_tool(t) for t in tools]

    @staticmethod
    def to_sdk_resource_template(template: MCPResourceTemplate) -> types.ResourceTemplate:
        """Convert an MCPResourceTemplate to an MCP SDK types.ResourceTemplate."""
        return types.ResourceTemplate(
            uriTemplate=template.uriTemplate,
            name=template.name,
            description=template.description,
            mimeType=template.mimeType,
        )
