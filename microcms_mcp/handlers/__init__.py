# microCMS Gateway Handlers
"""MCP protocol handlers."""

from .resources import handle_read_resource, handle_resource_templates_list
from .tools_call import handle_tools_call
from .tools_list import handle_tools_list

__all__ = [
    "handle_tools_list",
    "handle_tools_call",
    "handle_resource_templates_list",
    "handle_read_resource",
]
