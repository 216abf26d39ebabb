# MCP Tools Call Handler
"""Handles MCP tools/call request by dispatching to the microCMS client."""

import json
import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional

from jsonschema import Draft7Validator

from microcms_mcp.config import settings
from microcms_mcp.exceptions import ApiError, MicroCMSError
from microcms_mcp.handlers.tools_list import get_tool
from microcms_mcp.models.mcp import (
    MCPErrorCode,
    MCPTextContent,
    MCPToolsCallResponse,
)
from microcms_mcp.services.batch_executor import BatchExecutor
from microcms_mcp.services.microcms_client import microcms_client

logger = logging.getLogger("microcms.handlers.tools_call")

ToolHandler = Callable[[Dict[str, Any]], Awaitable[str]]

DEPRECATION_NOTICE = (
    "Note: update_content is deprecated. Use put_content or patch_content instead."
)


def _to_json(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False, default=str)


def _note_status(tool: str, arguments: Dict[str, Any]) -> None:
    """Publish status is accepted as-is; microCMS needs no extra handling."""
    status = arguments.get("status")
    if status:
        logger.debug(f"{tool}: status={status} passed through unchanged")


async def _get_contents(arguments: Dict[str, Any]) -> str:
    params = {
        "limit": arguments.get("limit"),
        "offset": arguments.get("offset"),
        "orders": arguments.get("orders"),
        "q": arguments.get("q"),
        "filters": arguments.get("filters"),
        "fields": arguments.get("fields"),
        "depth": arguments.get("depth"),
    }
    data = await microcms_client.get_list(arguments["endpoint"], params)
    return _to_json(data)


async def _get_content(arguments: Dict[str, Any]) -> str:
    params = {
        "fields": arguments.get("fields"),
        "depth": arguments.get("depth"),
        "draftKey": arguments.get("draftKey"),
    }
    data = await microcms_client.get_content(
        arguments["endpoint"], arguments["contentId"], params
    )
    return _to_json(data)


async def _search_contents(arguments: Dict[str, Any]) -> str:
    params = {
        "q": arguments["q"],
        "limit": arguments.get("limit"),
        "offset": arguments.get("offset"),
        "fields": arguments.get("fields"),
        "depth": arguments.get("depth"),
    }
    data = await microcms_client.get_list(arguments["endpoint"], params)
    return _to_json(data)


async def _filter_contents(arguments: Dict[str, Any]) -> str:
    params = {
        "filters": arguments["filters"],
        "limit": arguments.get("limit"),
        "offset": arguments.get("offset"),
        "fields": arguments.get("fields"),
        "depth": arguments.get("depth"),
    }
    data = await microcms_client.get_list(arguments["endpoint"], params)
    return _to_json(data)


async def _create_content(arguments: Dict[str, Any]) -> str:
    _note_status("create_content", arguments)
    result = await microcms_client.create_content(
        arguments["endpoint"], dict(arguments["data"])
    )
    content_id = result.get("id") if isinstance(result, dict) else None
    return f"Created content (ID: {content_id}):\n{_to_json(result)}"


async def _put_content(arguments: Dict[str, Any]) -> str:
    _note_status("put_content", arguments)
    content_id = arguments["contentId"]
    result = await microcms_client.put_content(
        arguments["endpoint"], content_id, dict(arguments["data"])
    )
    return f"Created/updated content (ID: {content_id}):\n{_to_json(result)}"


async def _patch_content(arguments: Dict[str, Any]) -> str:
    content_id = arguments["contentId"]
    result = await microcms_client.patch_content(
        arguments["endpoint"], content_id, dict(arguments["data"])
    )
    return f"Patched content (ID: {content_id}):\n{_to_json(result)}"


async def _update_content(arguments: Dict[str, Any]) -> str:
    content_id = arguments["contentId"]
    result = await microcms_client.put_content(
        arguments["endpoint"], content_id, dict(arguments["data"])
    )
    return (
        f"Updated content (ID: {content_id}):\n{_to_json(result)}\n\n"
        f"{DEPRECATION_NOTICE}"
    )


async def _delete_content(arguments: Dict[str, Any]) -> str:
    content_id = arguments["contentId"]
    await microcms_client.delete_content(arguments["endpoint"], content_id)
    return f"Deleted content (ID: {content_id}) from {arguments['endpoint']}"


async def _batch_create_contents(arguments: Dict[str, Any]) -> str:
    executor = BatchExecutor(microcms_client, settings.batch_max_concurrency)
    report = await executor.run(
        arguments["endpoint"],
        arguments["contents"],
        arguments.get("method") or "post",
    )
    details = [outcome.model_dump(exclude_none=True) for outcome in report.results]
    return (
        f"Batch create results ({report.method.value.upper()}):\n"
        f"Succeeded: {report.succeeded}\n"
        f"Failed: {report.failed}\n\n"
        f"Details:\n{_to_json(details)}"
    )


TOOL_HANDLERS: Dict[str, ToolHandler] = {
    "get_contents": _get_contents,
    "get_content": _get_content,
    "search_contents": _search_contents,
    "filter_contents": _filter_contents,
    "create_content": _create_content,
    "put_content": _put_content,
    "patch_content": _patch_content,
    "update_content": _update_content,
    "delete_content": _delete_content,
    "batch_create_contents": _batch_create_contents,
}


async def handle_tools_call(
    name: str,
    arguments: Dict[str, Any],
    correlation_id: Optional[str] = None,
) -> MCPToolsCallResponse:
    """
    Handle MCP tools/call request.

    1. Look up the tool
    2. Validate arguments against its JSON Schema
    3. Run the microCMS operation (or batch)
    4. Return the rendered result, or an error response

    Never raises: every failure becomes a response with isError=True.

    Args:
        name: Tool name
        arguments: Tool arguments
        correlation_id: Request correlation ID (logging only)

    Returns:
        MCP tool call response
    """
    prefix = f"[{correlation_id}] " if correlation_id else ""

    tool = get_tool(name)
    handler = TOOL_HANDLERS.get(name)
    if tool is None or handler is None:
        logger.warning(f"{prefix}Unknown tool: {name}")
        return _error_response(MCPErrorCode.TOOL_NOT_FOUND, f"Tool '{name}' not found")

    validation_errors = _validate_arguments(arguments, tool.inputSchema)
    if validation_errors:
        return _error_response(
            MCPErrorCode.INVALID_ARGUMENT,
            f"Invalid arguments: {'; '.join(validation_errors)}",
        )

    try:
        logger.info(f"{prefix}Executing tool: {name}")
        text = await handler(arguments)
    except ApiError as e:
        logger.error(f"{prefix}Tool {name} failed with HTTP {e.status_code}")
        return _error_response(MCPErrorCode.API_ERROR, str(e))
    except MicroCMSError as e:
        logger.error(f"{prefix}Tool {name} failed: {e}")
        return _error_response(MCPErrorCode.EXECUTION_ERROR, str(e))
    except Exception as e:
        logger.exception(f"{prefix}Error executing tool {name}: {e}")
        return _error_response(
            MCPErrorCode.EXECUTION_ERROR,
            f"Execution failed: {str(e)}",
        )

    return MCPToolsCallResponse(
        content=[MCPTextContent(type="text", text=text)],
        isError=False,
    )


def _validate_arguments(
    arguments: Dict[str, Any],
    schema: Dict[str, Any],
) -> List[str]:
    """
    Validate arguments against JSON Schema.

    Returns list of error messages, empty if valid.
    """
    if not schema:
        return []

    validator = Draft7Validator(schema)
    errors = sorted(validator.iter_errors(arguments), key=lambda e: e.json_path)
    return [f"{e.json_path}: {e.message}" for e in errors]


def _error_response(code: MCPErrorCode, message: str) -> MCPToolsCallResponse:
    """Create an error response."""
    logger.debug(f"Tool error {code.value}: {message}")
    return MCPToolsCallResponse(
        content=[MCPTextContent(type="text", text=f"Error: {message}")],
        isError=True,
    )
