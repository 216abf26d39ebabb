# Tools Call Tests
"""Tests for tools/call dispatch, rendering and error handling."""

import json
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from microcms_mcp.exceptions import ApiError, TransportError
from microcms_mcp.handlers.tools_call import DEPRECATION_NOTICE, handle_tools_call

CLIENT_PATH = "microcms_mcp.handlers.tools_call.microcms_client"


def _mock_client():
    client = MagicMock()
    for name in (
        "get_list",
        "get_content",
        "create_content",
        "put_content",
        "patch_content",
        "delete_content",
    ):
        setattr(client, name, AsyncMock())
    return client


class TestDispatch:
    """Test lookup and argument validation."""

    @pytest.mark.asyncio
    async def test_unknown_tool(self):
        result = await handle_tools_call("nonexistent_tool", {})

        assert result.isError is True
        assert result.content[0].text == "Error: Tool 'nonexistent_tool' not found"

    @pytest.mark.asyncio
    async def test_missing_required_argument(self):
        mock_client = _mock_client()
        with patch(CLIENT_PATH, mock_client):
            result = await handle_tools_call("get_content", {"endpoint": "blog"})

        assert result.isError is True
        assert result.content[0].text.startswith("Error: Invalid arguments:")
        assert "contentId" in result.content[0].text
        mock_client.get_content.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_wrong_argument_type(self):
        mock_client = _mock_client()
        with patch(CLIENT_PATH, mock_client):
            result = await handle_tools_call(
                "get_contents", {"endpoint": "blog", "limit": "ten"}
            )

        assert result.isError is True
        assert "$.limit" in result.content[0].text
        mock_client.get_list.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_invalid_batch_method(self):
        mock_client = _mock_client()
        with patch(CLIENT_PATH, mock_client):
            result = await handle_tools_call(
                "batch_create_contents",
                {"endpoint": "blog", "contents": [], "method": "delete"},
            )

        assert result.isError is True
        assert "$.method" in result.content[0].text


class TestReadTools:
    """Test read tool rendering."""

    @pytest.mark.asyncio
    async def test_get_contents_passes_params_in_order(self, sample_list):
        mock_client = _mock_client()
        mock_client.get_list.return_value = sample_list

        with patch(CLIENT_PATH, mock_client):
            result = await handle_tools_call(
                "get_contents",
                {"endpoint": "blog", "limit": 5, "orders": "-publishedAt"},
            )

        assert result.isError is False
        assert json.loads(result.content[0].text) == sample_list
        endpoint, params = mock_client.get_list.await_args.args
        assert endpoint == "blog"
        assert list(params) == ["limit", "offset", "orders", "q", "filters", "fields", "depth"]
        assert params["limit"] == 5
        assert params["orders"] == "-publishedAt"
        assert params["q"] is None

    @pytest.mark.asyncio
    async def test_get_content(self, sample_content):
        mock_client = _mock_client()
        mock_client.get_content.return_value = sample_content

        with patch(CLIENT_PATH, mock_client):
            result = await handle_tools_call(
                "get_content",
                {"endpoint": "blog", "contentId": "abc123", "draftKey": "dk"},
            )

        assert json.loads(result.content[0].text) == sample_content
        endpoint, content_id, params = mock_client.get_content.await_args.args
        assert (endpoint, content_id) == ("blog", "abc123")
        assert params["draftKey"] == "dk"

    @pytest.mark.asyncio
    async def test_search_contents_puts_query_first(self, sample_list):
        mock_client = _mock_client()
        mock_client.get_list.return_value = sample_list

        with patch(CLIENT_PATH, mock_client):
            await handle_tools_call("search_contents", {"endpoint": "blog", "q": "hello"})

        params = mock_client.get_list.await_args.args[1]
        assert list(params)[0] == "q"
        assert params["q"] == "hello"

    @pytest.mark.asyncio
    async def test_filter_contents_puts_filters_first(self, sample_list):
        mock_client = _mock_client()
        mock_client.get_list.return_value = sample_list

        with patch(CLIENT_PATH, mock_client):
            await handle_tools_call(
                "filter_contents",
                {"endpoint": "blog", "filters": "category[equals]news"},
            )

        params = mock_client.get_list.await_args.args[1]
        assert list(params)[0] == "filters"

    @pytest.mark.asyncio
    async def test_non_ascii_rendered_verbatim(self):
        mock_client = _mock_client()
        mock_client.get_content.return_value = {"id": "x", "title": "こんにちは"}

        with patch(CLIENT_PATH, mock_client):
            result = await handle_tools_call(
                "get_content", {"endpoint": "blog", "contentId": "x"}
            )

        assert "こんにちは" in result.content[0].text


class TestWriteTools:
    """Test write tool rendering."""

    @pytest.mark.asyncio
    async def test_create_content(self):
        mock_client = _mock_client()
        mock_client.create_content.return_value = {"id": "generated-id"}

        with patch(CLIENT_PATH, mock_client):
            result = await handle_tools_call(
                "create_content", {"endpoint": "blog", "data": {"title": "Hello"}}
            )

        assert result.isError is False
        text = result.content[0].text
        assert text.startswith("Created content (ID: generated-id):\n")
        mock_client.create_content.assert_awaited_once_with("blog", {"title": "Hello"})

    @pytest.mark.asyncio
    async def test_status_is_accepted_and_not_forwarded(self):
        mock_client = _mock_client()
        mock_client.create_content.return_value = {"id": "generated-id"}

        with patch(CLIENT_PATH, mock_client):
            result = await handle_tools_call(
                "create_content",
                {"endpoint": "blog", "data": {"title": "Draft"}, "status": "draft"},
            )

        assert result.isError is False
        mock_client.create_content.assert_awaited_once_with("blog", {"title": "Draft"})

    @pytest.mark.asyncio
    async def test_put_content(self):
        mock_client = _mock_client()
        mock_client.put_content.return_value = {"id": "my-id"}

        with patch(CLIENT_PATH, mock_client):
            result = await handle_tools_call(
                "put_content",
                {"endpoint": "authors", "contentId": "my-id", "data": {"name": "Alice"}},
            )

        assert result.content[0].text.startswith("Created/updated content (ID: my-id):\n")
        mock_client.put_content.assert_awaited_once_with("authors", "my-id", {"name": "Alice"})

    @pytest.mark.asyncio
    async def test_patch_content(self):
        mock_client = _mock_client()
        mock_client.patch_content.return_value = {"id": "abc123"}

        with patch(CLIENT_PATH, mock_client):
            result = await handle_tools_call(
                "patch_content",
                {"endpoint": "blog", "contentId": "abc123", "data": {"title": "New"}},
            )

        assert result.content[0].text.startswith("Patched content (ID: abc123):\n")
        mock_client.patch_content.assert_awaited_once_with("blog", "abc123", {"title": "New"})

    @pytest.mark.asyncio
    async def test_update_content_carries_deprecation_notice(self):
        mock_client = _mock_client()
        mock_client.put_content.return_value = {"id": "abc123"}

        with patch(CLIENT_PATH, mock_client):
            result = await handle_tools_call(
                "update_content",
                {"endpoint": "blog", "contentId": "abc123", "data": {"title": "New"}},
            )

        text = result.content[0].text
        assert result.isError is False
        assert text.startswith("Updated content (ID: abc123):\n")
        assert text.endswith(DEPRECATION_NOTICE)
        mock_client.put_content.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_delete_content(self):
        mock_client = _mock_client()
        mock_client.delete_content.return_value = {"success": True}

        with patch(CLIENT_PATH, mock_client):
            result = await handle_tools_call(
                "delete_content", {"endpoint": "blog", "contentId": "abc123"}
            )

        assert result.isError is False
        assert result.content[0].text == "Deleted content (ID: abc123) from blog"


class TestBatchTool:
    """Test batch_create_contents rendering."""

    @pytest.mark.asyncio
    async def test_batch_summary_and_details(self):
        mock_client = _mock_client()
        mock_client.create_content.side_effect = [
            {"id": "a"},
            ApiError(400, "Bad Request", body="invalid", method="POST", path="/api/v1/blog"),
        ]

        with patch(CLIENT_PATH, mock_client):
            result = await handle_tools_call(
                "batch_create_contents",
                {"endpoint": "blog", "contents": [{"title": "ok"}, {"title": ""}]},
            )

        assert result.isError is False
        text = result.content[0].text
        header, details = text.split("\n\nDetails:\n")
        assert header == "Batch create results (POST):\nSucceeded: 1\nFailed: 1"
        entries = json.loads(details)
        assert entries[0] == {"index": 0, "success": True, "data": {"id": "a"}}
        assert entries[1]["success"] is False
        assert entries[1]["status_code"] == 400
        assert entries[1]["data"] == {"title": ""}

    @pytest.mark.asyncio
    async def test_batch_put(self):
        mock_client = _mock_client()
        mock_client.put_content.return_value = {"id": "one"}

        with patch(CLIENT_PATH, mock_client):
            result = await handle_tools_call(
                "batch_create_contents",
                {"endpoint": "blog", "contents": [{"id": "one"}], "method": "put"},
            )

        assert result.content[0].text.startswith("Batch create results (PUT):\n")
        mock_client.put_content.assert_awaited_once_with("blog", "one", {})


class TestErrorRendering:
    """Test failure conversion into error results."""

    @pytest.mark.asyncio
    async def test_api_error(self):
        mock_client = _mock_client()
        mock_client.get_content.side_effect = ApiError(
            404, "Not Found", method="GET", path="/api/v1/blog/missing"
        )

        with patch(CLIENT_PATH, mock_client):
            result = await handle_tools_call(
                "get_content", {"endpoint": "blog", "contentId": "missing"}
            )

        assert result.isError is True
        assert result.content[0].text == "Error: GET /api/v1/blog/missing failed: 404 Not Found"

    @pytest.mark.asyncio
    async def test_transport_error(self):
        mock_client = _mock_client()
        mock_client.get_list.side_effect = TransportError("GET /api/v1/blog failed: timed out")

        with patch(CLIENT_PATH, mock_client):
            result = await handle_tools_call("get_contents", {"endpoint": "blog"})

        assert result.isError is True
        assert result.content[0].text == "Error: GET /api/v1/blog failed: timed out"

    @pytest.mark.asyncio
    async def test_unexpected_exception(self):
        mock_client = _mock_client()
        mock_client.get_list.side_effect = RuntimeError("boom")

        with patch(CLIENT_PATH, mock_client):
            result = await handle_tools_call("get_contents", {"endpoint": "blog"})

        assert result.isError is True
        assert result.content[0].text == "Error: Execution failed: boom"


class TestEndToEnd:
    """Drive tool calls through a real client over a mock transport."""

    @pytest.mark.asyncio
    async def test_get_contents_request_url(self, make_client, sample_list):
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(200, json=sample_list)

        with patch(CLIENT_PATH, make_client(handler)):
            result = await handle_tools_call(
                "get_contents", {"endpoint": "blog", "limit": 5, "q": "hello world"}
            )

        assert result.isError is False
        assert str(requests[0].url) == (
            "https://example.microcms.io/api/v1/blog?limit=5&q=hello%20world"
        )

    @pytest.mark.asyncio
    async def test_not_found_becomes_error_result(self, make_client):
        def handler(request):
            return httpx.Response(404, text='{"message":"Content is not found."}')

        with patch(CLIENT_PATH, make_client(handler)):
            result = await handle_tools_call(
                "get_content", {"endpoint": "blog", "contentId": "missing"}
            )

        assert result.isError is True
        assert "404" in result.content[0].text
        assert "Content is not found." in result.content[0].text

    @pytest.mark.asyncio
    async def test_delete_missing_content(self, make_client):
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(404)

        with patch(CLIENT_PATH, make_client(handler)):
            result = await handle_tools_call(
                "delete_content", {"endpoint": "blog", "contentId": "missing"}
            )

        assert len(requests) == 1
        assert requests[0].method == "DELETE"
        assert result.isError is True
        assert "404" in result.content[0].text
        assert "success" not in result.content[0].text

    @pytest.mark.asyncio
    async def test_batch_continues_after_failure(self, make_client):
        seen = []

        def handler(request):
            body = json.loads(request.content)
            seen.append(body["title"])
            if body["title"] == "bad":
                return httpx.Response(400, text="invalid field")
            return httpx.Response(201, json={"id": body["title"]})

        with patch(CLIENT_PATH, make_client(handler)):
            result = await handle_tools_call(
                "batch_create_contents",
                {
                    "endpoint": "blog",
                    "contents": [{"title": "first"}, {"title": "bad"}, {"title": "last"}],
                },
            )

        assert seen == ["first", "bad", "last"]
        assert "Succeeded: 2\nFailed: 1" in result.content[0].text
