# microCMS Client Service
"""HTTP client for the microCMS content API."""

import json
import logging
from typing import Any, Dict, Mapping, Optional

import httpx

from microcms_mcp.config import settings
from microcms_mcp.exceptions import ApiError, TransportError
from microcms_mcp.services.query_builder import build_path, build_query

logger = logging.getLogger("microcms.services.client")

API_KEY_HEADER = "X-MICROCMS-API-KEY"
_MASK_PREFIX_LENGTH = 5


def mask_api_key(api_key: Optional[str]) -> str:
    """Return a loggable form of the API key (short prefix only)."""
    if not api_key:
        return "(not set)"
    return f"{api_key[:_MASK_PREFIX_LENGTH]}..."


class MicroCMSClient:
    """
    HTTP client for the microCMS list-format APIs.

    Exposes list, get, create (POST), put, patch and delete. Every
    non-2xx response is raised as ApiError; network and decode failures
    are raised as TransportError. Nothing is retried.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        diagnostics: Optional[logging.Logger] = None,
    ):
        self.api_key = api_key if api_key is not None else settings.microcms_api_key
        self.base_url = (base_url or settings.microcms_base_url).rstrip("/")
        self.timeout = timeout or settings.microcms_timeout
        self._client: Optional[httpx.AsyncClient] = http_client
        self._owns_client = http_client is None
        self._log = diagnostics or logger

    async def __aenter__(self) -> "MicroCMSClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or (self._owns_client and self._client.is_closed):
            self._client = httpx.AsyncClient(timeout=httpx.Timeout(self.timeout))
            self._owns_client = True
        return self._client

    async def close(self):
        """Close the HTTP client if this instance created it."""
        if self._owns_client and self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    def _build_headers(self, with_body: bool = False) -> Dict[str, str]:
        """Build request headers."""
        headers = {API_KEY_HEADER: self.api_key}
        if with_body:
            headers["Content-Type"] = "application/json"
        return headers

    async def _request(
        self,
        method: str,
        path: str,
        query: str = "",
        data: Optional[Dict[str, Any]] = None,
    ) -> httpx.Response:
        """
        Send one request and normalize failures.

        Raises:
            ApiError: On a non-2xx response
            TransportError: When no response could be obtained
        """
        client = await self._get_client()
        url = f"{self.base_url}{path}{query}"

        self._log.debug(f"{method} Request URL: {url}")
        if data is not None:
            self._log.debug(
                f"{method} Data: {json.dumps(data, ensure_ascii=False, default=str)}"
            )

        try:
            response = await client.request(
                method,
                url,
                headers=self._build_headers(with_body=data is not None),
                json=data,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            reason = str(e) or type(e).__name__
            self._log.error(f"{method} {path} transport failure: {reason}")
            raise TransportError(f"{method} {path} failed: {reason}") from e

        if not response.is_success:
            error_text = response.text
            self._log.error(
                f"{method} Error: {response.status_code} {response.reason_phrase}"
            )
            if error_text:
                self._log.error(f"Error Response: {error_text}")
            raise ApiError(
                status_code=response.status_code,
                status_text=response.reason_phrase,
                body=error_text,
                method=method,
                path=path,
            )

        return response

    def _decode(self, response: httpx.Response, method: str, path: str) -> Any:
        """Decode a JSON body; an empty 2xx body decodes to {}."""
        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError as e:
            self._log.error(f"{method} {path} returned invalid JSON: {e}")
            raise TransportError(f"{method} {path} returned invalid JSON: {e}") from e

    async def get_list(
        self,
        endpoint: str,
        params: Optional[Mapping[str, Optional[Any]]] = None,
    ) -> Any:
        """
        Fetch a content list.

        Args:
            endpoint: API endpoint name (e.g. "blog")
            params: Optional query parameters (None values are omitted)

        Returns:
            Decoded list envelope ({"contents": [...], "totalCount": ...})
        """
        path = build_path(endpoint)
        response = await self._request("GET", path, query=build_query(params or {}))
        return self._decode(response, "GET", path)

    async def get_content(
        self,
        endpoint: str,
        content_id: str,
        params: Optional[Mapping[str, Optional[Any]]] = None,
    ) -> Any:
        """
        Fetch a single content item.

        Args:
            endpoint: API endpoint name
            content_id: Content ID
            params: Optional query parameters (fields, depth, draftKey)

        Returns:
            Decoded content object
        """
        path = build_path(endpoint, content_id)
        response = await self._request("GET", path, query=build_query(params or {}))
        return self._decode(response, "GET", path)

    async def create_content(self, endpoint: str, data: Dict[str, Any]) -> Any:
        """Create content with a server-generated ID (POST)."""
        path = build_path(endpoint)
        response = await self._request("POST", path, data=data)
        return self._decode(response, "POST", path)

    async def put_content(
        self,
        endpoint: str,
        content_id: str,
        data: Dict[str, Any],
    ) -> Any:
        """Create or replace content under a caller-supplied ID (PUT)."""
        path = build_path(endpoint, content_id)
        response = await self._request("PUT", path, data=data)
        return self._decode(response, "PUT", path)

    async def patch_content(
        self,
        endpoint: str,
        content_id: str,
        data: Dict[str, Any],
    ) -> Any:
        """Partially update existing content (PATCH)."""
        path = build_path(endpoint, content_id)
        response = await self._request("PATCH", path, data=data)
        return self._decode(response, "PATCH", path)

    async def delete_content(self, endpoint: str, content_id: str) -> Dict[str, bool]:
        """
        Delete content.

        microCMS answers DELETE without a body, so a success marker is
        returned instead.
        """
        path = build_path(endpoint, content_id)
        await self._request("DELETE", path)
        return {"success": True}


# Global client instance
microcms_client = MicroCMSClient()
