# Query Builder
"""URL path and query-string construction for the microCMS content API."""

from typing import Any, Mapping, Optional
from urllib.parse import quote, urlencode

API_PREFIX = "/api/v1"


def build_path(endpoint: str, content_id: Optional[str] = None) -> str:
    """
    Build the API path for an endpoint or a single content item.

    Segments are used literally; escaping them is the caller's job.
    """
    if content_id is None:
        return f"{API_PREFIX}/{endpoint}"
    return f"{API_PREFIX}/{endpoint}/{content_id}"


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_query(params: Mapping[str, Optional[Any]]) -> str:
    """
    Build a query string from optional parameters.

    Parameters whose value is None or an empty string are left out.
    Order follows the mapping's insertion order.

    Args:
        params: Parameter name to value (None = not provided)

    Returns:
        "" when nothing is present, otherwise "?k=v&..." percent-encoded
    """
    present = [
        (key, _format_value(value))
        for key, value in params.items()
        if value is not None and value != ""
    ]
    if not present:
        return ""
    return "?" + urlencode(present, quote_via=quote)
