"""
microCMS MCP Gateway - MCP tools and resources for the microCMS content API.

Tool calls are translated into microCMS REST requests (list, get, create,
put, patch, delete) and batch creates; results and errors are rendered as
MCP text content.
"""

from .exceptions import (
    ApiError,
    ConfigurationError,
    ItemError,
    MicroCMSError,
    TransportError,
)
from .models.content import BatchItemOutcome, BatchMethod, BatchReport
from .services.batch_executor import BatchExecutor
from .services.microcms_client import MicroCMSClient
from .services.query_builder import build_path, build_query

__version__ = "1.0.0"

__all__ = [
    # Errors
    "MicroCMSError",
    "ConfigurationError",
    "ApiError",
    "TransportError",
    "ItemError",
    # Client
    "MicroCMSClient",
    "build_path",
    "build_query",
    # Batch
    "BatchExecutor",
    "BatchMethod",
    "BatchItemOutcome",
    "BatchReport",
]
