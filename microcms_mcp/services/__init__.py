# microCMS Gateway Services
"""Service layer for the microCMS gateway."""

from .batch_executor import BatchExecutor
from .microcms_client import MicroCMSClient, mask_api_key, microcms_client
from .query_builder import build_path, build_query
from .tool_converter import ToolConverter

__all__ = [
    "BatchExecutor",
    "MicroCMSClient",
    "mask_api_key",
    "microcms_client",
    "build_path",
    "build_query",
    "ToolConverter",
]
