# microCMS Gateway Middleware
"""Request middleware for authentication and correlation tracking."""

from .auth import AuthMiddleware, verify_api_key
from .correlation import CORRELATION_HEADER, CorrelationMiddleware

__all__ = [
    "AuthMiddleware",
    "verify_api_key",
    "CorrelationMiddleware",
    "CORRELATION_HEADER",
]
