# Authentication Middleware
"""Bearer token authentication for the HTTP transport.

Clients present SERVICE_API_KEY as a Bearer token. The microCMS API key
itself is never accepted from clients; it stays in server configuration.
"""

import logging
from typing import Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from microcms_mcp.config import settings

logger = logging.getLogger("microcms.middleware.auth")


def verify_api_key(authorization: Optional[str]) -> bool:
    """
    Verify the service API key from an Authorization header.

    Args:
        authorization: Authorization header value (e.g., "Bearer xxx")

    Returns:
        True if the token matches SERVICE_API_KEY
    """
    if not authorization:
        return False

    # Extract token from "Bearer xxx" format
    parts = authorization.split(" ", 1)
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return False

    return parts[1].strip() == settings.service_api_key


class AuthMiddleware(BaseHTTPMiddleware):
    """Middleware to verify API key authentication."""

    # Paths that don't require authentication
    PUBLIC_PATHS = {"/health", "/health/", "/"}

    async def dispatch(self, request: Request, call_next):
        """Check authentication for protected endpoints."""
        path = request.url.path

        # Skip auth for CORS preflight requests
        if request.method == "OPTIONS":
            return await call_next(request)

        if path in self.PUBLIC_PATHS:
            return await call_next(request)

        # Dev mode: if service_api_key is empty, pass all requests through
        if not settings.service_api_key:
            logger.debug("Dev mode: SERVICE_API_KEY not set, skipping auth")
            return await call_next(request)

        if not verify_api_key(request.headers.get("Authorization")):
            logger.warning(f"Unauthorized request to {path}")
            return JSONResponse(
                status_code=401,
                content={"detail": "Invalid or missing API key"},
                headers={"WWW-Authenticate": "Bearer"},
            )

        return await call_next(request)
