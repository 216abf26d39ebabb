# Correlation ID Middleware
"""Request correlation ID tracking for log tracing."""

import logging
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("microcms.middleware.correlation")

CORRELATION_HEADER = "X-Correlation-ID"


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Middleware to extract or generate correlation ID."""

    async def dispatch(self, request: Request, call_next):
        """Extract or generate correlation ID for request."""
        correlation_id = request.headers.get(CORRELATION_HEADER) or str(uuid.uuid4())
        request.state.correlation_id = correlation_id

        logger.debug(f"[{correlation_id}] {request.method} {request.url.path}")

        response = await call_next(request)
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
