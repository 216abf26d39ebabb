# microCMS Gateway HTTP Entry Point
"""FastAPI application with MCP SDK Streamable HTTP transport."""

import json
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.routing import Route

from microcms_mcp.config import settings
from microcms_mcp.handlers import handle_tools_call, handle_tools_list
from microcms_mcp.middleware.auth import AuthMiddleware
from microcms_mcp.middleware.correlation import CorrelationMiddleware
from microcms_mcp.server import ctx_correlation_id, log_startup_banner, session_manager
from microcms_mcp.services.microcms_client import microcms_client

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("microcms.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup; ConfigurationError aborts it
    settings.require_credentials()
    logger.info(f"Starting microCMS MCP Gateway v{settings.mcp_server_version}")
    log_startup_banner()

    # Start MCP SDK session manager (manages Streamable HTTP transport lifecycle)
    async with session_manager.run():
        yield

    # Shutdown
    logger.info("Shutting down microCMS MCP Gateway")
    await microcms_client.close()


app = FastAPI(
    title="microCMS MCP Gateway",
    description="MCP-compatible gateway for the microCMS content API",
    version=settings.mcp_server_version,
    lifespan=lifespan,
    openapi_url=None,
    docs_url=None,
    redoc_url=None,
)

# Add middleware (order matters - first added = outermost)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(CorrelationMiddleware)
app.add_middleware(AuthMiddleware)


# =============================================================================
# MCP SDK Streamable HTTP Transport at /mcp
# =============================================================================


class MCPTransport:
    """
    ASGI app that copies the correlation header into a contextvar, then
    delegates to the MCP SDK session manager.

    Starlette's Route treats class instances (non-function callables) as
    raw ASGI apps, passing (scope, receive, send) directly.
    """

    async def __call__(self, scope, receive, send):
        if scope["type"] == "http":
            headers = dict(scope.get("headers", []))
            ctx_correlation_id.set(
                headers.get(b"x-correlation-id", b"").decode() or None
            )
        await session_manager.handle_request(scope, receive, send)


# Bare /mcp path: POST for JSON-RPC, GET for SSE streaming, DELETE for
# session termination.
app.router.routes.insert(0, Route("/mcp", MCPTransport(), methods=["GET", "POST", "DELETE"]))


# =============================================================================
# Health Endpoints
# =============================================================================


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": settings.mcp_server_name,
        "version": settings.mcp_server_version,
    }


@app.get("/")
async def root():
    """Root endpoint with service info."""
    return {
        "service": settings.mcp_server_name,
        "version": settings.mcp_server_version,
        "protocol": settings.mcp_protocol_version,
        "endpoints": {
            "health": "/health",
            "mcp": "/mcp",
            "rest": "/rest/tools",
        },
    }


# =============================================================================
# REST Convenience Endpoints
# =============================================================================


@app.get("/rest/tools")
async def list_tools():
    """List available MCP tools (REST endpoint for testing)."""
    result = await handle_tools_list()
    return result.model_dump()


@app.post("/rest/tools/{name}/call")
async def call_tool(name: str, request: Request):
    """Execute an MCP tool (REST endpoint for testing)."""
    try:
        body = await request.json()
    except json.JSONDecodeError:
        body = {}
    if not isinstance(body, dict):
        body = {}

    # Accept both {"arguments": {...}} and bare arguments
    if isinstance(body.get("arguments"), dict):
        arguments = body["arguments"]
    else:
        arguments = body

    result = await handle_tools_call(
        name=name,
        arguments=arguments,
        correlation_id=getattr(request.state, "correlation_id", None),
    )
    return result.model_dump()


def run() -> None:
    """Run the HTTP transport with uvicorn."""
    import uvicorn

    uvicorn.run(
        "microcms_mcp.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
