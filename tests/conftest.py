# Test Configuration
"""Pytest fixtures for microCMS gateway tests."""

import logging
import os

# Configure credentials before importing app modules (settings load on import)
os.environ["MICROCMS_API_KEY"] = "test-api-key-123"
os.environ["MICROCMS_BASE_URL"] = "https://example.microcms.io/"

import httpx
import pytest
from fastapi.testclient import TestClient

from microcms_mcp.config import settings
from microcms_mcp.main import app
from microcms_mcp.services.microcms_client import MicroCMSClient

# Ensure auth is enforced during tests (non-empty = auth required)
_TEST_SERVICE_API_KEY = "test-service-key"
settings.service_api_key = _TEST_SERVICE_API_KEY

TEST_API_KEY = "test-api-key-123"
TEST_BASE_URL = "https://example.microcms.io"


@pytest.fixture
def client():
    """Test client for the HTTP transport (lifespan not started)."""
    return TestClient(app)


@pytest.fixture
def auth_headers():
    """Authorization headers for authenticated requests."""
    return {"Authorization": f"Bearer {_TEST_SERVICE_API_KEY}"}


@pytest.fixture
def silent_logger():
    """Diagnostic sink that drops everything."""
    log = logging.getLogger("microcms.tests.silent")
    log.disabled = True
    return log


@pytest.fixture
def make_client(silent_logger):
    """
    Factory for a MicroCMSClient backed by httpx.MockTransport.

    The handler receives each httpx.Request and returns an httpx.Response.
    """

    def _make(handler, diagnostics=None):
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return MicroCMSClient(
            api_key=TEST_API_KEY,
            base_url=TEST_BASE_URL,
            http_client=http_client,
            diagnostics=diagnostics or silent_logger,
        )

    return _make


@pytest.fixture
def sample_content():
    """Sample content item as returned by microCMS."""
    return {
        "id": "abc123",
        "title": "Hello microCMS",
        "body": "<p>First post</p>",
        "createdAt": "2024-01-01T00:00:00.000Z",
        "updatedAt": "2024-01-01T00:00:00.000Z",
        "publishedAt": "2024-01-01T00:00:00.000Z",
    }


@pytest.fixture
def sample_list(sample_content):
    """Sample list envelope as returned by microCMS."""
    return {
        "contents": [sample_content],
        "totalCount": 1,
        "offset": 0,
        "limit": 10,
    }
