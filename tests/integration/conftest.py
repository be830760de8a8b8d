"""Pytest fixtures for API integration tests."""

import httpx
import pytest_asyncio

from webapi.deps import get_order_repository
from webapi.main import app


@pytest_asyncio.fixture
async def api_client(order_repository):
    """HTTP client bound to the app with the test repository injected."""
    app.dependency_overrides[get_order_repository] = lambda: order_repository

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
