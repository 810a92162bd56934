"""Fixtures for route tests: the app wired to an in-memory store."""

from collections.abc import AsyncGenerator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from til.features.facts.dependencies import get_fact_repository, get_session_registry
from til.features.facts.state import SessionRegistry
from til.main import create_app
from tests.utils.fake_store import InMemoryFactRepository


@pytest.fixture
def app(seeded_repository: InMemoryFactRepository) -> FastAPI:
    """Create a test app whose remote store is the in-memory repository."""
    app = create_app()
    registry = SessionRegistry()

    async def mock_get_fact_repository() -> InMemoryFactRepository:
        return seeded_repository

    app.dependency_overrides[get_fact_repository] = mock_get_fact_repository
    app.dependency_overrides[get_session_registry] = lambda: registry
    return app


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client for testing."""
    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport, base_url="http://test", follow_redirects=True
    ) as client:
        yield client
