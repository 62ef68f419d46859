"""Fixtures for route tests: the application over the in-memory executor."""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from seo_graph.features.clusters.dependencies import get_cluster_data_service
from seo_graph.features.clusters.services.cluster_data_service import (
    ClusterDataService,
)
from seo_graph.main import create_app


@pytest.fixture
def app(service: ClusterDataService) -> FastAPI:
    """Application whose cluster data service reads from the fake executor."""
    app = create_app()
    app.dependency_overrides[get_cluster_data_service] = lambda: service
    return app


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client bound to the application without a network."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as client:
        yield client
