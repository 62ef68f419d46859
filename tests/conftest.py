"""Pytest configuration and shared fixtures for all tests.

Unit tests run against an in-memory query executor. Integration tests that
need PostgreSQL use the ``postgres_pool`` fixture, which skips when no
server is reachable.
"""

from collections.abc import AsyncGenerator

import asyncpg
import pytest
import pytest_asyncio

from seo_graph.core.settings import Settings
from seo_graph.db.postgres.schema import SCHEMA_STATEMENTS, TABLES
from seo_graph.features.clusters.models.seo_model import Direction, EntityType, SeoEntity
from seo_graph.features.clusters.services.cluster_data_service import (
    ClusterDataService,
)
from seo_graph.features.clusters.services.events import ClusterEvent, EventPublisher
from seo_graph.features.clusters.services.graph_session import GraphSession
from tests.utils.fake_executor import FakeQueryExecutor


@pytest.fixture
def test_settings() -> Settings:
    """Provide test settings with testing mode enabled."""
    return Settings(testing=True)


@pytest.fixture
def fake_executor() -> FakeQueryExecutor:
    """Query executor returning canned rows."""
    return FakeQueryExecutor()


@pytest.fixture
def service(
    fake_executor: FakeQueryExecutor, test_settings: Settings
) -> ClusterDataService:
    """ClusterDataService over the fake executor."""
    return ClusterDataService(fake_executor, test_settings)


@pytest.fixture
def published_events() -> list[ClusterEvent]:
    """Collects every event published through the ``publisher`` fixture."""
    return []


@pytest.fixture
def publisher(published_events: list[ClusterEvent]) -> EventPublisher:
    """Event publisher recording into ``published_events``."""
    publisher = EventPublisher()
    _ = publisher.subscribe(published_events.append)
    return publisher


@pytest.fixture
def cluster_root() -> SeoEntity:
    """Root node of a graph session."""
    return SeoEntity(
        id="c1",
        name="Running Shoes",
        type=EntityType.TOPIC_CLUSTER,
        search_volume=50000,
        difficulty=42.0,
        has_more=True,
        direction=Direction.ROOT,
    )


@pytest.fixture
def graph_session(cluster_root: SeoEntity) -> GraphSession:
    """Graph session seeded with ``cluster_root``."""
    return GraphSession(cluster_root)


@pytest_asyncio.fixture
async def postgres_pool(test_settings: Settings) -> AsyncGenerator[asyncpg.Pool, None]:
    """Provide a PostgreSQL pool on a schema with empty SEO tables.

    Skips the test when the test database is unreachable.
    """
    try:
        pool = await asyncpg.create_pool(
            user=test_settings.postgres_user,
            password=test_settings.postgres_password,
            host=test_settings.postgres_host,
            port=test_settings.postgres_port,
            database=test_settings.test_postgres_db,
            min_size=1,
            max_size=4,
        )
    except (OSError, asyncpg.PostgresError) as e:
        pytest.skip(f"PostgreSQL test database unavailable: {e}")

    async with pool.acquire() as conn:
        for statement in SCHEMA_STATEMENTS:
            await conn.execute(statement)
        await conn.execute(f"TRUNCATE TABLE {', '.join(TABLES)};")

    yield pool

    async with pool.acquire() as conn:
        await conn.execute(f"TRUNCATE TABLE {', '.join(TABLES)};")
    await pool.close()
