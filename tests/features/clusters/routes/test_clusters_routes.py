"""Route tests for the cluster read endpoints."""

import pytest
from httpx import AsyncClient

from seo_graph.features.clusters.models.fetch_result import PUBLIC_FETCH_ERROR
from seo_graph.features.clusters.repositories import queries
from tests.utils.fake_executor import INSIDE, OUTSIDE, FakeQueryExecutor

BASE = "/api/v1/seo/clusters"


@pytest.mark.asyncio
async def test_health(client: AsyncClient) -> None:
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}
    assert "x-request-id" in response.headers


@pytest.mark.asyncio
async def test_database_health(
    client: AsyncClient, fake_executor: FakeQueryExecutor
) -> None:
    fake_executor.set_rows(queries.PING, [{"ok": 1}])

    response = await client.get("/health/db")

    assert response.status_code == 200
    assert response.json() == {"status": "connected"}


@pytest.mark.asyncio
async def test_database_health_unreachable(
    client: AsyncClient, fake_executor: FakeQueryExecutor
) -> None:
    fake_executor.set_error(queries.PING, OSError("refused"))

    response = await client.get("/health/db")

    assert response.status_code == 503


@pytest.mark.asyncio
async def test_list_clusters(
    client: AsyncClient, fake_executor: FakeQueryExecutor
) -> None:
    """Should return clusters in camelCase with a success notification."""
    fake_executor.set_rows(
        queries.LIST_CLUSTERS,
        [
            {"id": "a", "name": "A", "search_volume": 50000, "has_more": True},
            {"id": "b", "name": "B", "search_volume": 20000, "has_more": False},
        ],
    )

    response = await client.get(BASE)

    assert response.status_code == 200
    body = response.json()
    assert [c["searchVolume"] for c in body["clusters"]] == [50000, 20000]
    assert body["clusters"][0]["hasMore"] is True
    assert body["clusters"][0]["type"] == "topic_cluster"
    assert body["status"] == "loaded"
    assert body["notification"]["description"] == "Loaded 2 topic clusters"
    assert body["notification"]["variant"] == "success"


@pytest.mark.asyncio
async def test_list_clusters_empty_is_not_an_error(client: AsyncClient) -> None:
    response = await client.get(BASE)

    assert response.status_code == 200
    assert response.json()["status"] == "empty"
    assert response.json()["clusters"] == []


@pytest.mark.asyncio
async def test_list_clusters_failure_is_blocking(
    client: AsyncClient, fake_executor: FakeQueryExecutor
) -> None:
    """Should answer 503 so the dashboard shows its connection error state."""
    fake_executor.set_error(queries.LIST_CLUSTERS, OSError("refused"))

    response = await client.get(BASE)

    assert response.status_code == 503
    detail = response.json()["detail"]
    assert detail["variant"] == "destructive"
    assert detail["description"] == (
        f"Failed to load topic clusters: {PUBLIC_FETCH_ERROR}"
    )
    assert "refused" not in response.text


@pytest.mark.asyncio
async def test_stats_failure_is_transient(
    client: AsyncClient, fake_executor: FakeQueryExecutor
) -> None:
    """Should answer 200 with zeroed stats and a notification."""
    fake_executor.set_error(queries.CLUSTER_STATS, OSError("timeout"))

    response = await client.get(f"{BASE}/c1/stats")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "failed"
    assert body["stats"]["totalSearchVolume"] == 0
    assert body["stats"]["avgDifficulty"] == 0.0
    assert body["notification"]["variant"] == "destructive"


@pytest.mark.asyncio
async def test_stats_without_rows(client: AsyncClient) -> None:
    response = await client.get(f"{BASE}/unknown/stats")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "empty"
    assert body["notification"] is None
    assert set(body["stats"].values()) == {0}


@pytest.mark.asyncio
async def test_expansion(client: AsyncClient, fake_executor: FakeQueryExecutor) -> None:
    fake_executor.set_rows(
        INSIDE, [{"id": "k1", "name": "kw", "type": "keyword", "has_more": False}]
    )
    fake_executor.set_rows(
        OUTSIDE, [{"id": "x1", "name": "rival", "type": "competitor"}]
    )
    fake_executor.set_rows(
        queries.CLUSTER_EDGES,
        [
            {
                "id": "r1",
                "from_id": "c1",
                "to_id": "k1",
                "relationship_type": "keyword_cluster",
            }
        ],
    )

    response = await client.get(f"{BASE}/c1/expansion")

    assert response.status_code == 200
    body = response.json()
    assert body["inside"][0]["direction"] == "inside"
    assert body["outside"][0]["direction"] == "outside"
    assert body["edges"][0]["fromId"] == "c1"
    assert body["edges"][0]["strength"] == 0.5
    assert body["edges"][0]["relationshipType"] == "keyword_cluster"


@pytest.mark.asyncio
async def test_expansion_failure(
    client: AsyncClient, fake_executor: FakeQueryExecutor
) -> None:
    fake_executor.set_error(
        queries.CLUSTER_EDGES, OSError('relation "seo_relationships" does not exist')
    )

    response = await client.get(f"{BASE}/c1/expansion")

    assert response.status_code == 502
    assert "seo_relationships" not in response.text


@pytest.mark.asyncio
async def test_competitors(client: AsyncClient, fake_executor: FakeQueryExecutor) -> None:
    fake_executor.set_rows(
        queries.COMPETITOR_OVERLAP,
        [{"id": "x1", "name": "rival.com", "url": None, "shared_keywords": 4}],
    )

    response = await client.get(f"{BASE}/c1/competitors")

    assert response.status_code == 200
    [competitor] = response.json()["entities"]
    assert competitor["hasMore"] is True
    assert competitor["metadata"] == {"shared_keywords": 4}


@pytest.mark.asyncio
async def test_keyword_opportunities_failure(
    client: AsyncClient, fake_executor: FakeQueryExecutor
) -> None:
    fake_executor.set_error(queries.KEYWORD_OPPORTUNITIES, OSError("down"))

    response = await client.get(f"{BASE}/c1/keyword-opportunities")

    assert response.status_code == 200
    assert response.json() == {
        "entities": [],
        "status": "failed",
        "error": PUBLIC_FETCH_ERROR,
    }


@pytest.mark.asyncio
async def test_content_gaps(client: AsyncClient, fake_executor: FakeQueryExecutor) -> None:
    fake_executor.set_rows(
        queries.CONTENT_GAPS,
        [{"id": "g1", "name": "shoe sizing", "search_volume": 3000}],
    )

    response = await client.get(f"{BASE}/c1/content-gaps")

    assert response.status_code == 200
    [gap] = response.json()["entities"]
    assert gap["type"] == "content_gap"
    assert gap["searchVolume"] == 3000


@pytest.mark.asyncio
async def test_content_gap_row_without_name(
    client: AsyncClient, fake_executor: FakeQueryExecutor
) -> None:
    """Should report a failed read rather than a server error."""
    fake_executor.set_rows(queries.CONTENT_GAPS, [{"id": "g1", "topic": "sizing"}])

    response = await client.get(f"{BASE}/c1/content-gaps")

    assert response.status_code == 200
    assert response.json()["status"] == "failed"
