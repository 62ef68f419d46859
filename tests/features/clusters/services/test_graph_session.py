"""Unit tests for GraphSession and GraphSessionStore."""

import pytest

from seo_graph.features.clusters.models.seo_model import (
    ClusterExpansion,
    Direction,
    EntityType,
    RelationshipType,
    SeoEntity,
    SeoRelationship,
)
from seo_graph.features.clusters.services.graph_session import (
    GraphSession,
    GraphSessionStore,
)


def _entity(entity_id: str, name: str, direction: Direction) -> SeoEntity:
    return SeoEntity(
        id=entity_id, name=name, type=EntityType.KEYWORD, direction=direction
    )


def _edge(edge_id: str, from_id: str, to_id: str) -> SeoRelationship:
    return SeoRelationship(
        id=edge_id,
        from_id=from_id,
        to_id=to_id,
        relationship_type=RelationshipType.KEYWORD_CLUSTER,
        description="keyword_cluster relationship",
    )


class TestGraphSession:
    """Tests for GraphSession."""

    def test_seeded_with_root(
        self, graph_session: GraphSession, cluster_root: SeoEntity
    ) -> None:
        assert graph_session.root_id == "c1"
        assert graph_session.nodes == [cluster_root]
        assert graph_session.edges == []
        assert not graph_session.loading

    def test_merge_adds_nodes_and_connected_edges(
        self, graph_session: GraphSession
    ) -> None:
        """Should add new nodes and keep only edges with known endpoints."""
        expansion = ClusterExpansion(
            inside=[_entity("k1", "kw", Direction.INSIDE)],
            outside=[_entity("x1", "rival", Direction.OUTSIDE)],
            edges=[_edge("r1", "c1", "k1"), _edge("r2", "c1", "unknown")],
        )

        merged = graph_session.merge(expansion)

        assert [n.id for n in graph_session.nodes] == ["c1", "k1", "x1"]
        assert [e.id for e in merged.edges] == ["r1"]
        assert [e.id for e in graph_session.edges] == ["r1"]

    def test_merge_never_replaces_existing_nodes(
        self, graph_session: GraphSession
    ) -> None:
        """Should keep the first value seen for a node id."""
        graph_session.merge(
            ClusterExpansion(inside=[_entity("k1", "first", Direction.INSIDE)])
        )
        graph_session.merge(
            ClusterExpansion(outside=[_entity("k1", "second", Direction.OUTSIDE)])
        )

        node = graph_session.get_node("k1")
        assert node is not None
        assert node.name == "first"
        assert node.direction is Direction.INSIDE
        assert len(graph_session.nodes) == 2

    def test_generations_are_monotonic_per_node(
        self, graph_session: GraphSession
    ) -> None:
        """Should only treat the newest expansion of a node as current."""
        first = graph_session.begin_expansion("c1")
        second = graph_session.begin_expansion("c1")
        other = graph_session.begin_expansion("k1")

        assert (first, second, other) == (1, 2, 1)
        assert not graph_session.is_current("c1", first)
        assert graph_session.is_current("c1", second)
        assert graph_session.is_current("k1", other)
        assert graph_session.loading

        for _ in range(3):
            graph_session.end_expansion()
        assert not graph_session.loading


class TestGraphSessionStore:
    """Tests for GraphSessionStore."""

    def test_create_get_delete(self, cluster_root: SeoEntity) -> None:
        store = GraphSessionStore()

        session = store.create(cluster_root)

        assert store.get(session.session_id) is session
        assert len(store) == 1
        assert store.delete(session.session_id) is True
        assert store.get(session.session_id) is None
        assert store.delete(session.session_id) is False


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


class TestGraphSessionExpiry:
    """Tests for idle session eviction."""

    @pytest.fixture
    def clock(self) -> FakeClock:
        return FakeClock()

    @pytest.fixture
    def store(self, clock: FakeClock) -> GraphSessionStore:
        return GraphSessionStore(ttl_seconds=60, clock=clock)

    def test_idle_session_expires(
        self, store: GraphSessionStore, clock: FakeClock, cluster_root: SeoEntity
    ) -> None:
        """Should discard a session the client abandoned without deleting it."""
        session = store.create(cluster_root)

        clock.now += 61

        assert store.get(session.session_id) is None
        assert len(store) == 0

    def test_access_keeps_session_alive(
        self, store: GraphSessionStore, clock: FakeClock, cluster_root: SeoEntity
    ) -> None:
        session = store.create(cluster_root)

        for _ in range(3):
            clock.now += 45
            assert store.get(session.session_id) is session

    def test_creating_a_session_evicts_idle_ones(
        self, store: GraphSessionStore, clock: FakeClock, cluster_root: SeoEntity
    ) -> None:
        abandoned = store.create(cluster_root)
        clock.now += 120

        fresh = store.create(cluster_root)

        assert len(store) == 1
        assert store.get(abandoned.session_id) is None
        assert store.get(fresh.session_id) is fresh

    def test_session_with_expansion_in_flight_is_kept(
        self, store: GraphSessionStore, clock: FakeClock, cluster_root: SeoEntity
    ) -> None:
        session = store.create(cluster_root)
        session.begin_expansion("c1")

        clock.now += 120

        assert store.evict_expired() == 0
        session.end_expansion()
        assert store.evict_expired() == 1

    def test_no_ttl_keeps_sessions(self, cluster_root: SeoEntity) -> None:
        clock = FakeClock()
        store = GraphSessionStore(ttl_seconds=None, clock=clock)
        session = store.create(cluster_root)

        clock.now += 10**6

        assert store.get(session.session_id) is session
