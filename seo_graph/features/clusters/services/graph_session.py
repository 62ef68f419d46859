"""In-memory graph sessions.

A session holds the nodes and edges one dashboard view has discovered so far.
Nodes and edges are only ever added; an id seen once keeps its first value.
Sessions live in process memory. They are dropped when the client closes them
or after sitting idle longer than the store's TTL.
"""

from __future__ import annotations

import logging
import time
import uuid
from collections.abc import Callable

from seo_graph.features.clusters.models.seo_model import (
    ClusterExpansion,
    SeoEntity,
    SeoRelationship,
)

logger = logging.getLogger(__name__)


class GraphSession:
    """Accumulated node/edge set plus per-node expansion bookkeeping."""

    def __init__(self, root: SeoEntity, session_id: str | None = None):
        self.session_id: str = session_id or uuid.uuid4().hex
        self.root_id: str = root.id
        self._nodes: dict[str, SeoEntity] = {root.id: root}
        self._edges: dict[str, SeoRelationship] = {}
        self._generations: dict[str, int] = {}
        self._in_flight: int = 0
        self.last_accessed: float = 0.0

    @property
    def nodes(self) -> list[SeoEntity]:
        return list(self._nodes.values())

    @property
    def edges(self) -> list[SeoRelationship]:
        return list(self._edges.values())

    @property
    def loading(self) -> bool:
        return self._in_flight > 0

    def has_node(self, entity_id: str) -> bool:
        return entity_id in self._nodes

    def get_node(self, entity_id: str) -> SeoEntity | None:
        return self._nodes.get(entity_id)

    def begin_expansion(self, entity_id: str) -> int:
        """Mark an expansion of ``entity_id`` in flight and return its generation."""
        generation = self._generations.get(entity_id, 0) + 1
        self._generations[entity_id] = generation
        self._in_flight += 1
        return generation

    def end_expansion(self) -> None:
        self._in_flight = max(0, self._in_flight - 1)

    def is_current(self, entity_id: str, generation: int) -> bool:
        """Whether ``generation`` is still the latest expansion of ``entity_id``."""
        return self._generations.get(entity_id, 0) == generation

    def latest_generation(self, entity_id: str) -> int:
        return self._generations.get(entity_id, 0)

    def merge(self, expansion: ClusterExpansion) -> ClusterExpansion:
        """Add newly discovered nodes and edges.

        Edges are kept only when both endpoints are in this batch or already
        in the session. Returns the batch with dangling edges removed.
        """
        for entity in [*expansion.inside, *expansion.outside]:
            self._nodes.setdefault(entity.id, entity)

        edges: list[SeoRelationship] = []
        for edge in expansion.edges:
            if edge.from_id in self._nodes and edge.to_id in self._nodes:
                self._edges.setdefault(edge.id, edge)
                edges.append(edge)

        dropped = len(expansion.edges) - len(edges)
        if dropped:
            logger.debug(
                "Dropped %d edge(s) with undiscovered endpoints in session %s",
                dropped,
                self.session_id,
            )

        return ClusterExpansion(
            inside=expansion.inside, outside=expansion.outside, edges=edges
        )


class GraphSessionStore:
    """Registry of open graph sessions, owned by the application instance.

    A session not accessed for ``ttl_seconds`` is evicted the next time the
    store is used, unless an expansion is still in flight. ``ttl_seconds=None``
    keeps sessions until they are deleted.
    """

    def __init__(
        self,
        ttl_seconds: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._sessions: dict[str, GraphSession] = {}
        self.ttl_seconds: float | None = ttl_seconds
        self._clock: Callable[[], float] = clock

    def create(self, root: SeoEntity) -> GraphSession:
        self.evict_expired()
        session = GraphSession(root)
        session.last_accessed = self._clock()
        self._sessions[session.session_id] = session
        return session

    def get(self, session_id: str) -> GraphSession | None:
        """Return a live session and mark it accessed."""
        self.evict_expired()
        session = self._sessions.get(session_id)
        if session is not None:
            session.last_accessed = self._clock()
        return session

    def delete(self, session_id: str) -> bool:
        """Discard a session. Returns True if it existed."""
        return self._sessions.pop(session_id, None) is not None

    def evict_expired(self) -> int:
        """Drop idle sessions and return how many were dropped."""
        if self.ttl_seconds is None:
            return 0

        cutoff = self._clock() - self.ttl_seconds
        expired = [
            session_id
            for session_id, session in self._sessions.items()
            if session.last_accessed < cutoff and not session.loading
        ]
        for session_id in expired:
            del self._sessions[session_id]

        if expired:
            logger.info("Evicted %d idle graph session(s)", len(expired))
        return len(expired)

    def __len__(self) -> int:
        return len(self._sessions)
