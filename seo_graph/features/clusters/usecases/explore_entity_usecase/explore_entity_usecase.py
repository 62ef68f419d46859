"""Use case for expanding a node of the topic cluster graph.

This module bridges the graph widget's expand events to the cluster data
service and back: it tracks loading, discards superseded responses, merges
new nodes into the session graph and emits notification events.
"""

from __future__ import annotations

import logging

from seo_graph.features.clusters.dtos.cluster_dto import (
    ExploreEntityResponse,
    NotificationDto,
    StrategyResponse,
)
from seo_graph.features.clusters.services.cluster_data_service import (
    ClusterDataService,
)
from seo_graph.features.clusters.services.events import (
    ClusterEvent,
    DataEmpty,
    DataLoaded,
    EventPublisher,
    FetchFailed,
    StrategyAcknowledged,
)
from seo_graph.features.clusters.services.graph_session import GraphSession

from .errors import ExpansionFailedError, StaleExpansionError

logger = logging.getLogger(__name__)


class ExploreEntityUseCaseImpl:
    """Implementation of the explore entity use case."""

    def __init__(
        self,
        service: ClusterDataService,
        session: GraphSession,
        publisher: EventPublisher,
    ):
        """Initialize the use case with dependencies.

        Args:
            service: Cluster data service used to fetch neighborhoods
            session: Graph session the fetched nodes are merged into
            publisher: Receives DataLoaded, DataEmpty and FetchFailed events
        """
        self.service: ClusterDataService = service
        self.session: GraphSession = session
        self.publisher: EventPublisher = publisher

    async def execute(
        self, entity_id: str, display_name: str | None = None
    ) -> ExploreEntityResponse:
        """Expand ``entity_id`` and return what was found.

        Args:
            entity_id: The node the user asked to expand
            display_name: Optional label used in notifications; defaults to
                          the session node's name

        Returns:
            ExploreEntityResponse with the inside and outside neighbors, the
            connecting edges and the notification shown to the user.

        Raises:
            ExpansionFailedError: If the store could not be read. An empty
                                  result is never reported for a failed read.
            StaleExpansionError: If a newer expansion of the same node was
                                 issued while this one was in flight.
        """
        if display_name is None:
            node = self.session.get_node(entity_id)
            display_name = node.name if node else entity_id

        generation = self.session.begin_expansion(entity_id)
        try:
            result = await self.service.expand_cluster(entity_id)
        finally:
            self.session.end_expansion()

        if not self.session.is_current(entity_id, generation):
            logger.info(
                "Discarding superseded expansion %d of %s", generation, entity_id
            )
            raise StaleExpansionError(
                entity_id, generation, self.session.latest_generation(entity_id)
            )

        if result.failed:
            failed = FetchFailed(
                entity_id=entity_id,
                operation=f"load data for {display_name}",
                error=result.public_error or "unknown error",
            )
            self._publish(failed)
            raise ExpansionFailedError(
                entity_id, result.error, NotificationDto.from_event(failed)
            )

        merged = self.session.merge(result.value)

        event: ClusterEvent
        if merged.entity_count == 0:
            event = DataEmpty(entity_id=entity_id, name=display_name)
        else:
            event = DataLoaded(entity_id=entity_id, count=merged.entity_count)
        self._publish(event)

        return ExploreEntityResponse(
            inside=merged.inside,
            outside=merged.outside,
            edges=merged.edges,
            notification=NotificationDto.from_event(event),
        )

    def add_to_strategy(self, entity_id: str, name: str) -> StrategyResponse:
        """Acknowledge adding an entity to the SEO strategy. Nothing is stored."""
        event = StrategyAcknowledged(entity_id=entity_id, name=name)
        self._publish(event)
        return StrategyResponse(
            entity_id=entity_id, notification=NotificationDto.from_event(event)
        )

    def _publish(self, event: ClusterEvent) -> None:
        self.publisher.publish(event)
