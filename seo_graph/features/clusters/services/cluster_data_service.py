"""Cluster data service.

Orchestrates the read queries behind the topic cluster dashboard: the
cluster picker, cluster statistics, on-demand graph expansion and the
narrower keyword, content gap and competitor views.

Every operation is a stateless read. Store failures and rows that cannot be
mapped are logged and returned as a ``FetchResult`` with status ``failed``
whose value is the same empty or all-zero default an empty read produces, so
one instance can be shared by concurrent callers and no caller has to guess
what an empty list means.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from typing import Any

from seo_graph.core.settings import Settings, get_settings
from seo_graph.features.clusters.mappers.row_mapper import (
    map_entity_row,
    map_relationship_row,
)
from seo_graph.features.clusters.models.fetch_result import FetchResult
from seo_graph.features.clusters.models.seo_model import (
    INSIDE_ENTITY_TYPES,
    INSIDE_RELATIONSHIP_TYPES,
    OUTSIDE_ENTITY_TYPES,
    OUTSIDE_RELATIONSHIP_TYPES,
    ClusterExpansion,
    ClusterStats,
    Direction,
    EntityType,
    SeoEntity,
)
from seo_graph.features.clusters.repositories import queries
from seo_graph.features.clusters.repositories.protocols import QueryExecutor

logger = logging.getLogger(__name__)


def _values(members: tuple[Any, ...]) -> list[str]:
    return [member.value for member in members]


def _stats_from_row(row: Mapping[str, Any]) -> ClusterStats:
    return ClusterStats(
        total_search_volume=row.get("total_search_volume") or 0,
        avg_difficulty=row.get("avg_difficulty") or 0.0,
        content_count=row.get("content_count") or 0,
        keyword_count=row.get("keyword_count") or 0,
        competitor_count=row.get("competitor_count") or 0,
        gap_count=row.get("gap_count") or 0,
    )


class ClusterDataService:
    """Read operations over the SEO analytics store."""

    def __init__(self, executor: QueryExecutor, settings: Settings | None = None):
        """Initialize the service with its dependencies.

        Args:
            executor: Runs parameterized SQL against the store
            settings: Query thresholds and limits; defaults to application settings
        """
        self.executor: QueryExecutor = executor
        self.settings: Settings = settings or get_settings()

    async def list_clusters(self) -> FetchResult[list[SeoEntity]]:
        """List cluster roots ordered by descending search volume."""
        try:
            rows = await self.executor.fetch(
                queries.LIST_CLUSTERS, self.settings.cluster_list_limit
            )
            clusters = [
                map_entity_row(row, Direction.ROOT, EntityType.TOPIC_CLUSTER)
                for row in rows
            ]
        except Exception as e:
            logger.exception("Error fetching topic clusters")
            return FetchResult.failure([], e)

        return FetchResult.loaded(clusters, is_empty=not clusters)

    async def get_cluster(self, cluster_id: str) -> FetchResult[SeoEntity | None]:
        """Fetch a single cluster root, used to seed a graph session."""
        try:
            rows = await self.executor.fetch(queries.GET_CLUSTER, cluster_id)
            cluster = (
                map_entity_row(rows[0], Direction.ROOT, EntityType.TOPIC_CLUSTER)
                if rows
                else None
            )
        except Exception as e:
            logger.exception("Error fetching topic cluster %s", cluster_id)
            return FetchResult.failure(None, e)

        return FetchResult.loaded(cluster, is_empty=cluster is None)

    async def expand_cluster(self, cluster_id: str) -> FetchResult[ClusterExpansion]:
        """Fetch the inside and outside neighborhoods of a cluster and its edges.

        The three queries run concurrently. If any of them fails, the whole
        expansion fails and carries the all-empty triple; partial results
        are never returned.
        """
        try:
            inside_rows, outside_rows, edge_rows = await asyncio.gather(
                self._neighborhood(
                    cluster_id, INSIDE_RELATIONSHIP_TYPES, INSIDE_ENTITY_TYPES
                ),
                self._neighborhood(
                    cluster_id, OUTSIDE_RELATIONSHIP_TYPES, OUTSIDE_ENTITY_TYPES
                ),
                self.executor.fetch(queries.CLUSTER_EDGES, cluster_id),
            )
            expansion = ClusterExpansion(
                inside=[map_entity_row(row, Direction.INSIDE) for row in inside_rows],
                outside=[
                    map_entity_row(row, Direction.OUTSIDE) for row in outside_rows
                ],
                edges=[map_relationship_row(row) for row in edge_rows],
            )
        except Exception as e:
            logger.exception("Error fetching topic cluster data for %s", cluster_id)
            return FetchResult.failure(ClusterExpansion(), e)

        return FetchResult.loaded(expansion, is_empty=expansion.entity_count == 0)

    async def _neighborhood(
        self,
        cluster_id: str,
        relationship_types: tuple[Any, ...],
        entity_types: tuple[Any, ...],
    ) -> list[Mapping[str, Any]]:
        return await self.executor.fetch(
            queries.NEIGHBORHOOD_ENTITIES,
            cluster_id,
            _values(relationship_types),
            _values(entity_types),
        )

    async def cluster_stats(self, cluster_id: str) -> FetchResult[ClusterStats]:
        """Aggregate counts for a cluster; all zero when it has no rows."""
        try:
            rows = await self.executor.fetch(queries.CLUSTER_STATS, cluster_id)
            stats = _stats_from_row(rows[0]) if rows else None
        except Exception as e:
            logger.exception("Error fetching cluster stats for %s", cluster_id)
            return FetchResult.failure(ClusterStats(), e)

        if stats is None:
            return FetchResult.loaded(ClusterStats(), is_empty=True)
        return FetchResult.loaded(stats)

    async def keyword_opportunities(
        self, cluster_id: str
    ) -> FetchResult[list[SeoEntity]]:
        """Easy, high-volume keywords not yet covered by a cluster.

        With ``keyword_opportunities_strict`` (the default) a keyword linked
        to any cluster is excluded; otherwise only keywords linked to
        ``cluster_id`` are.
        """
        try:
            rows = await self.executor.fetch(
                queries.KEYWORD_OPPORTUNITIES,
                cluster_id,
                self.settings.keyword_max_difficulty,
                self.settings.keyword_min_search_volume,
                self.settings.keyword_opportunities_strict,
                self.settings.keyword_opportunity_limit,
            )
            keywords = [
                map_entity_row(row, Direction.OUTSIDE, EntityType.KEYWORD)
                for row in rows
            ]
        except Exception as e:
            logger.exception("Error fetching keyword opportunities for %s", cluster_id)
            return FetchResult.failure([], e)

        return FetchResult.loaded(keywords, is_empty=not keywords)

    async def content_gaps(self, cluster_id: str) -> FetchResult[list[SeoEntity]]:
        """High priority content gaps of a cluster."""
        try:
            rows = await self.executor.fetch(
                queries.CONTENT_GAPS, cluster_id, self.settings.content_gap_priority
            )
            gaps = [
                map_entity_row(row, Direction.OUTSIDE, EntityType.CONTENT_GAP)
                for row in rows
            ]
        except Exception as e:
            logger.exception("Error fetching content gaps for %s", cluster_id)
            return FetchResult.failure([], e)

        return FetchResult.loaded(gaps, is_empty=not gaps)

    async def competitor_overlap(self, cluster_id: str) -> FetchResult[list[SeoEntity]]:
        """Competitors sharing enough keywords with a cluster, most overlap first.

        Competitors always report ``has_more``: their keyword relationships
        are never fully explored from a single cluster.
        """
        try:
            rows = await self.executor.fetch(
                queries.COMPETITOR_OVERLAP,
                cluster_id,
                self.settings.competitor_min_shared_keywords,
            )
            competitors = [
                map_entity_row(
                    {**row, "has_more": True}, Direction.OUTSIDE, EntityType.COMPETITOR
                )
                for row in rows
            ]
        except Exception as e:
            logger.exception("Error fetching competitor overlap for %s", cluster_id)
            return FetchResult.failure([], e)

        return FetchResult.loaded(competitors, is_empty=not competitors)

    async def ping(self) -> FetchResult[bool]:
        """Check that the store answers a trivial query."""
        try:
            rows = await self.executor.fetch(queries.PING)
        except Exception as e:
            logger.exception("Store connectivity check failed")
            return FetchResult.failure(False, e)
        return FetchResult.loaded(bool(rows))
