"""Cluster DTOs for API requests and responses.

This module defines Data Transfer Objects for the topic cluster graph API.
Keys are serialized in camelCase, the shape the graph widget consumes.
"""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from seo_graph.features.clusters.models.fetch_result import FetchStatus
from seo_graph.features.clusters.models.seo_model import (
    ClusterStats,
    SeoEntity,
    SeoRelationship,
)
from seo_graph.features.clusters.services.events import (
    ClusterEvent,
    NotificationVariant,
)


class CamelDto(BaseModel):
    """Base DTO accepting and emitting camelCase keys."""

    model_config: ClassVar[ConfigDict] = ConfigDict(
        populate_by_name=True,
        alias_generator=to_camel,
    )


class NotificationDto(CamelDto):
    """User-visible feedback for a data-fetch outcome."""

    title: str = Field(..., description="Short heading, e.g. 'Data Loaded'")
    description: str = Field(..., description="Human readable detail")
    variant: NotificationVariant = Field(
        default=NotificationVariant.DEFAULT, description="Visual treatment"
    )

    @classmethod
    def from_event(cls, event: ClusterEvent) -> "NotificationDto":
        return cls(
            title=event.title, description=event.description, variant=event.variant
        )


class ClusterListResponse(CamelDto):
    """Response listing the cluster roots available for selection."""

    clusters: list[SeoEntity]
    status: FetchStatus
    notification: NotificationDto


class ClusterStatsResponse(CamelDto):
    """Response carrying aggregate statistics for a cluster."""

    stats: ClusterStats
    status: FetchStatus
    error: str | None = Field(
        default=None, description="Store error message when status is 'failed'"
    )
    notification: NotificationDto | None = Field(
        default=None, description="Present only when the statistics failed to load"
    )


class EntityListResponse(CamelDto):
    """Response for the keyword, content gap and competitor views."""

    entities: list[SeoEntity]
    status: FetchStatus
    error: str | None = None


class ClusterExpansionResponse(CamelDto):
    """Stateless cluster expansion result."""

    inside: list[SeoEntity]
    outside: list[SeoEntity]
    edges: list[SeoRelationship]
    status: FetchStatus


class CreateSessionRequest(CamelDto):
    """Request to open a graph session rooted at a cluster."""

    cluster_id: str = Field(..., description="Cluster used as the graph's root node")


class GraphSessionResponse(CamelDto):
    """Accumulated graph of one dashboard view."""

    session_id: str
    root_id: str
    nodes: list[SeoEntity]
    edges: list[SeoRelationship]
    loading: bool = Field(
        default=False, description="Whether an expansion is still in flight"
    )


class ExploreEntityRequest(CamelDto):
    """Expand event forwarded by the graph widget."""

    entity_id: str = Field(..., description="Node the user asked to expand")
    name: str | None = Field(
        default=None, description="Display label used in notifications"
    )


class ExploreEntityResponse(CamelDto):
    """Newly fetched neighborhood of a node, for incremental merge."""

    inside: list[SeoEntity]
    outside: list[SeoEntity]
    edges: list[SeoRelationship]
    notification: NotificationDto


class StrategyRequest(CamelDto):
    """Request to add an entity to the SEO strategy."""

    entity_id: str
    name: str


class StrategyResponse(CamelDto):
    """Acknowledgement of a strategy addition. Nothing is persisted."""

    entity_id: str
    notification: NotificationDto
