"""SEO knowledge graph models.

This module defines the nodes (entities) and edges (relationships) of the
topic cluster graph, together with the aggregate shapes built from them.
"""

import enum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class EntityType(enum.Enum):
    """Kinds of node in the SEO knowledge graph."""

    TOPIC_CLUSTER = "topic_cluster"
    PILLAR_PAGE = "pillar_page"
    CLUSTER_CONTENT = "cluster_content"
    KEYWORD = "keyword"
    INTENT = "intent"
    COMPETITOR = "competitor"
    CONTENT_GAP = "content_gap"


class SearchIntent(enum.Enum):
    """Search intent classification of a keyword or page."""

    INFORMATIONAL = "informational"
    NAVIGATIONAL = "navigational"
    TRANSACTIONAL = "transactional"
    COMMERCIAL = "commercial"


class Direction(enum.Enum):
    """Provenance of an entity relative to the cluster it was discovered from."""

    ROOT = "root"
    INSIDE = "inside"
    OUTSIDE = "outside"


class RelationshipType(enum.Enum):
    """Kinds of edge in the SEO knowledge graph."""

    SEMANTIC_SIMILARITY = "semantic_similarity"
    KEYWORD_CLUSTER = "keyword_cluster"
    INTERNAL_LINK = "internal_link"
    TOPIC_HIERARCHY = "topic_hierarchy"
    CONTENT_GAP = "content_gap"
    COMPETITOR_OVERLAP = "competitor_overlap"


# Relationship types that stay within a cluster; their targets are "inside".
INSIDE_RELATIONSHIP_TYPES: tuple[RelationshipType, ...] = (
    RelationshipType.KEYWORD_CLUSTER,
    RelationshipType.TOPIC_HIERARCHY,
)

# Relationship types that cross cluster boundaries; their targets are "outside".
OUTSIDE_RELATIONSHIP_TYPES: tuple[RelationshipType, ...] = (
    RelationshipType.COMPETITOR_OVERLAP,
    RelationshipType.CONTENT_GAP,
    RelationshipType.SEMANTIC_SIMILARITY,
)

INSIDE_ENTITY_TYPES: tuple[EntityType, ...] = (
    EntityType.PILLAR_PAGE,
    EntityType.CLUSTER_CONTENT,
    EntityType.KEYWORD,
)

OUTSIDE_ENTITY_TYPES: tuple[EntityType, ...] = (
    EntityType.COMPETITOR,
    EntityType.CONTENT_GAP,
)

DEFAULT_RELATIONSHIP_STRENGTH = 0.5


class SeoBaseModel(BaseModel):
    """Immutable base model serialized with camelCase keys for the graph widget."""

    model_config: ClassVar[ConfigDict] = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class SeoEntity(SeoBaseModel):
    """A node in the SEO knowledge graph."""

    id: str = Field(..., description="Opaque unique identifier")
    name: str = Field(..., description="Display label")
    type: EntityType = Field(..., description="Kind of entity")
    search_volume: int | None = Field(
        default=None, description="Monthly search volume, None when unknown"
    )
    difficulty: float | None = Field(
        default=None, description="Ranking difficulty on a 0-100 scale"
    )
    intent: SearchIntent | None = Field(default=None, description="Search intent")
    url: str | None = Field(default=None, description="Source URL")
    has_more: bool = Field(
        default=False, description="Whether undiscovered neighbors exist"
    )
    direction: Direction = Field(..., description="How the entity was discovered")
    metadata: dict[str, int | float | None] = Field(
        default_factory=dict,
        description="Secondary metrics such as cpc or shared_keywords",
    )


class SeoRelationship(SeoBaseModel):
    """A directed, typed and weighted edge between two entities."""

    id: str = Field(..., description="Opaque unique identifier")
    from_id: str = Field(..., description="Source entity id")
    to_id: str = Field(..., description="Target entity id")
    relationship_type: RelationshipType = Field(..., description="Kind of edge")
    strength: float = Field(
        default=DEFAULT_RELATIONSHIP_STRENGTH,
        ge=0.0,
        le=1.0,
        description="Edge weight (0.0 to 1.0)",
    )
    description: str = Field(..., description="Human readable label")
    metadata: dict[str, int | float | None] = Field(
        default_factory=dict,
        description="Secondary metrics such as similarity_score or link_count",
    )


class ClusterStats(SeoBaseModel):
    """Aggregate statistics for one topic cluster."""

    total_search_volume: int = 0
    avg_difficulty: float = 0.0
    content_count: int = 0
    keyword_count: int = 0
    competitor_count: int = 0
    gap_count: int = 0


class ClusterExpansion(SeoBaseModel):
    """Neighborhood of a cluster split by provenance, plus connecting edges."""

    inside: list[SeoEntity] = Field(default_factory=list)
    outside: list[SeoEntity] = Field(default_factory=list)
    edges: list[SeoRelationship] = Field(default_factory=list)

    @property
    def entity_count(self) -> int:
        """Number of entities discovered on both sides."""
        return len(self.inside) + len(self.outside)
