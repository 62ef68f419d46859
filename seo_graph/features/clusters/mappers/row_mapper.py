"""Mapping of raw query rows into SEO graph models.

Rows come from the query executor as mappings from column name to value.
Columns use the store's snake_case names (``search_volume``, ``from_id``).
"""

import logging
from collections.abc import Mapping
from typing import Any

from seo_graph.features.clusters.models.seo_model import (
    DEFAULT_RELATIONSHIP_STRENGTH,
    Direction,
    EntityType,
    SearchIntent,
    SeoEntity,
    SeoRelationship,
)

logger = logging.getLogger(__name__)

Row = Mapping[str, Any]

ENTITY_METADATA_COLUMNS: tuple[str, ...] = (
    "cpc",
    "ranking_position",
    "traffic_potential",
    "shared_keywords",
)

RELATIONSHIP_METADATA_COLUMNS: tuple[str, ...] = (
    "similarity_score",
    "link_count",
    "shared_keywords",
)


def _present(row: Row, columns: tuple[str, ...]) -> dict[str, Any]:
    return {column: row[column] for column in columns if column in row}


def _intent(value: Any) -> SearchIntent | None:
    if value is None:
        return None
    try:
        return SearchIntent(str(value).strip().lower())
    except ValueError:
        logger.debug("Ignoring unknown search intent %r", value)
        return None


def _strength(value: Any) -> float:
    if value is None:
        return DEFAULT_RELATIONSHIP_STRENGTH
    return min(1.0, max(0.0, float(value)))


def map_entity_row(
    row: Row,
    direction: Direction | None = None,
    entity_type: EntityType | None = None,
) -> SeoEntity:
    """Map one row to an SeoEntity.

    Args:
        row: Row holding at least ``id`` and ``name``.
        direction: Provenance to stamp on the entity. Falls back to the
            row's ``direction`` column, then to ``root``.
        entity_type: Fixed type for queries over single-type tables. Falls
            back to the row's ``type`` column.

    Search volume and difficulty are passed through untouched, so a missing
    value stays ``None`` rather than becoming 0. An intent outside
    ``SearchIntent`` maps to ``None``; matching is case-insensitive.
    """
    search_volume = row.get("search_volume")
    difficulty = row.get("difficulty")

    metadata: dict[str, Any] = {}
    if search_volume is not None:
        metadata["search_volume"] = search_volume
    if difficulty is not None:
        metadata["difficulty"] = difficulty
    metadata.update(_present(row, ENTITY_METADATA_COLUMNS))

    return SeoEntity(
        id=str(row["id"]),
        name=row["name"],
        type=entity_type or EntityType(row["type"]),
        search_volume=search_volume,
        difficulty=difficulty,
        intent=_intent(row.get("intent")),
        url=row.get("url"),
        has_more=bool(row.get("has_more", False)),
        direction=direction or Direction(row.get("direction") or "root"),
        metadata=metadata,
    )


def map_relationship_row(row: Row) -> SeoRelationship:
    """Map one row to an SeoRelationship.

    ``strength`` defaults to 0.5 when the row has no value and is clamped to
    [0, 1] otherwise. ``description`` defaults to
    ``"<relationship_type> relationship"``.
    """
    relationship_type = row["relationship_type"]
    description = row.get("description")

    return SeoRelationship(
        id=str(row["id"]),
        from_id=str(row["from_id"]),
        to_id=str(row["to_id"]),
        relationship_type=relationship_type,
        strength=_strength(row.get("strength")),
        description=description or f"{relationship_type} relationship",
        metadata=_present(row, RELATIONSHIP_METADATA_COLUMNS),
    )
