"""Cluster read route handlers."""

from fastapi import APIRouter, Depends, HTTPException, status

from seo_graph.features.clusters.dependencies import (
    get_cluster_data_service,
    get_event_publisher,
)
from seo_graph.features.clusters.dtos.cluster_dto import (
    ClusterExpansionResponse,
    ClusterListResponse,
    ClusterStatsResponse,
    EntityListResponse,
    NotificationDto,
)
from seo_graph.features.clusters.models.fetch_result import FetchResult
from seo_graph.features.clusters.models.seo_model import SeoEntity
from seo_graph.features.clusters.services.cluster_data_service import (
    ClusterDataService,
)
from seo_graph.features.clusters.services.events import (
    DataEmpty,
    DataLoaded,
    EventPublisher,
    FetchFailed,
)

router = APIRouter(prefix="/clusters")


def _entity_list(result: FetchResult[list[SeoEntity]]) -> EntityListResponse:
    return EntityListResponse(
        entities=result.value, status=result.status, error=result.public_error
    )


@router.get("", response_model=ClusterListResponse)
async def list_clusters(
    service: ClusterDataService = Depends(get_cluster_data_service),
    publisher: EventPublisher = Depends(get_event_publisher),
) -> ClusterListResponse:
    """List topic clusters for the cluster picker, largest search volume first.

    A store failure is a blocking error for the dashboard and is returned as
    503, distinct from a successful read that found no clusters.
    """
    result = await service.list_clusters()

    if result.failed:
        event = FetchFailed(
            entity_id=None,
            operation="load topic clusters",
            error=result.public_error or "unknown error",
        )
        publisher.publish(event)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=NotificationDto.from_event(event).model_dump(mode="json"),
        )

    if result.value:
        loaded = DataLoaded(
            entity_id=None, count=len(result.value), subject="topic clusters"
        )
        notification = NotificationDto.from_event(loaded)
        publisher.publish(loaded)
    else:
        empty = DataEmpty(entity_id=None, name="topic clusters")
        notification = NotificationDto.from_event(empty)
        publisher.publish(empty)

    return ClusterListResponse(
        clusters=result.value, status=result.status, notification=notification
    )


@router.get("/{cluster_id}/stats", response_model=ClusterStatsResponse)
async def get_cluster_stats(
    cluster_id: str,
    service: ClusterDataService = Depends(get_cluster_data_service),
    publisher: EventPublisher = Depends(get_event_publisher),
) -> ClusterStatsResponse:
    """Aggregate statistics for a cluster.

    Failures are transient for the dashboard: the all-zero statistics are
    returned with status 'failed' and a notification to show.
    """
    result = await service.cluster_stats(cluster_id)

    notification = None
    if result.failed:
        event = FetchFailed(
            entity_id=cluster_id,
            operation="load cluster statistics",
            error=result.public_error or "unknown error",
        )
        publisher.publish(event)
        notification = NotificationDto.from_event(event)

    return ClusterStatsResponse(
        stats=result.value,
        status=result.status,
        error=result.public_error,
        notification=notification,
    )


@router.get("/{cluster_id}/expansion", response_model=ClusterExpansionResponse)
async def expand_cluster(
    cluster_id: str,
    service: ClusterDataService = Depends(get_cluster_data_service),
) -> ClusterExpansionResponse:
    """Inside and outside neighborhoods of a cluster with connecting edges.

    Stateless counterpart of session exploration. A failed read is 502 so it
    is never mistaken for a cluster without neighbors.
    """
    result = await service.expand_cluster(cluster_id)

    if result.failed:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Failed to expand cluster '{cluster_id}': {result.public_error}",
        )

    return ClusterExpansionResponse(
        inside=result.value.inside,
        outside=result.value.outside,
        edges=result.value.edges,
        status=result.status,
    )


@router.get("/{cluster_id}/keyword-opportunities", response_model=EntityListResponse)
async def get_keyword_opportunities(
    cluster_id: str,
    service: ClusterDataService = Depends(get_cluster_data_service),
) -> EntityListResponse:
    """Low difficulty, high volume keywords not yet covered by a cluster."""
    return _entity_list(await service.keyword_opportunities(cluster_id))


@router.get("/{cluster_id}/content-gaps", response_model=EntityListResponse)
async def get_content_gaps(
    cluster_id: str,
    service: ClusterDataService = Depends(get_cluster_data_service),
) -> EntityListResponse:
    """High priority content gaps of a cluster."""
    return _entity_list(await service.content_gaps(cluster_id))


@router.get("/{cluster_id}/competitors", response_model=EntityListResponse)
async def get_competitor_overlap(
    cluster_id: str,
    service: ClusterDataService = Depends(get_cluster_data_service),
) -> EntityListResponse:
    """Competitors sharing keywords with a cluster, most overlap first."""
    return _entity_list(await service.competitor_overlap(cluster_id))
