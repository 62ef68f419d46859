"""FastAPI dependencies wiring the clusters feature together."""

from fastapi import Depends, HTTPException, Request, status

from seo_graph.core.settings import get_settings
from seo_graph.db.postgres.connection import get_db_pool
from seo_graph.features.clusters.repositories import AsyncpgQueryExecutor
from seo_graph.features.clusters.services.cluster_data_service import (
    ClusterDataService,
)
from seo_graph.features.clusters.services.events import EventPublisher
from seo_graph.features.clusters.services.graph_session import (
    GraphSession,
    GraphSessionStore,
)
from seo_graph.features.clusters.usecases.explore_entity_usecase import (
    ExploreEntityUseCaseImpl,
)


async def get_cluster_data_service() -> ClusterDataService:
    """Dependency injection for the cluster data service."""
    pool = await get_db_pool()
    return ClusterDataService(AsyncpgQueryExecutor(pool), get_settings())


def get_session_store(request: Request) -> GraphSessionStore:
    """The application's graph session registry."""
    return request.app.state.graph_sessions


def get_event_publisher(request: Request) -> EventPublisher:
    """The application's notification event publisher."""
    return request.app.state.event_publisher


def get_graph_session(
    session_id: str,
    store: GraphSessionStore = Depends(get_session_store),
) -> GraphSession:
    """Resolve the session named in the path, or 404."""
    session = store.get(session_id)
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Graph session '{session_id}' not found",
        )
    return session


def get_explore_entity_use_case(
    session: GraphSession = Depends(get_graph_session),
    service: ClusterDataService = Depends(get_cluster_data_service),
    publisher: EventPublisher = Depends(get_event_publisher),
) -> ExploreEntityUseCaseImpl:
    """Dependency injection for the explore entity use case."""
    return ExploreEntityUseCaseImpl(
        service=service, session=session, publisher=publisher
    )
