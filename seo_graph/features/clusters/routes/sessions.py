"""Graph session route handlers.

A session is the server-side counterpart of one dashboard graph view: it is
seeded with a cluster root and grows as the user expands nodes.
"""

from fastapi import APIRouter, Depends, HTTPException, Response, status

from seo_graph.features.clusters.dependencies import (
    get_cluster_data_service,
    get_explore_entity_use_case,
    get_graph_session,
    get_session_store,
)
from seo_graph.features.clusters.dtos.cluster_dto import (
    CreateSessionRequest,
    ExploreEntityRequest,
    ExploreEntityResponse,
    GraphSessionResponse,
    StrategyRequest,
    StrategyResponse,
)
from seo_graph.features.clusters.services.cluster_data_service import (
    ClusterDataService,
)
from seo_graph.features.clusters.services.graph_session import (
    GraphSession,
    GraphSessionStore,
)
from seo_graph.features.clusters.usecases.explore_entity_usecase import (
    ExpansionFailedError,
    ExploreEntityUseCaseImpl,
    StaleExpansionError,
)

router = APIRouter(prefix="/sessions")


def _session_response(session: GraphSession) -> GraphSessionResponse:
    return GraphSessionResponse(
        session_id=session.session_id,
        root_id=session.root_id,
        nodes=session.nodes,
        edges=session.edges,
        loading=session.loading,
    )


@router.post(
    "", response_model=GraphSessionResponse, status_code=status.HTTP_201_CREATED
)
async def create_session(
    request: CreateSessionRequest,
    service: ClusterDataService = Depends(get_cluster_data_service),
    store: GraphSessionStore = Depends(get_session_store),
) -> GraphSessionResponse:
    """Open a graph session rooted at the selected cluster."""
    result = await service.get_cluster(request.cluster_id)

    if result.failed:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Failed to load topic cluster: {result.public_error}",
        )
    if result.value is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Topic cluster '{request.cluster_id}' not found",
        )

    return _session_response(store.create(result.value))


@router.get("/{session_id}", response_model=GraphSessionResponse)
async def get_session(
    session: GraphSession = Depends(get_graph_session),
) -> GraphSessionResponse:
    """Return every node and edge the session has discovered so far."""
    return _session_response(session)


@router.post("/{session_id}/explore", response_model=ExploreEntityResponse)
async def explore_entity(
    request: ExploreEntityRequest,
    use_case: ExploreEntityUseCaseImpl = Depends(get_explore_entity_use_case),
) -> ExploreEntityResponse:
    """Expand a node and return its newly fetched neighborhood.

    Returns 502 when the store could not be read, so the widget does not
    treat the failure as a node without neighbors, and 409 when a newer
    expansion of the same node superseded this one.
    """
    try:
        return await use_case.execute(request.entity_id, request.name)
    except StaleExpansionError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except ExpansionFailedError as e:
        detail = (
            e.notification.model_dump(mode="json")
            if e.notification
            else f"Failed to expand '{e.entity_id}'"
        )
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=detail)


@router.post("/{session_id}/strategy", response_model=StrategyResponse)
async def add_to_strategy(
    request: StrategyRequest,
    use_case: ExploreEntityUseCaseImpl = Depends(get_explore_entity_use_case),
) -> StrategyResponse:
    """Acknowledge adding an entity to the SEO strategy. Nothing is persisted."""
    return use_case.add_to_strategy(request.entity_id, request.name)


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_session(
    session_id: str,
    store: GraphSessionStore = Depends(get_session_store),
) -> Response:
    """Discard a session when the user navigates away."""
    if not store.delete(session_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Graph session '{session_id}' not found",
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
