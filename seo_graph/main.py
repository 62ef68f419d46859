"""Main FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware

from seo_graph.core.middleware import request_context_middleware
from seo_graph.core.settings import get_settings
from seo_graph.db.postgres.connection import close_db_pool, get_db_pool
from seo_graph.features.clusters.dependencies import get_cluster_data_service
from seo_graph.features.clusters.router import router as clusters_router
from seo_graph.features.clusters.services.cluster_data_service import (
    ClusterDataService,
)
from seo_graph.features.clusters.services.events import EventPublisher, log_event
from seo_graph.features.clusters.services.graph_session import GraphSessionStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.
    Handles startup and shutdown events.
    """
    # Startup
    settings = get_settings()
    logger.info("Starting %s v%s", settings.app_name, settings.app_version)

    _ = await get_db_pool()
    logger.info("Database connection pool created.")

    yield

    # Shutdown
    logger.info("Shutting down application")
    await close_db_pool()
    logger.info("Database connection pool closed.")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="SEO topic cluster graph API",
        lifespan=lifespan,
    )

    # Per-application state, injected into routes through dependencies
    publisher = EventPublisher()
    _ = publisher.subscribe(log_event)
    app.state.event_publisher = publisher
    app.state.graph_sessions = GraphSessionStore(
        ttl_seconds=settings.session_idle_ttl_seconds
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(request_context_middleware)

    # Include routers
    app.include_router(clusters_router, prefix="/api/v1")

    @app.get("/health")
    async def health_check() -> dict[str, str]:  # pyright: ignore[reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy"}

    @app.get("/health/db")
    async def database_health_check(  # pyright: ignore[reportUnusedFunction]
        service: ClusterDataService = Depends(get_cluster_data_service),
    ) -> dict[str, str]:
        """Check that the SEO store answers queries."""
        result = await service.ping()
        if result.failed:
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail=f"Failed to connect to the SEO database: {result.public_error}",
            )
        return {"status": "connected"}

    return app


# Create the app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "seo_graph.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="info" if not settings.debug else "debug",
    )
