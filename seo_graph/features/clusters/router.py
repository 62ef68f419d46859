"""SEO cluster API routes - main router that includes all route modules."""

from fastapi import APIRouter

from seo_graph.features.clusters.routes.clusters import router as clusters_router
from seo_graph.features.clusters.routes.sessions import router as sessions_router

router = APIRouter(
    prefix="/seo",
    tags=["seo"],
)

# Include all route handlers
router.include_router(clusters_router)
router.include_router(sessions_router)
