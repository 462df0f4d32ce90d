"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from rankpulse.presentation.api.v1.endpoints.health import router as health_router
from rankpulse.presentation.api.v1.endpoints.articles import router as articles_router
from rankpulse.presentation.api.v1.endpoints.metadata import router as metadata_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(articles_router)
router.include_router(metadata_router)
