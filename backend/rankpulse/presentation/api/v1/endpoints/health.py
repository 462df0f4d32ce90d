"""Health check endpoint — no dependencies, always available."""

from fastapi import APIRouter

from rankpulse.config import get_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    """Report service status along with the running version and environment."""
    settings = get_settings()
    return {
        "status": "healthy",
        "service": settings.app_title,
        "version": settings.app_version,
        "environment": settings.app_env,
    }
