"""Health check endpoint — no dependencies, always available."""

from fastapi import APIRouter
from sqlalchemy.engine import make_url

from salary_api.config import get_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    """Returns the service status and the configured storage backend."""
    settings = get_settings()
    return {
        "status": "healthy",
        "service": settings.app_title,
        "version": settings.app_version,
        "environment": settings.app_env,
        "database": make_url(settings.database_url).get_backend_name(),
    }
