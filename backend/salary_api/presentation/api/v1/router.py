"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from salary_api.presentation.api.v1.endpoints.health import router as health_router
from salary_api.presentation.api.v1.endpoints.salary_records import router as salary_records_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(salary_records_router)
