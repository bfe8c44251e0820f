"""Salary record endpoints — CSV upload and salary range queries."""

import io
import logging

from fastapi import APIRouter, Depends, HTTPException, Query, UploadFile, status

from salary_api.application.schemas import (
    SalaryRecordListResponse,
    SalaryRecordResponse,
    UploadErrorDetail,
    UploadResultResponse,
)
from salary_api.application.services import SalaryImportService, SalaryQueryService
from salary_api.config import get_settings
from salary_api.domain.entities import SalaryQuery
from salary_api.domain.exceptions import PersistenceError, QueryParamError
from salary_api.infrastructure.dependencies import (
    get_salary_import_service,
    get_salary_query_service,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Salary Records"])


@router.get("/users", response_model=SalaryRecordListResponse)
async def list_users(
    min_salary: float = Query(..., alias="min", description="Inclusive lower salary bound"),
    max_salary: float = Query(..., alias="max", description="Inclusive upper salary bound"),
    offset: int = Query(0, description="Number of matches to skip"),
    limit: int | None = Query(None, description="Maximum number of matches; omit for all"),
    sort: str | None = Query(None, description="NAME or SALARY (case-insensitive)"),
    service: SalaryQueryService = Depends(get_salary_query_service),
) -> SalaryRecordListResponse:
    """Retrieve records whose salary lies in [min, max], optionally sorted and paginated."""
    try:
        params = SalaryQuery.from_request(min_salary, max_salary, offset, limit, sort)
    except QueryParamError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    try:
        records = await service.query(params)
    except PersistenceError as e:
        logger.error("Salary query failed: %s", e)
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))

    return SalaryRecordListResponse(
        results=[SalaryRecordResponse.model_validate(r, from_attributes=True) for r in records]
    )


def _upload_size(file: UploadFile) -> int:
    """Size of the spooled upload, measured without reading it into memory."""
    if file.size is not None:
        return file.size
    position = file.file.tell()
    file.file.seek(0, io.SEEK_END)
    size = file.file.tell()
    file.file.seek(position)
    return size


@router.post("/upload", response_model=UploadResultResponse)
async def upload_salaries(
    file: UploadFile,
    service: SalaryImportService = Depends(get_salary_import_service),
) -> UploadResultResponse:
    """Import a NAME,SALARY CSV file. Either every accepted row is stored or none is."""
    settings = get_settings()
    if settings.max_upload_size_mb > 0 and _upload_size(file) > settings.max_upload_size_bytes:
        raise HTTPException(
            status_code=status.HTTP_413_CONTENT_TOO_LARGE,
            detail=f"File exceeds the {settings.max_upload_size_mb} MB upload limit",
        )

    await file.seek(0)
    try:
        outcome = await service.ingest(file.file, filename=file.filename or "<upload>")
    except PersistenceError as e:
        logger.error("Salary import failed: %s", e)
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))

    if outcome.failure is not None:
        detail = UploadErrorDetail(
            error_kind=outcome.failure.kind,
            line=outcome.failure.line,
            content=outcome.failure.content,
            message=outcome.failure.message,
        )
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail.model_dump())

    return UploadResultResponse(
        accepted_count=outcome.accepted_count,
        skipped_count=outcome.skipped_count,
    )
