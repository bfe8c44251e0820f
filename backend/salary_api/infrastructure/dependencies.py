"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from salary_api.config import get_settings
from salary_api.application.interfaces import SkippedRowReporter
from salary_api.application.services import (
    RowParser,
    SalaryImportService,
    SalaryQueryService,
)
from salary_api.infrastructure.database.session import get_db_session
from salary_api.infrastructure.database.repositories import SQLAlchemySalaryRecordRepository
from salary_api.infrastructure.logging.skipped_row_reporter import LoggingSkippedRowReporter


def get_skipped_row_reporter() -> SkippedRowReporter:
    """Provides the reporter that receives rows dropped for a negative salary."""
    return LoggingSkippedRowReporter()


async def get_salary_import_service(
    session: AsyncSession = Depends(get_db_session),
    reporter: SkippedRowReporter = Depends(get_skipped_row_reporter),
) -> AsyncGenerator[SalaryImportService, None]:
    """Provides a SalaryImportService bound to the request's session."""
    settings = get_settings()
    repository = SQLAlchemySalaryRecordRepository(session)
    yield SalaryImportService(
        repository,
        reporter=reporter,
        row_parser=RowParser(reject_empty_names=settings.reject_empty_names),
    )


async def get_salary_query_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[SalaryQueryService, None]:
    """Provides a SalaryQueryService with its repository wired up."""
    repository = SQLAlchemySalaryRecordRepository(session)
    yield SalaryQueryService(repository)
