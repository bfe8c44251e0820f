"""Salary query service — range filtering, sorting and pagination of records."""

import logging

from salary_api.application.interfaces import SalaryRecordRepository
from salary_api.domain.entities import SalaryQuery, SalaryRecord

logger = logging.getLogger(__name__)


class SalaryQueryService:
    """Runs a SalaryQuery against the repository.

    Repositories that filter, sort and paginate natively get the query
    pushed down; for the others the same semantics are evaluated in memory
    (filter, sort, offset, limit).
    """

    def __init__(self, repository: SalaryRecordRepository):
        self._repository = repository

    async def query(self, params: SalaryQuery) -> list[SalaryRecord]:
        logger.info(
            "min: %s max: %s offset: %s limit: %s sortType: %s",
            params.min_salary,
            params.max_salary,
            params.offset,
            params.limit,
            params.sort.value if params.sort else None,
        )
        if self._repository.supports_native_query:
            return await self._repository.find_by_salary_range(
                params.min_salary,
                params.max_salary,
                offset=params.offset,
                limit=params.limit,
                sort=params.sort,
            )

        logger.debug("Repository has no native range query, evaluating in memory")
        return params.apply(await self._repository.list_all())
