"""Abstract repository interface (port) for SalaryRecord persistence."""

from abc import ABC, abstractmethod

from salary_api.domain.entities import SalaryQuery, SalaryRecord, SortType


class SalaryRecordRepository(ABC):
    """Port for salary record persistence — implemented in the infrastructure layer.

    Writes happen inside an explicit transaction opened with ``begin()`` and
    closed with exactly one of ``commit()`` or ``rollback()``.
    """

    # Adapters that override find_by_salary_range set this to True; otherwise
    # the query service evaluates the query over list_all().
    supports_native_query: bool = False

    @abstractmethod
    async def begin(self) -> None:
        """Open the unit of work for a batch of saves."""
        ...

    @abstractmethod
    async def commit(self) -> None:
        """Make every save since ``begin()`` permanent."""
        ...

    @abstractmethod
    async def rollback(self) -> None:
        """Discard every save since ``begin()``."""
        ...

    @abstractmethod
    async def save(self, record: SalaryRecord) -> int:
        """Persist a record and return its assigned id."""
        ...

    @abstractmethod
    async def list_all(self) -> list[SalaryRecord]:
        """Return every stored record."""
        ...

    async def find_by_salary_range(
        self,
        min_salary: float,
        max_salary: float,
        *,
        offset: int = 0,
        limit: int | None = None,
        sort: SortType | None = None,
    ) -> list[SalaryRecord]:
        """Return records with min_salary <= salary <= max_salary.

        Results are ordered by ``sort`` (then id), or by id when no sort is
        given, before ``offset`` and ``limit`` are applied. The default
        evaluates the query in memory over ``list_all()``.
        """
        query = SalaryQuery(min_salary, max_salary, offset=offset, limit=limit, sort=sort)
        return query.apply(await self.list_all())
