"""Concrete repository implementation for SalaryRecord backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, AsyncSessionTransaction

from salary_api.application.interfaces import SalaryRecordRepository
from salary_api.domain.entities import SalaryRecord, SortType
from salary_api.domain.exceptions import PersistenceError
from salary_api.infrastructure.database.models import SalaryRecordModel


class SQLAlchemySalaryRecordRepository(SalaryRecordRepository):
    """Implements the SalaryRecordRepository port using SQLAlchemy async sessions.

    ``begin()`` opens a session transaction, or a SAVEPOINT when the session
    is already inside one, so an import can be undone without touching work
    done earlier on the same session.
    """

    supports_native_query = True

    def __init__(self, session: AsyncSession):
        self._session = session
        self._transaction: AsyncSessionTransaction | None = None

    def _to_entity(self, model: SalaryRecordModel) -> SalaryRecord:
        """Map ORM model → domain entity."""
        return SalaryRecord(id=model.id, name=model.name, salary=model.salary)

    async def begin(self) -> None:
        if self._transaction is not None:
            raise PersistenceError("A transaction is already open on this repository")
        try:
            if self._session.in_transaction():
                self._transaction = await self._session.begin_nested()
            else:
                self._transaction = await self._session.begin()
        except SQLAlchemyError as exc:
            raise PersistenceError(f"Could not open transaction: {exc}") from exc

    async def commit(self) -> None:
        transaction, self._transaction = self._transaction, None
        if transaction is None:
            raise PersistenceError("commit() called without an open transaction")
        try:
            await transaction.commit()
        except SQLAlchemyError as exc:
            raise PersistenceError(f"Could not commit salary records: {exc}") from exc

    async def rollback(self) -> None:
        transaction, self._transaction = self._transaction, None
        if transaction is None or not transaction.is_active:
            return
        try:
            await transaction.rollback()
        except SQLAlchemyError as exc:
            raise PersistenceError(f"Could not roll back salary records: {exc}") from exc

    async def save(self, record: SalaryRecord) -> int:
        model = SalaryRecordModel(name=record.name, salary=record.salary)
        self._session.add(model)
        try:
            await self._session.flush()
        except SQLAlchemyError as exc:
            raise PersistenceError(f"Could not save salary record '{record.name}': {exc}") from exc
        return model.id

    async def list_all(self) -> list[SalaryRecord]:
        stmt = select(SalaryRecordModel).order_by(SalaryRecordModel.id)
        return await self._fetch(stmt)

    async def find_by_salary_range(
        self,
        min_salary: float,
        max_salary: float,
        *,
        offset: int = 0,
        limit: int | None = None,
        sort: SortType | None = None,
    ) -> list[SalaryRecord]:
        stmt = select(SalaryRecordModel).where(
            SalaryRecordModel.salary.between(min_salary, max_salary)
        )

        if sort is not None:
            stmt = stmt.order_by(getattr(SalaryRecordModel, sort.field), SalaryRecordModel.id)
        else:
            stmt = stmt.order_by(SalaryRecordModel.id)

        stmt = stmt.offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        return await self._fetch(stmt)

    async def _fetch(self, stmt) -> list[SalaryRecord]:
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            raise PersistenceError(f"Could not query salary records: {exc}") from exc
        return [self._to_entity(row) for row in result.scalars().all()]
