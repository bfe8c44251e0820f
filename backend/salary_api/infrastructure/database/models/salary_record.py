"""SQLAlchemy ORM model for the SalaryRecord entity."""

from sqlalchemy import Float, Index, Text
from sqlalchemy.orm import Mapped, mapped_column

from salary_api.infrastructure.database.base import Base


class SalaryRecordModel(Base):
    """ORM model — maps to the 'salary_records' table."""

    __tablename__ = "salary_records"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    salary: Mapped[float] = mapped_column(Float, nullable=False)

    __table_args__ = (
        Index("ix_salary_records_salary", "salary"),
    )

    def __repr__(self) -> str:
        return f"<SalaryRecordModel(id={self.id}, name='{self.name}', salary={self.salary})>"
