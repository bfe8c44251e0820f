from .salary_record_repository import SQLAlchemySalaryRecordRepository

__all__ = [
    "SQLAlchemySalaryRecordRepository",
]
