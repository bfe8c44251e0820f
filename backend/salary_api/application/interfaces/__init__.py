from .salary_record_repository import SalaryRecordRepository
from .skipped_row_reporter import SkippedRowReporter

__all__ = [
    "SalaryRecordRepository",
    "SkippedRowReporter",
]
