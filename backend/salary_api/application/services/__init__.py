from .csv_validation import HeaderValidator, RecordValidator, RowDecision, RowParser
from .salary_import_service import SalaryImportService
from .salary_query_service import SalaryQueryService

__all__ = [
    "HeaderValidator",
    "RecordValidator",
    "RowDecision",
    "RowParser",
    "SalaryImportService",
    "SalaryQueryService",
]
