from .salary_record import SalaryRecord
from .salary_query import SalaryQuery, SortType
from .import_outcome import ImportFailure, ImportOutcome, ImportState

__all__ = [
    "SalaryRecord",
    "SalaryQuery",
    "SortType",
    "ImportFailure",
    "ImportOutcome",
    "ImportState",
]
