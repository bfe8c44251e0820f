from .salary_record import SalaryRecordModel

__all__ = [
    "SalaryRecordModel",
]
