from .salary_record import (
    SalaryRecordListResponse,
    SalaryRecordResponse,
    UploadErrorDetail,
    UploadResultResponse,
)

__all__ = [
    "SalaryRecordListResponse",
    "SalaryRecordResponse",
    "UploadErrorDetail",
    "UploadResultResponse",
]
