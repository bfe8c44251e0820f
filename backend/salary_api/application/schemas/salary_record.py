"""Pydantic DTOs (Data Transfer Objects) for the salary record feature."""

from pydantic import BaseModel, Field


class SalaryRecordResponse(BaseModel):
    """Schema for one record returned to the client."""

    name: str
    salary: float

    model_config = {"from_attributes": True}


class SalaryRecordListResponse(BaseModel):
    """Envelope for a salary range query."""

    results: list[SalaryRecordResponse] = Field(default_factory=list)


class UploadResultResponse(BaseModel):
    """Returned when an upload was committed."""

    success: int = Field(1, examples=[1])
    accepted_count: int = Field(..., ge=0)
    skipped_count: int = Field(0, ge=0)


class UploadErrorDetail(BaseModel):
    """Location of the line that made an upload fail."""

    error_kind: str = Field(..., examples=["header", "row"])
    line: int = Field(..., ge=1)
    content: str
    message: str = ""
