"""Domain value objects describing the result of one CSV ingestion run."""

from dataclasses import dataclass, field
from enum import Enum

from salary_api.domain.exceptions import CsvValidationError


class ImportState(str, Enum):
    """States of the ingestion state machine.

    HEADER_CHECK → ROW_STREAM → COMMITTED | ROLLED_BACK, or
    HEADER_CHECK → HEADER_REJECTED.
    """

    HEADER_CHECK = "header_check"
    ROW_STREAM = "row_stream"
    COMMITTED = "committed"
    HEADER_REJECTED = "header_rejected"
    ROLLED_BACK = "rolled_back"


@dataclass(frozen=True)
class ImportFailure:
    """Why an ingestion run was aborted."""

    kind: str  # "header" or "row"
    line: int
    content: str
    error: CsvValidationError = field(compare=False, repr=False)

    @classmethod
    def from_error(cls, error: CsvValidationError) -> "ImportFailure":
        return cls(kind=error.kind, line=error.line, content=error.content, error=error)

    @property
    def message(self) -> str:
        return str(self.error)


@dataclass(frozen=True)
class ImportOutcome:
    """Result of one ingestion call."""

    state: ImportState
    accepted_count: int = 0
    skipped_count: int = 0
    failure: ImportFailure | None = None

    @property
    def committed(self) -> bool:
        return self.state is ImportState.COMMITTED

    def raise_for_failure(self) -> None:
        """Raise the HeaderValidationError / RowParseError that aborted the run."""
        if self.failure is not None:
            raise self.failure.error
