"""Abstract interface (port) for observing rows dropped during ingestion."""

from abc import ABC, abstractmethod

from salary_api.domain.entities import SalaryRecord


class SkippedRowReporter(ABC):
    """Receives every data row the record validator rejected."""

    @abstractmethod
    def row_skipped(self, line: int, record: SalaryRecord) -> None:
        ...
