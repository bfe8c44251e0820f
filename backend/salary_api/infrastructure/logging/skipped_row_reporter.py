"""Default SkippedRowReporter — writes rejected rows to the application log."""

import logging

from salary_api.application.interfaces import SkippedRowReporter
from salary_api.domain.entities import SalaryRecord

logger = logging.getLogger(__name__)


class LoggingSkippedRowReporter(SkippedRowReporter):
    """Logs every rejected row at DEBUG level."""

    def __init__(self, log: logging.Logger | None = None):
        self._log = log or logger

    def row_skipped(self, line: int, record: SalaryRecord) -> None:
        self._log.debug(
            "Ignoring record '%s' on line %d: negative salary %s",
            record.name,
            line,
            record.salary,
        )
