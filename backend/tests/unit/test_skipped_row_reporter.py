"""Unit tests for the logging SkippedRowReporter."""

import logging

from salary_api.domain.entities import SalaryRecord
from salary_api.infrastructure.logging.skipped_row_reporter import LoggingSkippedRowReporter


def test_skipped_row_is_logged_at_debug(caplog):
    reporter = LoggingSkippedRowReporter()

    with caplog.at_level(logging.DEBUG, logger="salary_api.infrastructure.logging.skipped_row_reporter"):
        reporter.row_skipped(3, SalaryRecord(name="Bob", salary=-100.0))

    assert "Ignoring record 'Bob' on line 3" in caplog.text
