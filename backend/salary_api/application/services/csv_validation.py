"""Line splitting, header checks and per-row validation for salary CSV uploads."""

import csv
import math
import re
from enum import Enum

from salary_api.domain.entities import SalaryRecord
from salary_api.domain.exceptions import HeaderValidationError, RowParseError

EXPECTED_HEADERS: tuple[str, ...] = ("NAME", "SALARY")

# Plain decimal or scientific notation; no digit grouping, nan or inf
DECIMAL_PATTERN = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?", re.ASCII)


def split_line(line: str) -> list[str]:
    """Split one CSV line into fields.

    Used for the header and for data rows alike so both are tokenized the
    same way. Leading whitespace after a separator is ignored.
    """
    return next(csv.reader([line], skipinitialspace=True), [])


class HeaderValidator:
    """Checks the first line of an upload against the expected columns."""

    def __init__(self, expected: tuple[str, ...] = EXPECTED_HEADERS):
        self._expected = expected

    @property
    def expected(self) -> tuple[str, ...]:
        return self._expected

    def is_valid(self, line: str) -> bool:
        return tuple(split_line(line)) == self._expected

    def validate(self, line: str) -> None:
        """Raise HeaderValidationError (line 1) unless the header matches exactly."""
        if not self.is_valid(line):
            raise HeaderValidationError(line, expected=self._expected)


class RowParser:
    """Turns one data line into a SalaryRecord or raises RowParseError."""

    def __init__(self, *, reject_empty_names: bool = False):
        self._reject_empty_names = reject_empty_names

    def parse(self, line_number: int, line: str) -> SalaryRecord:
        fields = split_line(line)
        if len(fields) != len(EXPECTED_HEADERS):
            raise RowParseError(
                f"expected {len(EXPECTED_HEADERS)} fields, found {len(fields)}",
                line_number,
                line,
            )

        name, raw_salary = fields
        if self._reject_empty_names and not name.strip():
            raise RowParseError("name must not be empty", line_number, line)

        if not DECIMAL_PATTERN.fullmatch(raw_salary.strip()):
            raise RowParseError(f"salary '{raw_salary}' is not a number", line_number, line)
        salary = float(raw_salary)
        if not math.isfinite(salary):
            raise RowParseError(f"salary '{raw_salary}' is not finite", line_number, line)

        return SalaryRecord(name=name, salary=salary)


class RowDecision(str, Enum):
    ACCEPT = "accept"
    REJECT = "reject"


class RecordValidator:
    """Decides whether a parsed row is persisted. Negative salaries are rejected."""

    def decide(self, record: SalaryRecord) -> RowDecision:
        if record.salary < 0:
            return RowDecision.REJECT
        return RowDecision.ACCEPT
