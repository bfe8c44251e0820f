"""Domain value objects for salary range queries."""

import math
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from salary_api.domain.entities.salary_record import SalaryRecord
from salary_api.domain.exceptions import QueryParamError


class SortType(str, Enum):
    """Closed set of supported sort keys.

    Each member maps to the record field it orders by. Ties are always
    broken by id so that pagination is stable across calls.
    """

    NAME = "NAME"
    SALARY = "SALARY"

    @property
    def field(self) -> str:
        return self.value.lower()

    def sort_key(self, record: SalaryRecord) -> tuple:
        return (getattr(record, self.field), _id_key(record))

    @classmethod
    def parse(cls, token: str | None) -> "SortType | None":
        """Normalize a case-insensitive token; None or blank means no sorting."""
        if token is None or not token.strip():
            return None
        try:
            return cls(token.strip().upper())
        except ValueError:
            allowed = ", ".join(member.value for member in cls)
            raise QueryParamError(
                f"Unknown sort type '{token}'. Allowed values: {allowed}"
            ) from None


def _id_key(record: SalaryRecord) -> int:
    return record.id if record.id is not None else -1


@dataclass(frozen=True)
class SalaryQuery:
    """Immutable, validated parameters of a salary range query."""

    min_salary: float
    max_salary: float
    offset: int = 0
    limit: int | None = None
    sort: SortType | None = None

    def __post_init__(self) -> None:
        if math.isnan(self.min_salary) or math.isnan(self.max_salary):
            raise QueryParamError("min and max salary must be numbers")
        if self.min_salary > self.max_salary:
            raise QueryParamError(
                f"min salary ({self.min_salary}) must not exceed max salary ({self.max_salary})"
            )
        if self.offset < 0:
            raise QueryParamError(f"offset must be >= 0, got {self.offset}")
        if self.limit is not None and self.limit < 1:
            raise QueryParamError(f"limit must be >= 1, got {self.limit}")

    @classmethod
    def from_request(
        cls,
        min_salary: float,
        max_salary: float,
        offset: int = 0,
        limit: int | None = None,
        sort: str | None = None,
    ) -> "SalaryQuery":
        """Build a query from raw caller values, parsing the sort token."""
        return cls(
            min_salary=float(min_salary),
            max_salary=float(max_salary),
            offset=offset,
            limit=limit,
            sort=SortType.parse(sort),
        )

    def matches(self, record: SalaryRecord) -> bool:
        return self.min_salary <= record.salary <= self.max_salary

    def apply(self, records: Iterable[SalaryRecord]) -> list[SalaryRecord]:
        """Evaluate the query in memory: filter, sort, then offset, then limit."""
        matched = [r for r in records if self.matches(r)]
        if self.sort is not None:
            matched.sort(key=self.sort.sort_key)
        else:
            matched.sort(key=_id_key)
        end = None if self.limit is None else self.offset + self.limit
        return matched[self.offset:end]
