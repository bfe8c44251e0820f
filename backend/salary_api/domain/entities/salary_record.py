"""Domain entity — a single salary record."""

from dataclasses import dataclass


@dataclass
class SalaryRecord:
    """One (name, salary) entry.

    The id is assigned by the persistence layer and stays None until the
    record has been saved.
    """

    name: str
    salary: float
    id: int | None = None
