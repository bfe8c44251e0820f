"""Domain-specific exceptions — framework-independent."""


class CsvValidationError(Exception):
    """Raised when an uploaded CSV file cannot be ingested.

    Carries the 1-based line number and the raw text of the offending line.
    """

    kind = "row"

    def __init__(self, message: str, line: int, content: str):
        self.line = line
        self.content = content
        super().__init__(f"{message} (line {line}: {content!r})")


class HeaderValidationError(CsvValidationError):
    """Raised when the first line of an upload is not the expected header."""

    kind = "header"

    def __init__(self, content: str, expected: tuple[str, ...]):
        self.expected = expected
        super().__init__(
            f"Invalid headers detected. Headers should be {list(expected)}",
            line=1,
            content=content,
        )


class RowParseError(CsvValidationError):
    """Raised when a data row cannot be parsed into (name, salary)."""

    kind = "row"

    def __init__(self, reason: str, line: int, content: str):
        self.reason = reason
        super().__init__(f"Error encountered while processing file: {reason}", line, content)


class PersistenceError(Exception):
    """Raised by a repository when the underlying storage fails."""


class QueryParamError(ValueError):
    """Raised when salary query parameters are invalid."""
