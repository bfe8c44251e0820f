"""Salary import service — streams an uploaded CSV file into the repository."""

from collections.abc import Iterator
from typing import BinaryIO

from salary_api.application.interfaces import SalaryRecordRepository, SkippedRowReporter
from salary_api.application.services.csv_validation import (
    HeaderValidator,
    RecordValidator,
    RowDecision,
    RowParser,
)
from salary_api.domain.entities import ImportFailure, ImportOutcome, ImportState
from salary_api.domain.exceptions import HeaderValidationError, RowParseError
from salary_api.infrastructure.logging.colored_logger import PipelineLogger, PipelineStage

plog = PipelineLogger("SalaryImportService")


class SalaryImportService:
    """Application service that ingests one CSV upload as a single unit of work.

    Pipeline: Header check → Row stream → Commit | Rollback

    The repository transaction is opened once per call and closed exactly
    once: committed when every row parsed, rolled back otherwise. Aborted
    runs are reported through the returned ImportOutcome; only collaborator
    failures propagate as exceptions, after the rollback.
    """

    def __init__(
        self,
        repository: SalaryRecordRepository,
        reporter: SkippedRowReporter | None = None,
        header_validator: HeaderValidator | None = None,
        row_parser: RowParser | None = None,
        record_validator: RecordValidator | None = None,
    ):
        self._repository = repository
        self._reporter = reporter
        self._header_validator = header_validator or HeaderValidator()
        self._row_parser = row_parser or RowParser()
        self._record_validator = record_validator or RecordValidator()

    async def ingest(self, stream: BinaryIO, filename: str = "<upload>") -> ImportOutcome:
        """Ingest a CSV byte stream. The stream is closed before returning."""
        plog.separator(f"Importing: {filename}")
        with stream:
            await self._repository.begin()
            try:
                outcome = await self._run(iter(stream))
            except Exception as exc:
                plog.step_error(PipelineStage.ROLLBACK, "Import aborted", error=exc)
                await self._repository.rollback()
                raise

            if outcome.committed:
                await self._repository.commit()
                plog.step_complete(
                    PipelineStage.COMMIT,
                    f"Imported '{filename}'",
                    accepted=outcome.accepted_count,
                    skipped=outcome.skipped_count,
                )
            else:
                await self._repository.rollback()
                plog.step_error(
                    PipelineStage.ROLLBACK,
                    f"Rejected '{filename}'",
                    line=outcome.failure.line,
                    kind=outcome.failure.kind,
                )
        return outcome

    async def _run(self, lines: Iterator[bytes]) -> ImportOutcome:
        state = ImportState.HEADER_CHECK
        plog.step_start(PipelineStage.HEADER, "Validating header", state=state.value)
        try:
            # undecodable bytes survive as U+FFFD and fail the comparison
            header = _decode(next(lines, b""), errors="replace").lstrip("\ufeff")
            self._header_validator.validate(header)
        except HeaderValidationError as exc:
            return ImportOutcome(
                state=ImportState.HEADER_REJECTED,
                failure=ImportFailure.from_error(exc),
            )

        state = ImportState.ROW_STREAM
        plog.step_start(PipelineStage.ROWS, "Header accepted, streaming rows", state=state.value)

        accepted = 0
        skipped = 0
        for line_number, raw in enumerate(lines, start=2):
            try:
                text = _decode_row(raw, line_number)
                if not text.strip():
                    continue
                record = self._row_parser.parse(line_number, text)
            except RowParseError as exc:
                return ImportOutcome(
                    state=ImportState.ROLLED_BACK,
                    failure=ImportFailure.from_error(exc),
                )

            if self._record_validator.decide(record) is RowDecision.REJECT:
                skipped += 1
                if self._reporter is not None:
                    self._reporter.row_skipped(line_number, record)
                continue

            record.id = await self._repository.save(record)
            accepted += 1
            plog.detail(f"Processing record '{record.name}'", line=line_number, id=record.id)

        return ImportOutcome(
            state=ImportState.COMMITTED,
            accepted_count=accepted,
            skipped_count=skipped,
        )


def _decode(raw: bytes | str, errors: str = "strict") -> str:
    """Decode one raw line and strip its line terminator."""
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8", errors=errors)
    return raw.rstrip("\r\n")


def _decode_row(raw: bytes | str, line_number: int) -> str:
    try:
        return _decode(raw)
    except UnicodeDecodeError:
        raise RowParseError(
            "line is not valid UTF-8", line_number, _decode(raw, errors="replace")
        ) from None
