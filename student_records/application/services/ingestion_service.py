"""
Batch ingestion pipeline for CSV uploads.

Drives an uploaded file through AwaitHeader -> StreamingRows -> Finalizing
and ends in Done or Failed. No record is written before the header is
accepted and the whole file has parsed; rows are then written in arrival
order, one multi-field write per row. A failed write stops the run and
leaves earlier rows committed.

Dependencies: student_records.application.csv_reader, student_records.boundary.kv
System role: Bulk record creation from delimited-file uploads
"""

import logging
from contextlib import closing
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from student_records.application.csv_reader import (
    RowRejected,
    StudentRow,
    iter_csv_rows,
    parse_row,
    validate_header,
)
from student_records.boundary.kv.student_store import StudentStore
from student_records.core.exceptions import (
    InternalError,
    StoreUnavailable,
    StudentRecordsException,
)
from student_records.observability.log_utils import log_row_skipped

logger = logging.getLogger(__name__)


class IngestionState(str, Enum):
    """Pipeline states."""

    AWAIT_HEADER = "await_header"
    STREAMING_ROWS = "streaming_rows"
    FINALIZING = "finalizing"
    DONE = "done"
    FAILED = "failed"


@dataclass
class IngestionResult:
    """Outcome of a completed ingestion run."""

    written: int
    skipped: int
    rejected: list[RowRejected] = field(default_factory=list)
    message: str = "CSV data uploaded and saved successfully."


class StudentIngestionPipeline:
    """
    Single-use ingestion run over one staged file.

    Attributes:
        store: Record store rows are written to
        state: Current pipeline state
    """

    def __init__(self, store: StudentStore) -> None:
        self.store = store
        self.state = IngestionState.AWAIT_HEADER
        self.buffered: list[StudentRow] = []
        self.rejected: list[RowRejected] = []
        self.written = 0

    async def run(self, path: str | Path) -> IngestionResult:
        """
        Ingest a staged CSV file.

        Args:
            path: Path to the staged upload

        Returns:
            IngestionResult: Counts of written and skipped rows

        Raises:
            FormatError: Bad header or malformed file, nothing written
            InternalError: Store failure while writing rows
        """
        if self.state is not IngestionState.AWAIT_HEADER:
            raise RuntimeError("Ingestion pipeline instances are single-use")

        try:
            with closing(iter_csv_rows(path)) as rows:
                first = next(rows, None)
                validate_header(first[1] if first else None)
                self.state = IngestionState.STREAMING_ROWS

                for line_number, row in rows:
                    self._accept(line_number, row)

            self.state = IngestionState.FINALIZING
            await self._finalize()
        except StudentRecordsException as e:
            self.state = IngestionState.FAILED
            logger.warning(
                "CSV ingestion failed",
                extra={
                    "file_path": str(path),
                    "error": str(e),
                    "error_type": type(e).__name__,
                    "written": self.written,
                },
            )
            raise

        self.state = IngestionState.DONE
        logger.info(
            "CSV data uploaded and saved successfully",
            extra={"written": self.written, "skipped": len(self.rejected)},
        )
        return IngestionResult(
            written=self.written,
            skipped=len(self.rejected),
            rejected=list(self.rejected),
        )

    def _accept(self, line_number: int, row: list[str]) -> None:
        candidate = parse_row(line_number, row)
        if candidate is None:
            return
        if isinstance(candidate, RowRejected):
            log_row_skipped(logger, line_number, candidate.reason, row)
            self.rejected.append(candidate)
            return
        self.buffered.append(candidate)

    async def _finalize(self) -> None:
        try:
            await self.store.ping()
        except StoreUnavailable as e:
            raise InternalError("Redis database is unavailable.") from e

        for row in self.buffered:
            logger.debug(
                "Saving student row",
                extra={"student_id": row.student_id, "line_number": row.line_number},
            )
            try:
                await self.store.set_fields(row.student_id, row.fields)
            except StoreUnavailable as e:
                raise InternalError(
                    "Error processing file.",
                    details={
                        "student_id": row.student_id,
                        "line_number": row.line_number,
                        "written": self.written,
                    },
                ) from e
            self.written += 1
