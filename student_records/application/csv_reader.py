"""
Streaming CSV reader for student uploads.

Reads a staged upload lazily, one row at a time, and turns rows into record
candidates. Parsing failures of the underlying file are raised as
FormatError; row-level problems are reported as RowRejected so the caller
can log and skip them.

Dependencies: csv (stdlib), student_records.models.student
System role: Row source for the batch ingestion pipeline
"""

import csv
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Sequence

from student_records.core.exceptions import FormatError
from student_records.models.student import CSV_HEADERS, STUDENT_FIELDS

PLACEHOLDER = "N/A"


@dataclass(frozen=True)
class StudentRow:
    """One accepted upload row."""

    line_number: int
    student_id: str
    fields: dict[str, str]


@dataclass(frozen=True)
class RowRejected:
    """One upload row that cannot become a record."""

    line_number: int
    reason: str
    raw: list[str]


def iter_csv_rows(path: str | Path, encoding: str = "utf-8-sig") -> Iterator[tuple[int, list[str]]]:
    """
    Yield ``(line_number, row)`` pairs from a CSV file.

    The file is opened lazily and closed when the generator finishes or is
    closed. A BOM at the start of the file is dropped.

    Args:
        path: Path to the staged CSV file
        encoding: Text encoding of the file

    Yields:
        tuple[int, list[str]]: Line number of the row's last line and its cells

    Raises:
        FormatError: If the file is not valid CSV or not decodable text
    """
    with open(path, newline="", encoding=encoding) as f:
        reader = csv.reader(f, strict=True)
        try:
            for row in reader:
                yield reader.line_num, row
        except csv.Error as e:
            raise FormatError(f"Invalid CSV format: {e}", line_number=reader.line_num) from e
        except UnicodeDecodeError as e:
            raise FormatError(
                "Invalid CSV format: file is not valid text",
                line_number=reader.line_num,
            ) from e


def validate_header(header: Sequence[str] | None) -> None:
    """
    Check the header row against the expected column sequence.

    Columns are compared position by position after trimming and
    lower-casing. Columns past the expected ones are ignored.

    Args:
        header: First row of the upload, or None for an empty file

    Raises:
        FormatError: On a missing, reordered or misspelled column
    """
    if header is None:
        raise FormatError("Invalid CSV format: file is empty")

    normalized = [column.strip().lower() for column in header]
    for index, expected in enumerate(CSV_HEADERS):
        actual = normalized[index] if index < len(normalized) else None
        if actual != expected:
            raise FormatError(
                "Invalid CSV format: Headers do not match expected structure.",
                line_number=1,
                details={"column": index, "expected": expected, "actual": actual},
            )


def parse_row(line_number: int, row: Sequence[str]) -> StudentRow | RowRejected | None:
    """
    Turn one data row into a record candidate.

    Values are trimmed and empty attribute values become ``"N/A"``. The id
    is never substituted, so a row without an id is rejected. A row too
    short to carry every attribute is rejected as well.

    Args:
        line_number: Line the row ends on
        row: Cells of the row

    Returns:
        StudentRow for an accepted row, RowRejected for a rejected one,
        None for a blank line
    """
    if not any(cell.strip() for cell in row):
        return None

    student_id = row[0].strip()
    if not student_id:
        return RowRejected(line_number, "missing id", list(row))

    missing = [
        field
        for index, field in enumerate(STUDENT_FIELDS, start=1)
        if index >= len(row)
    ]
    if missing:
        return RowRejected(line_number, f"missing columns: {', '.join(missing)}", list(row))

    fields = {
        field: row[index].strip() or PLACEHOLDER
        for index, field in enumerate(STUDENT_FIELDS, start=1)
    }
    return StudentRow(line_number, student_id, fields)
