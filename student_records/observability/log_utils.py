"""
Structured log helpers for student operations.

Student failures are logged with the same context keys everywhere:
``operation``, ``student_id`` and, for CSV rows, ``line_number``.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from typing import Any

MAX_ROW_LENGTH = 200


def clip(value: Any, max_length: int = MAX_ROW_LENGTH) -> str:
    """Render a value for a log record, cutting long text short."""
    text = "-" if value is None else str(value)
    if len(text) > max_length:
        return f"{text[:max_length]}... ({len(text)} chars)"
    return text


def student_context(
    operation: str,
    student_id: str | None = None,
    line_number: int | None = None,
    **extra: Any,
) -> dict[str, Any]:
    """
    Build the ``extra`` mapping for a student log record.

    Keys that are None are left out so formatters only see what is known.
    """
    context: dict[str, Any] = {"operation": operation}
    if student_id is not None:
        context["student_id"] = clip(student_id)
    if line_number is not None:
        context["line_number"] = line_number
    context.update({key: clip(value) for key, value in extra.items()})
    return context


def log_row_skipped(
    logger: logging.Logger,
    line_number: int,
    reason: str,
    row: list[str],
) -> None:
    """Warn about a CSV row left out of a batch."""
    logger.warning(
        "Skipping invalid row at line %d: %s",
        line_number,
        reason,
        extra=student_context(
            "ingest_csv",
            line_number=line_number,
            reason=reason,
            row=",".join(row),
        ),
    )


def log_operation_failure(
    logger: logging.Logger,
    operation: str,
    exc: BaseException,
    student_id: str | None = None,
) -> None:
    """Log an unexpected failure with its traceback and student context."""
    logger.exception(
        "Unexpected failure in %s",
        operation,
        extra=student_context(
            operation,
            student_id=student_id,
            error_type=type(exc).__name__,
            error_msg=exc,
        ),
    )
