"""
Exception hierarchy for the student records service.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class StudentRecordsException(Exception):
    """Base exception for all student records errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(StudentRecordsException):
    """Raised when required input is missing or empty."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class NotFound(StudentRecordsException):
    """Raised when a referenced student record does not exist."""

    def __init__(self, student_id: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["student_id"] = student_id
        super().__init__("Student not found", details)


class FormatError(StudentRecordsException):
    """Raised when an uploaded file has a bad header or malformed structure."""

    def __init__(
        self,
        message: str,
        line_number: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize format error.

        Args:
            message: Error message
            line_number: Line of the uploaded file where parsing stopped
            details: Additional context
        """
        details = details or {}
        if line_number is not None:
            details["line_number"] = line_number
        super().__init__(message, details)


class StoreUnavailable(StudentRecordsException):
    """Raised when the key-value backend cannot be reached or fails a command."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        student_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize store error.

        Args:
            message: Error message
            operation: Store operation that failed (set_field, get_all, ...)
            student_id: Record the operation targeted, if any
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        if student_id is not None:
            details["student_id"] = student_id
        super().__init__(message, details)


class InternalError(StudentRecordsException):
    """Raised when a multi-step operation fails part-way through."""

    pass
