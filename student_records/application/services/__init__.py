"""Application services."""

from student_records.application.services.ingestion_service import (
    IngestionResult,
    IngestionState,
    StudentIngestionPipeline,
)
from student_records.application.services.student_service import StudentService

__all__ = [
    "IngestionResult",
    "IngestionState",
    "StudentIngestionPipeline",
    "StudentService",
]
