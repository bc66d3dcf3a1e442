"""
Student service orchestrator.

Coordinates student record lifecycle operations against the record store.

Create and update write one attribute per store command, so a reader or a
concurrent writer on the same id can observe a record with a mix of old and
new values. There is no per-record lock; the last write to each field wins.

Dependencies: student_records.boundary.kv, student_records.application.services.ingestion_service
System role: Student use case orchestration
"""

import asyncio
import logging
from pathlib import Path
from typing import Any, Mapping

from student_records.application.services.ingestion_service import (
    IngestionResult,
    StudentIngestionPipeline,
)
from student_records.boundary.kv.student_store import StudentStore
from student_records.core.exceptions import (
    InternalError,
    NotFound,
    StoreUnavailable,
    ValidationError,
)
from student_records.models.student import STUDENT_FIELDS

logger = logging.getLogger(__name__)


class StudentService:
    """Student service orchestrator."""

    def __init__(self, store: StudentStore) -> None:
        """
        Initialize student service with a record store.

        Args:
            store: Record store adapter
        """
        self.store = store

    async def create_student(self, payload: Mapping[str, Any]) -> str:
        """
        Create or overwrite a student record.

        Every field, the id included, must be truthy. This also rejects
        values such as ``"0"`` for age; callers depend on that behaviour.

        Args:
            payload: id plus the seven record attributes

        Returns:
            str: The record id

        Raises:
            ValidationError: If any field is missing or falsy
            InternalError: If a store write fails
        """
        for field in ("id", *STUDENT_FIELDS):
            if not _truthy(payload.get(field)):
                raise ValidationError("All fields are required", field=field)

        student_id = str(payload["id"])
        try:
            for field in STUDENT_FIELDS:
                await self.store.set_field(student_id, field, str(payload[field]))
        except StoreUnavailable as e:
            logger.error(
                "Failed to save student",
                extra={"student_id": student_id, "error": str(e)},
            )
            raise InternalError("Failed to save student", details={"student_id": student_id}) from e

        logger.info("Student saved", extra={"student_id": student_id})
        return student_id

    async def get_student(self, student_id: str) -> dict[str, str]:
        """
        Get a student record by id.

        Args:
            student_id: Record id

        Returns:
            dict[str, str]: Stored attributes verbatim

        Raises:
            NotFound: If the record is absent
        """
        student = await self.store.get_all(student_id)
        if not student:
            raise NotFound(student_id)
        return student

    async def get_all_students(self) -> list[dict[str, str]]:
        """
        Get every student record.

        Reads run concurrently after the id listing. A record removed in
        between comes back with its id only.

        Returns:
            list[dict[str, str]]: ``{"id": ..., **fields}`` per record
        """
        student_ids = await self.store.list_ids()
        records = await asyncio.gather(
            *(self.store.get_all(student_id) for student_id in student_ids)
        )
        return [
            {"id": student_id, **record}
            for student_id, record in zip(student_ids, records)
        ]

    async def update_student(self, student_id: str, fields: Mapping[str, Any]) -> list[str]:
        """
        Replace the supplied attributes of an existing record.

        Attributes that are omitted or falsy are left unchanged.

        Args:
            student_id: Record id
            fields: Partial attribute mapping

        Returns:
            list[str]: Names of the attributes written

        Raises:
            ValidationError: If no usable field is supplied
            NotFound: If the record is absent
            InternalError: If a store write fails part-way
        """
        if not fields:
            raise ValidationError("No fields provided for update")

        updates = {
            field: str(fields[field])
            for field in STUDENT_FIELDS
            if _truthy(fields.get(field))
        }
        if not updates:
            raise ValidationError("At least one field is required to update")

        existing = await self.store.get_all(student_id)
        if not existing:
            raise NotFound(student_id)

        try:
            for field, value in updates.items():
                await self.store.set_field(student_id, field, value)
        except StoreUnavailable as e:
            logger.error(
                "Failed to update student",
                extra={"student_id": student_id, "fields": list(updates), "error": str(e)},
            )
            raise InternalError("Failed to update student", details={"student_id": student_id}) from e

        logger.info(
            "Student updated",
            extra={"student_id": student_id, "updates": list(updates)},
        )
        return list(updates)

    async def delete_student(self, student_id: str) -> None:
        """
        Delete a student record. Absent ids are not an error.

        Args:
            student_id: Record id
        """
        await self.store.delete(student_id)
        logger.info("Student deleted", extra={"student_id": student_id})

    async def ingest_csv_file(self, path: str | Path) -> IngestionResult:
        """
        Create records from a staged CSV upload.

        Args:
            path: Path to the staged file

        Returns:
            IngestionResult: Counts of written and skipped rows
        """
        return await StudentIngestionPipeline(self.store).run(path)


def _truthy(value: Any) -> bool:
    # The string "0" counts as empty, like numeric zero.
    if isinstance(value, str) and value == "0":
        return False
    return bool(value)
