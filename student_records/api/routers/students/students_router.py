"""
Student API endpoints.

Routes:
- POST /students - Create (or overwrite) a student
- POST /students/upload - Bulk create from a CSV upload
- GET /students - List all students
- GET /students/{id} - Get single student
- PUT /students/{id} - Update supplied fields of a student
- DELETE /students/{id} - Delete student

Dependencies: student_records.application.services, student_records.models
System role: Student record HTTP API
"""

import logging

from fastapi import APIRouter, Body, Depends, File, UploadFile, status

from student_records.api.deps import get_settings_dependency, get_student_service
from student_records.application.services import StudentService
from student_records.configs import Settings
from student_records.core.exceptions import ValidationError
from student_records.models.common import MessageResponse
from student_records.models.student import (
    CreateStudentRequest,
    UpdateStudentRequest,
    UploadResponse,
)

from ..router_utils import cleanup_temp_file, stage_upload
from .student_error_handling import handle_student_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/students", tags=["students"])


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
@handle_student_errors
async def create_student(
    request: CreateStudentRequest | None = Body(None),
    student_service: StudentService = Depends(get_student_service),
) -> MessageResponse:
    """
    Create a student, overwriting any record with the same id.

    Raises:
        HTTPException(400): A field is missing or empty
        HTTPException(500): Store failure
    """
    payload = request.model_dump() if request is not None else {}
    student_id = await student_service.create_student(payload)
    logger.info("Student created", extra={"student_id": student_id})
    return MessageResponse(message="Student saved successfully")


@router.post("/upload", response_model=UploadResponse, status_code=status.HTTP_201_CREATED)
@handle_student_errors
async def upload_students(
    file: UploadFile | None = File(None),
    student_service: StudentService = Depends(get_student_service),
    settings: Settings = Depends(get_settings_dependency),
) -> UploadResponse:
    """
    Create students from an uploaded CSV file.

    The header must be ``id,name,course,age,address,year_level,college,hobbies``.
    Rows without an id are skipped; empty values are stored as ``N/A``.
    The staged copy of the upload is removed whatever the outcome.

    Raises:
        HTTPException(400): No file, header mismatch or malformed CSV
        HTTPException(500): Store failure while writing rows
    """
    if file is None or not file.filename:
        raise ValidationError("No file uploaded.", field="file")

    logger.info("Received CSV upload", extra={"file_name": file.filename})

    temp_path = await stage_upload(file, settings.upload)
    try:
        result = await student_service.ingest_csv_file(temp_path)
    finally:
        cleanup_temp_file(str(temp_path))
        logger.debug("Uploaded file deleted", extra={"file_path": str(temp_path)})

    return UploadResponse(
        message=result.message,
        written=result.written,
        skipped=result.skipped,
    )


@router.get("", response_model=list[dict[str, str]])
@handle_student_errors
async def list_students(
    student_service: StudentService = Depends(get_student_service),
) -> list[dict[str, str]]:
    """List every student as ``{"id": ..., **fields}``."""
    students = await student_service.get_all_students()
    logger.info("Students retrieved", extra={"count": len(students)})
    return students


@router.get("/{student_id}", response_model=dict[str, str])
@handle_student_errors
async def get_student(
    student_id: str,
    student_service: StudentService = Depends(get_student_service),
) -> dict[str, str]:
    """
    Get the stored fields of one student.

    Raises:
        HTTPException(404): Student not found
    """
    return await student_service.get_student(student_id)


@router.put("/{student_id}", response_model=MessageResponse)
@handle_student_errors
async def update_student(
    student_id: str,
    request: UpdateStudentRequest | None = Body(None),
    student_service: StudentService = Depends(get_student_service),
) -> MessageResponse:
    """
    Update the supplied, non-empty fields of a student.

    Raises:
        HTTPException(400): No usable field supplied
        HTTPException(404): Student not found
        HTTPException(500): Store failure, some fields may be written
    """
    fields = request.model_dump(exclude_unset=True) if request is not None else {}
    await student_service.update_student(student_id, fields)
    return MessageResponse(message="Student updated successfully")


@router.delete("/{student_id}", response_model=MessageResponse)
@handle_student_errors
async def delete_student(
    student_id: str,
    student_service: StudentService = Depends(get_student_service),
) -> MessageResponse:
    """Delete a student. Succeeds whether or not the student existed."""
    await student_service.delete_student(student_id)
    return MessageResponse(message="Student deleted successfully")
