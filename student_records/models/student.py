"""
Student domain models and schemas.

Request/response schemas for student record operations. Request fields are
deliberately optional so that presence and emptiness checks happen in the
service layer and surface as 400 responses rather than schema errors.

Dependencies: pydantic
System role: Student API contracts
"""

from pydantic import BaseModel, Field

# Attribute names of a stored record, in write order.
STUDENT_FIELDS: tuple[str, ...] = (
    "name",
    "course",
    "age",
    "address",
    "year_level",
    "college",
    "hobbies",
)

# Expected CSV header, compared positionally after trim/lower-case.
CSV_HEADERS: tuple[str, ...] = ("id", *STUDENT_FIELDS)

# Scalar JSON values accepted for an attribute; stored as text.
FieldValue = str | int | float | None


class CreateStudentRequest(BaseModel):
    """Request schema for creating a student record."""

    id: FieldValue = Field(None, description="Caller-chosen record identifier")
    name: FieldValue = None
    course: FieldValue = None
    age: FieldValue = Field(None, description="Stored as text, not validated as numeric")
    address: FieldValue = None
    year_level: FieldValue = None
    college: FieldValue = None
    hobbies: FieldValue = None


class UpdateStudentRequest(BaseModel):
    """Request schema for a partial student update."""

    name: FieldValue = None
    course: FieldValue = None
    age: FieldValue = None
    address: FieldValue = None
    year_level: FieldValue = None
    college: FieldValue = None
    hobbies: FieldValue = None


class UploadResponse(BaseModel):
    """Response schema for a completed CSV ingestion."""

    message: str
    written: int = Field(description="Rows committed to the store")
    skipped: int = Field(description="Rows rejected during parsing")
