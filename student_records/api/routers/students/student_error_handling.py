"""
Student error handling utilities.

Provides a decorator for consistent error handling across student
endpoints: domain exceptions are logged with context and turned into
HTTPExceptions with the matching status code.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, Request, status
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from student_records.core.exceptions import (
    FormatError,
    InternalError,
    NotFound,
    StoreUnavailable,
    ValidationError,
)
from student_records.observability.log_utils import log_operation_failure

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def handle_student_errors(func: F) -> F:
    """
    Decorator to handle student errors and transform them into HTTPExceptions.

    Mapping:
    - ValidationError, FormatError -> 400
    - NotFound -> 404
    - StoreUnavailable, InternalError, anything unexpected -> 500
    """
    operation = func.__name__

    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        student_id = kwargs.get("student_id")
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except NotFound as e:
            logger.warning(
                "Student not found",
                extra={"operation": operation, "student_id": student_id},
            )
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

        except (ValidationError, FormatError) as e:
            logger.warning(
                "Invalid student request",
                extra={"operation": operation, "student_id": student_id, "error": str(e)},
            )
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

        except (StoreUnavailable, InternalError) as e:
            logger.error(
                "Student operation failed",
                extra={"operation": operation, "student_id": student_id, "error": str(e)},
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=e.message,
            )

        except Exception as e:
            log_operation_failure(logger, operation, e, student_id=student_id)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="An internal error occurred during student operation",
            )

    return wrapper  # type: ignore


STUDENTS_PATH = "/students"
UPLOAD_PATH = "/students/upload"


def _request_shape_message(method: str, path: str) -> str:
    if method == "POST" and path == UPLOAD_PATH:
        return "No file uploaded."
    if method == "PUT":
        return "No fields provided for update"
    return "All fields are required"


async def student_request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Answer malformed student requests with 400 instead of FastAPI's 422.

    Covers bodies that are not JSON objects, non-scalar field values and
    upload forms whose ``file`` part is plain text. Requests outside
    ``/students`` keep the default handler.
    """
    path = request.url.path.rstrip("/")
    if not (path == STUDENTS_PATH or path.startswith(STUDENTS_PATH + "/")):
        return await request_validation_exception_handler(request, exc)

    message = _request_shape_message(request.method, path)
    logger.warning(
        "Invalid student request",
        extra={
            "operation": f"{request.method} {path}",
            "error": message,
            "error_count": len(exc.errors()),
        },
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": message},
    )
