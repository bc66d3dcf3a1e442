"""
Students router package.

Exports the router for student record endpoints and the handler that turns
malformed student requests into 400 responses.
"""

from .student_error_handling import student_request_validation_handler
from .students_router import router

__all__ = ["router", "student_request_validation_handler"]
