"""API-specific dependencies."""

from .dependencies import (
    get_redis,
    get_settings_dependency,
    get_student_service,
    get_student_store,
)

__all__ = [
    "get_redis",
    "get_settings_dependency",
    "get_student_service",
    "get_student_store",
]
