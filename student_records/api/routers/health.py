"""
Health check API endpoints.

Routes: GET /health, GET /health/store

Dependencies: student_records.boundary
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from student_records.api.deps import get_student_store
from student_records.boundary.kv import StudentStore
from student_records.core.exceptions import StoreUnavailable


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/store", response_model=HealthResponse)
async def health_check_store(store: StudentStore = Depends(get_student_store)):
    """Record store health check, 503 when Redis does not answer."""
    try:
        await store.ping()
    except StoreUnavailable:
        return JSONResponse(
            status_code=503,
            content=HealthResponse(status="unhealthy", message="Redis unavailable").model_dump(),
        )
    return HealthResponse(status="healthy", message="Redis connection OK")
