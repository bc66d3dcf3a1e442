"""
FastAPI application with assembled routers.

Builds the app with its Redis lifespan, middleware and routers.
Run it with ``python -m student_records``.

Dependencies: fastapi, student_records.api.routers
System role: API entry point with router assembly
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from student_records import __version__
from student_records.boundary.kv import close_redis, connect_redis
from student_records.configs import get_settings
from student_records.core.exceptions import StoreUnavailable
from student_records.observability.logger import configure_logging
from student_records.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)
from .routers import health_router, students_router
from .routers.students import student_request_validation_handler

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Connects to Redis on startup and closes the connection on shutdown.
    A failed connection aborts startup.
    """
    settings = get_settings()

    # Startup
    try:
        app.state.redis = await connect_redis(settings.redis)
    except StoreUnavailable as e:
        logger.critical("Redis connection failed, shutting down", extra={"error": str(e)})
        raise

    yield

    # Shutdown
    await close_redis(app.state.redis)


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Student Records API",
        description="Redis-backed student records with CSV bulk upload",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.server.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Correlation is added last so it wraps request logging
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.add_exception_handler(RequestValidationError, student_request_validation_handler)

    app.include_router(health_router)
    app.include_router(students_router)

    return app


app = create_app()
