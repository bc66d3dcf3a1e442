"""
Dependency injection container.

Factory functions for FastAPI dependencies. The Redis client is created once
by the application lifespan and kept on ``app.state``; per-request objects
are built from it here.

Dependencies: student_records.configs, student_records.application, student_records.boundary
System role: DI container for service injection
"""

from functools import lru_cache

from fastapi import Depends, Request
from redis.asyncio import Redis

from student_records.application.services import StudentService
from student_records.boundary.kv import StudentStore
from student_records.configs import Settings, get_settings


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_redis(request: Request) -> Redis:
    """
    Get the process-wide Redis client.

    Args:
        request: Incoming request (injected)

    Returns:
        Redis: Client opened by the application lifespan
    """
    return request.app.state.redis


def get_student_store(
    redis: Redis = Depends(get_redis),
    settings: Settings = Depends(get_settings_dependency),
) -> StudentStore:
    """
    Get student record store.

    Args:
        redis: Redis client (injected)
        settings: Application settings (injected)

    Returns:
        StudentStore: Store using the configured key prefix
    """
    return StudentStore(redis, key_prefix=settings.redis.key_prefix)


def get_student_service(store: StudentStore = Depends(get_student_store)) -> StudentService:
    """
    Get student service instance.

    Args:
        store: Record store (injected)

    Returns:
        StudentService: Student service instance
    """
    return StudentService(store=store)
