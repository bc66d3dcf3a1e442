"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from student_records.configs.base import BaseSettings
from student_records.configs.redis import RedisSettings
from student_records.configs.server import ServerSettings
from student_records.configs.upload import UploadSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    redis: RedisSettings = RedisSettings()
    server: ServerSettings = ServerSettings()
    upload: UploadSettings = UploadSettings()


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from student_records.configs import get_settings
        settings = get_settings()
    """
    return Settings()
