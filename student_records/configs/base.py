"""
Shared settings foundation.

Every settings class reads the process environment and an optional
``.env`` file in the working directory.

Dependencies: pydantic_settings
System role: Base class for the per-concern settings
"""

from pydantic import Field
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Settings read from the environment, shared by the whole service."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(
        default="INFO",
        description="Root log level for the service (LOG_LEVEL)",
    )
