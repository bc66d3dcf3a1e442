"""
Redis configuration settings.

Manages connection parameters for the key-value store holding student records.

Dependencies: pydantic, pydantic_settings
System role: Record store connection configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from student_records.configs.base import BaseSettings


class RedisSettings(BaseSettings):
    """Redis connection configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="REDIS_",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = Field(default="127.0.0.1", description="Redis host")
    port: int = Field(default=6379, description="Redis port")
    db: int = Field(default=0, description="Redis database number")
    password: str | None = Field(default=None, description="Redis password")
    url: str | None = Field(
        default=None,
        description="Full Redis URL, takes precedence over host/port/db when set",
    )

    key_prefix: str = Field(default="student:", description="Namespace prefix for record keys")

    socket_timeout: float | None = Field(default=5.0, description="Socket timeout in seconds")
    socket_connect_timeout: float | None = Field(
        default=5.0,
        description="Connect timeout in seconds",
    )

    @property
    def redis_url(self) -> str:
        """
        Construct Redis connection URL.

        Returns:
            str: redis-py compatible URL
        """
        if self.url:
            return self.url
        auth = f":{self.password}@" if self.password else ""
        return f"redis://{auth}{self.host}:{self.port}/{self.db}"
