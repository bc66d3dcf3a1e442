"""
Upload staging configuration settings.

Controls where uploaded CSV files are staged before ingestion.

Dependencies: pydantic, pydantic_settings
System role: Batch upload configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from student_records.configs.base import BaseSettings


class UploadSettings(BaseSettings):
    """Upload staging configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="UPLOAD_",
        case_sensitive=False,
        extra="ignore",
    )

    dir: str | None = Field(
        default=None,
        description="Directory for staged uploads (system temp dir when unset)",
    )
    max_bytes: int = Field(
        default=10 * 1024 * 1024,
        description="Maximum accepted upload size in bytes (0 disables the limit)",
    )
    chunk_size: int = Field(default=64 * 1024, description="Read chunk size when staging")
