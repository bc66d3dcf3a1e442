"""Router utilities."""

from .upload_utils import cleanup_temp_file, stage_upload

__all__ = ["cleanup_temp_file", "stage_upload"]
