"""
Upload staging utilities.

Copies an incoming multipart file into a private temp directory so the
ingestion pipeline can stream it from disk, and removes it afterwards.

Dependencies: fastapi, student_records.configs
System role: Temporary storage for batch uploads
"""

import logging
import shutil
import tempfile
from pathlib import Path

from fastapi import UploadFile

from student_records.configs.upload import UploadSettings
from student_records.core.exceptions import ValidationError

logger = logging.getLogger(__name__)

TEMP_DIR_PREFIX = "student_upload_"


async def stage_upload(upload: UploadFile, settings: UploadSettings) -> Path:
    """
    Write an uploaded file to a fresh temp directory.

    Args:
        upload: Incoming multipart file
        settings: Upload staging settings

    Returns:
        Path: Path of the staged copy

    Raises:
        ValidationError: If the upload exceeds the configured size limit
    """
    temp_dir = Path(tempfile.mkdtemp(prefix=TEMP_DIR_PREFIX, dir=settings.dir))
    temp_path = temp_dir / "upload.csv"
    size = 0

    try:
        with temp_path.open("wb") as f:
            while chunk := await upload.read(settings.chunk_size):
                size += len(chunk)
                if settings.max_bytes and size > settings.max_bytes:
                    raise ValidationError(
                        "Uploaded file is too large",
                        field="file",
                        details={"max_bytes": settings.max_bytes},
                    )
                f.write(chunk)
    except BaseException:
        cleanup_temp_file(str(temp_path))
        raise

    logger.debug(
        "Staged upload",
        extra={"file_name": upload.filename, "file_path": str(temp_path), "size": size},
    )
    return temp_path


def cleanup_temp_file(file_path: str) -> None:
    """
    Safely remove a staged file and its parent temp directory.

    Args:
        file_path: Path to file to remove
    """
    try:
        path = Path(file_path)
        parent_dir = path.parent

        if path.exists():
            path.unlink()
            logger.debug("Cleaned up temp file", extra={"file_path": file_path})

        if parent_dir.exists() and parent_dir.name.startswith(TEMP_DIR_PREFIX):
            shutil.rmtree(parent_dir, ignore_errors=True)
            logger.debug("Cleaned up temp directory", extra={"temp_dir": str(parent_dir)})

    except OSError as e:
        logger.warning(
            "Failed to cleanup temp file",
            extra={"file_path": file_path, "error": str(e)},
        )
