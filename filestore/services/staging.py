"""Writes uploaded parts to staging files before they enter the store."""

import os
import shutil
import tempfile
from pathlib import Path
from typing import List, Optional

from fastapi import UploadFile

from common.constants import STREAM_PIECE_SIZE_BYTES
from common.logging_config import get_logger
from common.types import UploadPart
from filestore.exceptions import IOFailureError
from filestore.services.file_service import discard_staging_file

logger = get_logger(__name__)


def stage_upload(upload: UploadFile, staging_directory: Optional[Path] = None) -> UploadPart:
    """
    Copy one uploaded file to a staging file on local disk.

    Args:
        upload: File part parsed from the multipart body
        staging_directory: Directory for staging files; system temp dir if None

    Returns:
        UploadPart pointing at the staging file

    Raises:
        IOFailureError: If the staging file cannot be written
    """
    fd, staging_path = tempfile.mkstemp(prefix="filestore-", suffix=".part", dir=staging_directory)
    try:
        with os.fdopen(fd, "wb") as staging_file:
            shutil.copyfileobj(upload.file, staging_file, STREAM_PIECE_SIZE_BYTES)
    except OSError as e:
        discard_staging_file(Path(staging_path))
        raise IOFailureError(f"Failed to stage upload {upload.filename}: {e}") from e

    logger.debug(f"Staged upload {upload.filename} at {staging_path}")
    return UploadPart(staging_path=Path(staging_path), file_name=upload.filename)


def stage_uploads(uploads: List[UploadFile], staging_directory: Optional[Path] = None) -> List[UploadPart]:
    """
    Stage every upload, removing already staged files if one of them fails.
    """
    parts = []
    try:
        for upload in uploads:
            parts.append(stage_upload(upload, staging_directory))
    except IOFailureError:
        for part in parts:
            discard_staging_file(part.staging_path)
        raise
    return parts
