"""Pydantic schemas for API requests and responses."""

from filestore.schemas.files import (
    FileEntryResponse,
    ListFilesResponse,
    DeleteFileRequest,
    DeleteFileResponse
)
from filestore.schemas.common import ErrorResponse

__all__ = [
    "FileEntryResponse",
    "ListFilesResponse",
    "DeleteFileRequest",
    "DeleteFileResponse",
    "ErrorResponse"
]
