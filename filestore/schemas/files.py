"""Pydantic schemas for file operation endpoints."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from common.types import FileEntry


class FileEntryResponse(BaseModel):
    """Response model for one file's metadata."""
    model_config = ConfigDict(populate_by_name=True)

    file_name: str = Field(alias="fileName")
    size: int
    updated_at: datetime = Field(alias="updatedAt")
    mime: Optional[str] = None

    @classmethod
    def from_entry(cls, entry: FileEntry) -> "FileEntryResponse":
        return cls(
            file_name=entry.file_name,
            size=entry.size,
            updated_at=entry.updated_at,
            mime=entry.mime,
        )


class ListFilesResponse(BaseModel):
    """Response model for file listing and upload."""
    files: List[FileEntryResponse]


class DeleteFileRequest(BaseModel):
    """Request model for file deletion."""
    model_config = ConfigDict(populate_by_name=True)

    file_name: Optional[str] = Field(default=None, alias="fileName")


class DeleteFileResponse(BaseModel):
    """Response model for file deletion."""
    success: bool
