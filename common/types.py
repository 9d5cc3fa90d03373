"""Shared data type definitions (FileEntry, UploadPart)."""

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class FileEntry:
    """
    Metadata for one regular file in the store directory.

    Computed from stat on every request, never persisted.
    """
    file_name: str
    size: int
    updated_at: datetime
    mime: Optional[str]


@dataclass(frozen=True)
class UploadPart:
    """
    An uploaded file waiting in the staging area.
    """
    staging_path: Path
    file_name: str
