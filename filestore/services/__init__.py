"""Service layer for file store operations."""

from filestore.services.file_service import FileStoreService, validate_file_name
from filestore.services.staging import stage_upload, stage_uploads

__all__ = ["FileStoreService", "validate_file_name", "stage_upload", "stage_uploads"]
