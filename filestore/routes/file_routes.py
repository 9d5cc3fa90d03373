"""File operation API routes."""

from typing import Optional

from fastapi import APIRouter, Depends, Request, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import StreamingResponse
from starlette.datastructures import UploadFile

from filestore.dependencies import get_file_service
from filestore.schemas.files import (
    DeleteFileRequest,
    DeleteFileResponse,
    FileEntryResponse,
    ListFilesResponse,
)
from filestore.services.file_service import FileStoreService
from filestore.services.staging import stage_uploads

router = APIRouter(prefix="/files", tags=["Files"])


@router.get("", response_model=ListFilesResponse)
def list_files(file_service: FileStoreService = Depends(get_file_service)):
    """
    List the files in the store directory.

    Returns:
        - files: fileName, size, updatedAt and mime of every regular file

    Raises:
        - 500: Store directory could not be read
    """
    entries = file_service.list_files()
    return ListFilesResponse(files=[FileEntryResponse.from_entry(entry) for entry in entries])


@router.get("/{file_name}")
def fetch_file(file_name: str, file_service: FileStoreService = Depends(get_file_service)):
    """
    Download a text or image file.

    Parameters:
        - file_name: Name of the file in the store directory

    Returns:
        - StreamingResponse with the file bytes, Content-Type and Content-Length

    Raises:
        - 400: Unsupported MIME type or invalid file name
        - 404: File not found
        - 500: Internal server error
    """
    entry, stream = file_service.open_file(file_name)

    return StreamingResponse(
        stream,
        media_type=entry.mime,
        headers={"Content-Length": str(entry.size)},
    )


@router.post("", response_model=ListFilesResponse, status_code=status.HTTP_201_CREATED)
async def upload_files(request: Request, file_service: FileStoreService = Depends(get_file_service)):
    """
    Upload one or more files (multipart/form-data, any field names).

    Files with an existing name are overwritten.

    Returns:
        - files: Metadata of every stored file

    Raises:
        - 400: No files in the request or invalid file name
        - 500: Internal server error
    """
    async with request.form() as form:
        uploads = [
            value for _, value in form.multi_items()
            if isinstance(value, UploadFile) and value.filename
        ]
        parts = await run_in_threadpool(stage_uploads, uploads, file_service.staging_directory)

    entries = await run_in_threadpool(file_service.store_files, parts)

    return ListFilesResponse(files=[FileEntryResponse.from_entry(entry) for entry in entries])


@router.delete("", response_model=DeleteFileResponse)
def delete_file(
    payload: Optional[DeleteFileRequest] = None,
    file_service: FileStoreService = Depends(get_file_service)
):
    """
    Delete one file.

    Parameters:
        - fileName: Name of the file to delete (JSON body)

    Returns:
        - success: true

    Raises:
        - 400: Missing or invalid fileName
        - 500: File could not be deleted (including when it does not exist)
    """
    file_service.remove_file(payload.file_name if payload else None)

    return DeleteFileResponse(success=True)
