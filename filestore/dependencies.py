"""FastAPI dependencies."""

from fastapi import Request

from filestore.services.file_service import FileStoreService


def get_file_service(request: Request) -> FileStoreService:
    """
    FastAPI dependency returning the service bound to this application.

    Args:
        request: Incoming request

    Returns:
        FileStoreService created by create_app
    """
    return request.app.state.file_service
