"""Entry point for the FileStore service."""

import asyncio
import time
import uuid
from pathlib import Path
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from common.logging_config import setup_logging
from filestore import config
from filestore.exceptions import (
    FileStoreException,
    BadRequestError,
    InvalidFileNameError,
    UnsupportedMediaTypeError,
    StoredFileNotFoundError,
    IOFailureError
)
from filestore.routes.file_routes import router as file_router
from filestore.schemas.common import ErrorResponse
from filestore.services.file_service import FileStoreService

logger = setup_logging('filestore')

GENERIC_ERROR_MESSAGE = "Internal server error"

TIMEOUT_EXEMPT_METHODS = frozenset({"POST", "PUT", "PATCH", "DELETE"})


def _request_id(request: Request) -> str:
    return getattr(request.state, 'request_id', 'unknown')


def _error_response(status_code: int, message: str, code: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message, code=code).model_dump()
    )


async def bad_request_handler(request: Request, exc: BadRequestError):
    logger.warning(
        f"Bad request: {exc} [request_id={_request_id(request)}] path={request.url.path}"
    )
    return _error_response(status.HTTP_400_BAD_REQUEST, str(exc), "BAD_REQUEST")


async def invalid_file_name_handler(request: Request, exc: InvalidFileNameError):
    logger.warning(
        f"Invalid file name: {exc} [request_id={_request_id(request)}] path={request.url.path}"
    )
    return _error_response(status.HTTP_400_BAD_REQUEST, str(exc), "INVALID_FILE_NAME")


async def unsupported_media_type_handler(request: Request, exc: UnsupportedMediaTypeError):
    logger.warning(
        f"Unsupported media type: {exc} [request_id={_request_id(request)}] path={request.url.path}"
    )
    return _error_response(status.HTTP_400_BAD_REQUEST, str(exc), "UNSUPPORTED_MEDIA_TYPE")


async def file_not_found_handler(request: Request, exc: StoredFileNotFoundError):
    logger.warning(
        f"File not found: {exc} [request_id={_request_id(request)}] path={request.url.path}"
    )
    return _error_response(status.HTTP_404_NOT_FOUND, str(exc), "FILE_NOT_FOUND")


async def io_failure_handler(request: Request, exc: IOFailureError):
    logger.error(
        f"I/O failure: {exc} [request_id={_request_id(request)}] path={request.url.path}",
        exc_info=exc
    )
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_ERROR_MESSAGE, "INTERNAL_ERROR")


async def filestore_exception_handler(request: Request, exc: FileStoreException):
    logger.error(
        f"FileStore exception: {exc} [request_id={_request_id(request)}] path={request.url.path}",
        exc_info=exc
    )
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_ERROR_MESSAGE, "INTERNAL_ERROR")


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(
        f"Unhandled exception: {exc!r} [request_id={_request_id(request)}] path={request.url.path}",
        exc_info=exc
    )
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_ERROR_MESSAGE, "INTERNAL_ERROR")


def create_app(
    store_directory=None,
    staging_directory=None,
    request_timeout: Optional[float] = None,
) -> FastAPI:
    """
    Build the FastAPI application for one store directory.

    Args:
        store_directory: Directory to serve; FILESTORE_DIRECTORY if None
        staging_directory: Where uploads are staged; FILESTORE_STAGING_DIRECTORY if None
        request_timeout: Seconds before a request gets a 504; 0 disables.
            FILESTORE_REQUEST_TIMEOUT_SECONDS if None

    Returns:
        Configured FastAPI application
    """
    store_directory = Path(store_directory or config.STORE_DIRECTORY)
    staging_directory = staging_directory or config.STAGING_DIRECTORY
    if request_timeout is None:
        request_timeout = config.REQUEST_TIMEOUT_SECONDS

    file_service = FileStoreService(store_directory, staging_directory)
    file_service.ensure_directory()

    app = FastAPI(
        title="FileStore",
        description="HTTP file server for a single flat directory",
        version="1.0.0"
    )
    app.state.file_service = file_service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def enforce_request_timeout(request: Request, call_next):
        """
        Answer 504 when the handler does not produce a response in time.

        Requests with a body are not bounded: their handler cannot be stopped
        once it starts writing to the store.
        """
        if not request_timeout or request.method in TIMEOUT_EXEMPT_METHODS:
            return await call_next(request)

        try:
            return await asyncio.wait_for(call_next(request), timeout=request_timeout)
        except asyncio.TimeoutError:
            logger.warning(
                f"Request timed out after {request_timeout}s: {request.method} {request.url.path} "
                f"[request_id={_request_id(request)}]"
            )
            return _error_response(status.HTTP_504_GATEWAY_TIMEOUT, "Request timed out", "REQUEST_TIMEOUT")

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """
        Middleware to log all HTTP requests and responses.
        """
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id

        start_time = time.time()

        logger.info(
            f"Request started: {request.method} {request.url.path} [request_id={request_id}]"
        )

        response = await call_next(request)

        duration = time.time() - start_time

        logger.info(
            f"Request completed: {request.method} {request.url.path} "
            f"status={response.status_code} duration={duration:.3f}s [request_id={request_id}]"
        )

        response.headers["X-Request-ID"] = request_id

        return response

    app.add_exception_handler(InvalidFileNameError, invalid_file_name_handler)
    app.add_exception_handler(BadRequestError, bad_request_handler)
    app.add_exception_handler(UnsupportedMediaTypeError, unsupported_media_type_handler)
    app.add_exception_handler(StoredFileNotFoundError, file_not_found_handler)
    app.add_exception_handler(IOFailureError, io_failure_handler)
    app.add_exception_handler(FileStoreException, filestore_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(file_router)

    @app.get("/")
    async def root():
        """
        Root endpoint.
        """
        return {"message": "FileStore API", "status": "running"}

    @app.get("/health")
    async def health_check():
        """
        Liveness endpoint. Returns 200 if the process is serving requests.
        """
        return {"status": "healthy", "service": "filestore"}

    @app.get("/ready")
    def ready_check(request: Request):
        """
        Readiness check endpoint.
        Verifies the store directory is readable and writable.
        """
        ready = request.app.state.file_service.is_ready()
        status_code = status.HTTP_200_OK if ready else status.HTTP_503_SERVICE_UNAVAILABLE

        return JSONResponse(
            status_code=status_code,
            content={
                "ready": ready,
                "store_directory": "ok" if ready else "unavailable"
            }
        )

    app.mount("/static", StaticFiles(directory=store_directory), name="static")

    logger.info(f"FileStore application created for {store_directory}")

    return app


def main() -> None:
    """
    Start the FastAPI server with uvicorn.
    """
    uvicorn.run(
        "filestore.main:create_app",
        factory=True,
        host=config.FILESTORE_HOST,
        port=config.FILESTORE_PORT
    )


if __name__ == "__main__":
    main()
