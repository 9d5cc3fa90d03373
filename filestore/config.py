"""Configuration settings for the FileStore server."""

import os
import tempfile

from common.constants import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    DEFAULT_STORE_DIRECTORY,
)


STORE_DIRECTORY = os.environ.get("FILESTORE_DIRECTORY", DEFAULT_STORE_DIRECTORY)

STAGING_DIRECTORY = os.environ.get("FILESTORE_STAGING_DIRECTORY", tempfile.gettempdir())

FILESTORE_HOST = os.environ.get("FILESTORE_HOST", DEFAULT_HOST)

FILESTORE_PORT = int(os.environ.get("FILESTORE_PORT", str(DEFAULT_PORT)))

CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("FILESTORE_CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

# 0 disables the per-request timeout
REQUEST_TIMEOUT_SECONDS = float(
    os.environ.get("FILESTORE_REQUEST_TIMEOUT_SECONDS", str(DEFAULT_REQUEST_TIMEOUT_SECONDS))
)
