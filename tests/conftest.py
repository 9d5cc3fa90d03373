"""Shared pytest fixtures for all tests."""

import pytest
from fastapi.testclient import TestClient

from filestore.main import create_app
from filestore.services.file_service import FileStoreService


@pytest.fixture
def store_dir(tmp_path):
    """
    Create a temporary store directory.

    Args:
        tmp_path: pytest tmp_path fixture

    Returns:
        Path to an empty store directory
    """
    directory = tmp_path / 'store'
    directory.mkdir()
    return directory


@pytest.fixture
def staging_dir(tmp_path):
    """
    Create a temporary staging directory for uploads.
    """
    directory = tmp_path / 'staging'
    directory.mkdir()
    return directory


@pytest.fixture
def file_service(store_dir, staging_dir):
    """
    FileStoreService bound to the temporary directories.
    """
    return FileStoreService(store_dir, staging_dir)


@pytest.fixture
def client(store_dir, staging_dir):
    """Create FastAPI test client over a fresh store directory."""
    app = create_app(store_directory=store_dir, staging_directory=staging_dir, request_timeout=0)
    with TestClient(app) as test_client:
        yield test_client

