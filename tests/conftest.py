"""
Shared pytest fixtures.

Every test gets a fresh application (and therefore empty in-memory
stores) whose uploads go to a temporary directory.
"""

import pytest
from fastapi.testclient import TestClient

from crud_demos_api.app.core.config import Settings
from crud_demos_api.app.main import create_app


@pytest.fixture()
def upload_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture()
def settings(upload_dir):
    return Settings(upload_dir=str(upload_dir), locale="ja", id_strategy="counter")


@pytest.fixture()
def app(settings):
    """Create and configure a new FastAPI app instance for each test."""
    return create_app(settings)


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app."""
    return TestClient(app)
