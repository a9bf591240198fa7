"""Pytest configuration and fixtures."""

import asyncio
import tempfile
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from helpers import StubCompletionClient
from workout_ai.config import Settings
from workout_ai.db.engine import init_db
from workout_ai.web import create_app


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
def db_path(temp_db_path):
    """Temporary database with the schema created."""
    asyncio.run(init_db(temp_db_path))
    return temp_db_path


@pytest.fixture
def stub_client():
    """Completion client with no queued replies."""
    return StubCompletionClient()


@pytest.fixture
def api_client(temp_db_path, stub_client):
    """HTTP test client backed by a temporary database and the stub client."""
    app = create_app(
        settings=Settings(),
        db_path=temp_db_path,
        completion_client=stub_client,
    )
    with TestClient(app) as client:
        yield client
