# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# Sets up the test environment before chirpy is imported (chirpy.config
# builds its settings at import time) and provides shared fixtures.
#
# Tests run against a throwaway SQLite database, never DATABASE_URL from the
# developer's environment, because the client fixture deletes all users.
# =============================================================================

import os
import tempfile

_TEST_DB_DIR = tempfile.mkdtemp(prefix="chirpy-tests-")

os.environ["DATABASE_URL"] = (
    f"sqlite+aiosqlite:///{os.path.join(_TEST_DB_DIR, 'chirpy.db')}"
)
os.environ["PLATFORM"] = "dev"
os.environ.setdefault("ENVIRONMENT", "development")

import pytest
from fastapi.testclient import TestClient


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def app():
    """A fresh application with its own hit counter."""
    from chirpy.main import create_app
    return create_app()


@pytest.fixture
def client(app):
    """
    Test client with the lifespan running (tables created) and an empty
    users table.
    """
    with TestClient(app) as client:
        response = client.post("/admin/reset")
        assert response.status_code == 200
        yield client


@pytest.fixture
def hits(app):
    """The hit counter owned by the app fixture."""
    return app.state.hits
