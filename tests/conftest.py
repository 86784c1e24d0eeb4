"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports and points the
application at an in-memory SQLite database before anything imports settings.
"""

import os
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "testing"
os.environ["LOG_LEVEL"] = "WARNING"


@pytest.fixture(scope="session", autouse=True)
def database_schema():
    """Create all tables once for the whole test session."""
    from domain.models import init_database

    init_database()
    yield


@pytest.fixture(scope="function")
def db_session():
    """
    Database session for repository and service tests.

    Repositories commit their own work, so tests keep data apart by creating
    fresh users instead of relying on rollback.
    """
    from domain.models import SessionLocal

    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture(scope="function")
def api_client():
    """A TestClient with an empty cookie jar."""
    from fastapi.testclient import TestClient
    from main import app

    return TestClient(app)
