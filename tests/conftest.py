"""
Global test fixtures for the blog backend.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor)
- Test user data and identities
- FastAPI test clients wired to the mock databases
"""

import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Generator
from unittest.mock import AsyncMock, patch

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest.fixture
def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.

    Every test gets its own in-memory server.
    """
    return AsyncMongoMockClient()


@pytest.fixture
def mock_auth_db(mock_async_mongo_client):
    """Provide mock auth database."""
    return mock_async_mongo_client["auth_db"]


@pytest.fixture
def mock_blog_db(mock_async_mongo_client):
    """Provide mock blog database."""
    return mock_async_mongo_client["blog_db"]


@pytest_asyncio.fixture
async def indexed_mongo_client(mock_async_mongo_client):
    """Mock client with the same indexes the app creates on startup."""
    from app.database.registry import create_indexes

    await create_indexes(mock_async_mongo_client)
    yield mock_async_mongo_client


# =============================================================================
# User Fixtures
# =============================================================================

@pytest.fixture
def test_user_data() -> dict:
    """Basic test user data for registration."""
    return {
        "username": "alice",
        "email": "alice@example.com",
        "password": "SecurePassword123!",
    }


@pytest.fixture
def other_user_data() -> dict:
    """A second user, for ownership checks."""
    return {
        "username": "bob",
        "email": "bob@example.com",
        "password": "AnotherPassword456!",
    }


@pytest.fixture
def alice():
    """Identity of the first test user."""
    from app.models.user import Identity
    return Identity(user_id="507f1f77bcf86cd799439011", username="alice")


@pytest.fixture
def bob():
    """Identity of the second test user."""
    from app.models.user import Identity
    return Identity(user_id="507f1f77bcf86cd799439012", username="bob")


# =============================================================================
# FastAPI Test Client Fixtures
# =============================================================================

@pytest.fixture
def app(mock_auth_db, mock_blog_db):
    """
    FastAPI app with database dependencies pointing at the mock databases.
    """
    from app.dependencies.database import get_auth_db, get_blog_db
    from app.main import app as fastapi_app

    async def _auth_db():
        return mock_auth_db

    async def _blog_db():
        return mock_blog_db

    fastapi_app.dependency_overrides[get_auth_db] = _auth_db
    fastapi_app.dependency_overrides[get_blog_db] = _blog_db
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> Generator:
    """
    Create a TestClient for the FastAPI app.

    Startup/shutdown database calls are patched out so no real server is needed.
    """
    with patch("app.main.init_database", new=AsyncMock()), \
         patch("app.main.close_connections", new=AsyncMock()):
        with TestClient(app) as c:
            yield c


# =============================================================================
# Utility Fixtures
# =============================================================================

@pytest.fixture
def assert_datetime_recent():
    """
    Fixture providing a helper to assert a datetime is recent.

    Usage:
        def test_something(assert_datetime_recent):
            assert_datetime_recent(response["createdAt"], max_age_seconds=60)
    """
    def _assert_recent(value, max_age_seconds: int = 60):
        if isinstance(value, str):
            value = datetime.fromisoformat(value.replace("Z", "+00:00"))
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)

        age = (datetime.now(timezone.utc) - value).total_seconds()

        assert age < max_age_seconds, f"Datetime {value} is {age}s old, expected < {max_age_seconds}s"
        assert age >= -1, f"Datetime {value} is in the future"

    return _assert_recent
