"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with services bound to the mock
databases and helpers for authenticated requests.
"""

import pytest


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest.fixture
def auth_service(mock_auth_db):
    """AuthService backed by the mock auth database."""
    from app.services.auth_service import AuthService
    return AuthService(mock_auth_db)


@pytest.fixture
def post_service(mock_blog_db):
    """PostService backed by the mock blog database."""
    from app.services.post_service import PostService
    return PostService(mock_blog_db)


@pytest.fixture
def comment_service(mock_blog_db):
    """CommentService backed by the mock blog database."""
    from app.services.comment_service import CommentService
    return CommentService(mock_blog_db)


# =============================================================================
# Token Helpers
# =============================================================================

@pytest.fixture
def token_for():
    """
    Issue a real access token for an identity.

    Usage:
        def test_protected_route(client, alice, token_for):
            headers = {"Authorization": f"Bearer {token_for(alice)}"}
    """
    from app.core.security import create_access_token

    def _token(identity) -> str:
        return create_access_token(user_id=identity.user_id, username=identity.username)

    return _token


@pytest.fixture
def auth_headers(token_for):
    """Build an Authorization header for an identity."""
    def _headers(identity) -> dict:
        return {"Authorization": f"Bearer {token_for(identity)}"}

    return _headers


# =============================================================================
# Response Assertion Helpers
# =============================================================================

@pytest.fixture
def assert_error_response():
    """Helper to assert error response structure."""
    def _assert(response, status_code: int, detail_contains: str = None):
        assert response.status_code == status_code
        data = response.json()
        assert "detail" in data
        if detail_contains:
            assert detail_contains.lower() in data["detail"].lower()
    return _assert
