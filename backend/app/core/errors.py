"""
Error taxonomy shared by services and the HTTP boundary.

Services raise these; ``app.main`` turns them into JSON responses with the
matching status code.
"""
from fastapi import status


class BlogError(Exception):
    """Base class for every error the API reports to clients."""
    status_code: int = status.HTTP_400_BAD_REQUEST
    default_detail: str = "Request failed"

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class Unauthenticated(BlogError):
    """No credential was supplied."""
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Not authenticated"


class InvalidCredential(BlogError):
    """A credential was supplied but is malformed, tampered or expired."""
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Invalid token"


class IncorrectPassword(InvalidCredential):
    """Login with a known email but the wrong password."""
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Incorrect password"


class Forbidden(BlogError):
    """Authenticated, but not the owner of the resource."""
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Not allowed to modify this resource"


class NotFound(BlogError):
    """Post, comment or user does not exist."""
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Resource not found"


class ValidationFailure(BlogError):
    """Request body or registration data rejected."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid request"
