"""
Request and response schemas for API endpoints.
"""
from app.schemas.auth import (
    IdentityResponse,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
)
from app.schemas.common import MessageResponse
from app.schemas.user import UserPublicResponse
from app.schemas.post import (
    CommentCreate,
    CommentResponse,
    CommentUpdate,
    PostCreate,
    PostResponse,
    PostUpdate,
)

__all__ = [
    # Auth
    "IdentityResponse",
    "LoginRequest",
    "LoginResponse",
    "RegisterRequest",
    "RegisterResponse",
    # Common
    "MessageResponse",
    # User
    "UserPublicResponse",
    # Posts
    "PostCreate",
    "PostUpdate",
    "PostResponse",
    # Comments
    "CommentCreate",
    "CommentUpdate",
    "CommentResponse",
]
