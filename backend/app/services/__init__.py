"""
Service layer for business logic.
"""
from app.services.auth_service import AuthService
from app.services.post_service import PostService
from app.services.comment_service import CommentService

__all__ = [
    "AuthService",
    "PostService",
    "CommentService",
]
