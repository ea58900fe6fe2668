"""
Pydantic models for database documents and data structures.
"""
from app.models.user import User, Identity
from app.models.post import Post, Comment

__all__ = [
    "User",
    "Identity",
    "Post",
    "Comment",
]
