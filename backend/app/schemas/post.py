"""
Post and comment request/response schemas.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.models.post import Comment, Post
from app.schemas.common import CamelModel


class PostCreate(BaseModel):
    """Create post request."""
    title: str = Field(..., min_length=1, description="Post title")
    content: str = Field(..., min_length=1, description="Post body")


class PostUpdate(BaseModel):
    """
    Update post request.

    Omitted or null fields keep their stored value; empty strings are
    rejected rather than treated as omitted.
    """
    title: Optional[str] = Field(None, min_length=1, description="New title")
    content: Optional[str] = Field(None, min_length=1, description="New body")


class CommentCreate(BaseModel):
    """Add comment request."""
    content: str = Field(..., min_length=1, description="Comment body")


class CommentUpdate(BaseModel):
    """Update comment request."""
    content: str = Field(..., min_length=1, description="New comment body")


class CommentResponse(CamelModel):
    """Comment response."""
    comment_id: str = Field(..., description="Comment ID")
    author: str = Field(..., description="Author user ID")
    content: str = Field(..., description="Comment body")
    created_at: datetime = Field(..., description="Creation timestamp")

    @classmethod
    def from_model(cls, comment: Comment) -> "CommentResponse":
        return cls(
            comment_id=comment.comment_id,
            author=comment.author,
            content=comment.content,
            created_at=comment.created_at,
        )


class PostResponse(CamelModel):
    """Post response including its comments."""
    id: str = Field(..., description="Post ID")
    title: str = Field(..., description="Post title")
    content: str = Field(..., description="Post body")
    author: str = Field(..., description="Author user ID")
    comments: list[CommentResponse] = Field(default=[], description="Comments in insertion order")
    created_at: datetime = Field(..., description="Creation timestamp")

    @classmethod
    def from_model(cls, post: Post) -> "PostResponse":
        return cls(
            id=post.id,
            title=post.title,
            content=post.content,
            author=post.author,
            comments=[CommentResponse.from_model(c) for c in post.comments],
            created_at=post.created_at,
        )
