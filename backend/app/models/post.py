"""
Post and comment models for the blog database.
"""
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field


class Comment(BaseModel):
    """
    Comment embedded in a post document.

    ``author`` is checked on update/delete independently of the
    parent post's author.
    """
    comment_id: str = Field(..., description="UUID, unique within the post")
    author: str = Field(..., description="Author user ID")
    content: str = Field(..., description="Comment body")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp"
    )


class Post(BaseModel):
    """
    Post document model for MongoDB blog_db.posts collection.
    """
    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    title: str = Field(..., description="Post title")
    content: str = Field(..., description="Post body")
    author: str = Field(..., description="Author user ID")
    comments: list[Comment] = Field(default=[], description="Comments in insertion order")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp"
    )

    class Config:
        populate_by_name = True

    def find_comment(self, comment_id: str) -> Optional[Comment]:
        for comment in self.comments:
            if comment.comment_id == comment_id:
                return comment
        return None
