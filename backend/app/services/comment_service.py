"""
Comment service for comments nested inside posts.

Ownership of a comment belongs to the comment's author only; the parent
post's author has no rights over other users' comments.
"""
import logging
import uuid
from datetime import datetime, timezone
from typing import Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.core.errors import NotFound
from app.database.databases import blog_db
from app.models.post import Comment, Post
from app.models.user import Identity
from app.schemas.post import CommentCreate, CommentResponse, CommentUpdate
from app.services.post_service import PostService, check_owner, require_identity

logger = logging.getLogger(__name__)


class CommentService:
    """Service for comment operations."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with blog database."""
        self.db = db
        self.posts = db[blog_db.Collections.POSTS]
        self.post_service = PostService(db)

    async def _load_comment(self, post_id: str, comment_id: str) -> tuple[Post, Comment]:
        post = await self.post_service.load_post(post_id)
        comment = post.find_comment(comment_id)
        if comment is None:
            raise NotFound("Comment not found")
        return post, comment

    async def add_comment(
        self, identity: Optional[Identity], post_id: str, request: CommentCreate
    ) -> CommentResponse:
        """Append a comment by the caller to the end of a post's comments."""
        identity = require_identity(identity)
        post = await self.post_service.load_post(post_id)

        comment = Comment(
            comment_id=str(uuid.uuid4()),
            author=identity.user_id,
            content=request.content,
            created_at=datetime.now(timezone.utc),
        )

        await self.posts.update_one(
            {"_id": ObjectId(post.id)},
            {"$push": {"comments": comment.model_dump()}},
        )
        logger.info(
            f"User {identity.user_id} commented {comment.comment_id} on post {post_id}"
        )
        return CommentResponse.from_model(comment)

    async def update_comment(
        self,
        identity: Optional[Identity],
        post_id: str,
        comment_id: str,
        request: CommentUpdate,
    ) -> CommentResponse:
        """
        Replace the content of a comment written by the caller.

        Raises:
            Unauthenticated: No identity
            NotFound: Post or comment does not exist
            Forbidden: Caller is not the comment author
        """
        identity = require_identity(identity)
        post, comment = await self._load_comment(post_id, comment_id)
        check_owner(identity, comment.author, "comment", comment_id)

        result = await self.posts.update_one(
            {"_id": ObjectId(post.id), "comments.comment_id": comment_id},
            {"$set": {"comments.$.content": request.content}},
        )
        if result.matched_count == 0:
            raise NotFound("Comment not found")
        logger.info(f"User {identity.user_id} updated comment {comment_id}")

        comment.content = request.content
        return CommentResponse.from_model(comment)

    async def delete_comment(
        self, identity: Optional[Identity], post_id: str, comment_id: str
    ) -> None:
        """Remove a comment written by the caller from its post."""
        identity = require_identity(identity)
        post, comment = await self._load_comment(post_id, comment_id)
        check_owner(identity, comment.author, "comment", comment_id)

        # Comment may have gone since it was loaded
        result = await self.posts.update_one(
            {"_id": ObjectId(post.id), "comments.comment_id": comment_id},
            {"$pull": {"comments": {"comment_id": comment_id}}},
        )
        if result.matched_count == 0:
            raise NotFound("Comment not found")
        logger.info(f"User {identity.user_id} deleted comment {comment_id}")

    async def list_comments_by_author(self, author: str) -> list[CommentResponse]:
        """All comments by ``author`` across posts; empty when there are none."""
        cursor = self.posts.find({"comments.author": author})
        docs = await cursor.to_list(length=None)

        comments = []
        for doc in docs:
            for raw in doc.get("comments", []):
                if raw.get("author") == author:
                    comments.append(CommentResponse.from_model(Comment(**raw)))
        return comments
