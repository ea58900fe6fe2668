"""
Post service: authorization-scoped CRUD over posts.

Reads are public. Every mutation takes the caller's identity explicitly and
compares it with the stored ``author`` before touching the document.
"""
import logging
import re
from datetime import datetime, timezone
from typing import Optional

from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.core.errors import Forbidden, NotFound, Unauthenticated
from app.database.databases import blog_db
from app.models.post import Post
from app.models.user import Identity
from app.schemas.post import PostCreate, PostResponse, PostUpdate

logger = logging.getLogger(__name__)


def parse_object_id(value: str) -> ObjectId:
    """Convert a path id to an ObjectId; malformed ids resolve to NotFound."""
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        raise NotFound("Post not found")


def require_identity(identity: Optional[Identity]) -> Identity:
    if identity is None:
        raise Unauthenticated("User not authenticated")
    return identity


def check_owner(identity: Identity, author: str, kind: str, resource_id: str) -> None:
    """Raise Forbidden unless the caller is the stored author."""
    if author != identity.user_id:
        logger.warning(
            f"User {identity.user_id} refused on {kind} {resource_id} owned by {author}"
        )
        raise Forbidden(f"Not authorized to modify this {kind}")


def doc_to_post(doc: dict) -> Post:
    doc["_id"] = str(doc["_id"])
    return Post(**doc)


class PostService:
    """Service for post operations."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with blog database."""
        self.db = db
        self.posts = db[blog_db.Collections.POSTS]

    # ==================== Lookups ====================

    async def load_post(self, post_id: str) -> Post:
        """Load a post document or raise NotFound."""
        doc = await self.posts.find_one({"_id": parse_object_id(post_id)})
        if not doc:
            raise NotFound("Post not found")
        return doc_to_post(doc)

    async def get_post(self, post_id: str) -> PostResponse:
        return PostResponse.from_model(await self.load_post(post_id))

    async def list_posts(self) -> list[PostResponse]:
        return await self._find({})

    async def list_posts_by_title(self, title: str) -> list[PostResponse]:
        """Case-insensitive substring match on the title."""
        return await self._find({"title": {"$regex": re.escape(title), "$options": "i"}})

    async def list_posts_by_author(self, author: str) -> list[PostResponse]:
        return await self._find({"author": author})

    async def _find(self, query: dict) -> list[PostResponse]:
        cursor = self.posts.find(query)
        docs = await cursor.to_list(length=None)
        return [PostResponse.from_model(doc_to_post(d)) for d in docs]

    # ==================== Mutations ====================

    async def create_post(
        self, identity: Optional[Identity], request: PostCreate
    ) -> PostResponse:
        """Create a post authored by the caller."""
        identity = require_identity(identity)

        post_doc = {
            "title": request.title,
            "content": request.content,
            "author": identity.user_id,
            "comments": [],
            "created_at": datetime.now(timezone.utc),
        }

        result = await self.posts.insert_one(post_doc)
        post_doc["_id"] = result.inserted_id
        logger.info(f"User {identity.user_id} created post {result.inserted_id}")
        return PostResponse.from_model(doc_to_post(post_doc))

    async def update_post(
        self, identity: Optional[Identity], post_id: str, request: PostUpdate
    ) -> PostResponse:
        """
        Apply the supplied fields of ``request`` to a post owned by the caller.

        Raises:
            Unauthenticated: No identity
            NotFound: Post does not exist
            Forbidden: Caller is not the post author
        """
        identity = require_identity(identity)
        post = await self.load_post(post_id)
        check_owner(identity, post.author, "post", post_id)

        update_data = {k: v for k, v in request.model_dump().items() if v is not None}
        if not update_data:
            return PostResponse.from_model(post)

        await self.posts.update_one({"_id": ObjectId(post.id)}, {"$set": update_data})
        logger.info(f"User {identity.user_id} updated post {post_id}: {sorted(update_data)}")
        return await self.get_post(post_id)

    async def delete_post(self, identity: Optional[Identity], post_id: str) -> None:
        """Delete a post owned by the caller, together with its comments."""
        identity = require_identity(identity)
        post = await self.load_post(post_id)
        check_owner(identity, post.author, "post", post_id)

        await self.posts.delete_one({"_id": ObjectId(post.id)})
        logger.info(f"User {identity.user_id} deleted post {post_id}")
