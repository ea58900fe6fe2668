"""
Database and service dependencies.

Routes receive their database handles and services through these so tests
can swap the store with ``app.dependency_overrides``.
"""
from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.config import get_settings
from app.database.connections import get_mongo_client
from app.services.auth_service import AuthService
from app.services.comment_service import CommentService
from app.services.post_service import PostService


async def get_auth_db() -> AsyncIOMotorDatabase:
    """Dependency to get the auth database."""
    client = await get_mongo_client()
    return client[get_settings().auth_db_name]


async def get_blog_db() -> AsyncIOMotorDatabase:
    """Dependency to get the blog database."""
    client = await get_mongo_client()
    return client[get_settings().blog_db_name]


async def get_auth_service(
    db: AsyncIOMotorDatabase = Depends(get_auth_db),
) -> AuthService:
    """Dependency to get AuthService instance."""
    return AuthService(db)


async def get_post_service(
    db: AsyncIOMotorDatabase = Depends(get_blog_db),
) -> PostService:
    """Dependency to get PostService instance."""
    return PostService(db)


async def get_comment_service(
    db: AsyncIOMotorDatabase = Depends(get_blog_db),
) -> CommentService:
    """Dependency to get CommentService instance."""
    return CommentService(db)
