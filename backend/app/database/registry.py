"""
Index management for the auth and blog databases.
"""
from motor.motor_asyncio import AsyncIOMotorClient

from app.config import get_settings
from app.database.databases import auth_db, blog_db


async def create_indexes(client: AsyncIOMotorClient) -> None:
    """Create necessary indexes for all databases."""
    settings = get_settings()

    # Auth DB indexes
    users = client[settings.auth_db_name][auth_db.Collections.USERS]
    await users.create_index("username", unique=True)
    await users.create_index("email", unique=True)

    # Blog DB indexes
    posts = client[settings.blog_db_name][blog_db.Collections.POSTS]
    await posts.create_index("author")
    await posts.create_index("comments.author")
