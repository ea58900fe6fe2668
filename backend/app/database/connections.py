"""
Database connection management for MongoDB.

The Motor client is process-wide: created on first use, initialised by
``init_database`` during application startup and released by
``close_connections`` on shutdown.
"""
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient

from app.config import get_settings
from app.database.registry import create_indexes

logger = logging.getLogger(__name__)

# Global connection instance
_mongo_client: Optional[AsyncIOMotorClient] = None


async def get_mongo_client() -> AsyncIOMotorClient:
    """Get or create MongoDB client."""
    global _mongo_client
    if _mongo_client is None:
        settings = get_settings()
        _mongo_client = AsyncIOMotorClient(
            settings.mongo_uri,
            serverSelectionTimeoutMS=settings.mongo_server_selection_timeout_ms,
        )
    return _mongo_client


async def init_database() -> None:
    """
    Connect to MongoDB and make sure indexes exist.

    Raises whatever the driver raises when the server is unreachable;
    the caller decides whether that is fatal.
    """
    client = await get_mongo_client()
    await client.admin.command("ping")
    await create_indexes(client)
    logger.info("Connected to MongoDB, indexes ensured")


async def close_connections():
    """Close all database connections."""
    global _mongo_client

    if _mongo_client is not None:
        _mongo_client.close()
        _mongo_client = None
        logger.info("MongoDB connection closed")

