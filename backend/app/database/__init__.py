"""
Database module - MongoDB connection and database definitions.
"""
from app.database.connections import (
    get_mongo_client,
    init_database,
    close_connections,
)
from app.database.databases import auth_db, blog_db

__all__ = [
    "get_mongo_client",
    "init_database",
    "close_connections",
    "auth_db",
    "blog_db",
]
