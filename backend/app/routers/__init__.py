"""
API Routers module.
"""
from app.routers import auth, comments, health, posts

__all__ = ["auth", "comments", "health", "posts"]
