"""
Dependencies for dependency injection in routes.
"""
from app.dependencies.auth import (
    CurrentIdentity,
    OptionalIdentity,
    get_current_identity,
    get_optional_identity,
)
from app.dependencies.database import (
    get_auth_db,
    get_blog_db,
    get_auth_service,
    get_post_service,
    get_comment_service,
)

__all__ = [
    "CurrentIdentity",
    "OptionalIdentity",
    "get_current_identity",
    "get_optional_identity",
    "get_auth_db",
    "get_blog_db",
    "get_auth_service",
    "get_post_service",
    "get_comment_service",
]
