"""
Core module - Security primitives and the error taxonomy.
"""
from app.core.errors import (
    BlogError,
    Forbidden,
    IncorrectPassword,
    InvalidCredential,
    NotFound,
    Unauthenticated,
    ValidationFailure,
)
from app.core.security import (
    hash_password,
    verify_password,
    create_access_token,
    decode_token,
)

__all__ = [
    "BlogError",
    "Forbidden",
    "IncorrectPassword",
    "InvalidCredential",
    "NotFound",
    "Unauthenticated",
    "ValidationFailure",
    "hash_password",
    "verify_password",
    "create_access_token",
    "decode_token",
]
