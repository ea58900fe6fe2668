"""
Authentication dependencies for route protection.

Identity is resolved from the ``Authorization: Bearer <token>`` header by
verifying the token alone; the user store is never consulted.
"""
import logging
from typing import Annotated, Optional

from fastapi import Depends
from fastapi.security import APIKeyHeader
from fastapi.security.utils import get_authorization_scheme_param
from jose import JWTError

from app.core.errors import InvalidCredential, Unauthenticated
from app.core.security import decode_token
from app.models.user import Identity

logger = logging.getLogger(__name__)

# Raw header, so that credentials under another scheme are seen and rejected
authorization_header = APIKeyHeader(name="Authorization", auto_error=False)


def resolve_identity(token: str) -> Identity:
    """
    Verify a raw token and return the identity it carries.

    Raises:
        InvalidCredential: If the token is malformed, tampered or expired
    """
    try:
        payload = decode_token(token)
    except JWTError as e:
        logger.info(f"Rejected token: {e}")
        raise InvalidCredential("Invalid token")

    return Identity(user_id=str(payload["userId"]), username=payload["username"])


async def get_optional_identity(
    authorization: Annotated[Optional[str], Depends(authorization_header)]
) -> Optional[Identity]:
    """
    Dependency returning the caller's identity, or None without a credential.

    A header without a token part counts as no credential. A credential that
    is present but uses another scheme or fails verification is rejected.
    """
    scheme, token = get_authorization_scheme_param(authorization)
    if not token:
        return None
    if scheme.lower() != "bearer":
        logger.info(f"Rejected credential with scheme {scheme!r}")
        raise InvalidCredential("Invalid token")
    return resolve_identity(token)


async def get_current_identity(
    identity: Annotated[Optional[Identity], Depends(get_optional_identity)]
) -> Identity:
    """
    Dependency requiring an authenticated caller.

    Raises:
        Unauthenticated (401): No bearer credential
        InvalidCredential (403): Credential present but not valid
    """
    if identity is None:
        raise Unauthenticated("Access denied")
    return identity


# Type aliases for cleaner route signatures
CurrentIdentity = Annotated[Identity, Depends(get_current_identity)]
OptionalIdentity = Annotated[Optional[Identity], Depends(get_optional_identity)]
