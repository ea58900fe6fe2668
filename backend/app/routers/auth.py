"""
Authentication router for registration, login and user lookup.
"""
from fastapi import APIRouter, Depends, status

from app.dependencies.auth import CurrentIdentity
from app.dependencies.database import get_auth_service
from app.schemas.auth import (
    IdentityResponse,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
)
from app.schemas.user import UserPublicResponse
from app.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
)
async def register(
    body: RegisterRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Register a new user account.

    - **username**: Unique username (3-50 characters)
    - **email**: Valid email address (must be unique)
    - **password**: Password
    """
    return await auth_service.register_user(body)


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Login and get access token",
)
async def login(
    body: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Authenticate with email and password to receive a JWT token.

    Send the token on protected endpoints as `Authorization: Bearer <token>`.
    Unknown email gives 404, wrong password gives 401.
    """
    return await auth_service.login(body)


@router.get(
    "/me",
    response_model=IdentityResponse,
    summary="Get current identity",
)
async def get_current_identity_info(identity: CurrentIdentity):
    """Return the identity carried by the caller's token."""
    return IdentityResponse(user_id=identity.user_id, username=identity.username)


@router.get(
    "/user/{user_id}",
    response_model=UserPublicResponse,
    summary="Get a user's public profile",
)
async def get_user(
    user_id: str,
    auth_service: AuthService = Depends(get_auth_service),
):
    """Return username and email of a user."""
    return await auth_service.get_public_profile(user_id)
