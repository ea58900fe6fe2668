"""
Authentication service for user registration and login.
"""
import logging
from datetime import datetime, timezone
from typing import Optional

from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError

from app.config import get_settings
from app.core.errors import IncorrectPassword, NotFound, ValidationFailure
from app.core.security import hash_password, verify_password, create_access_token
from app.database.databases import auth_db
from app.models.user import User
from app.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
)

logger = logging.getLogger(__name__)


class AuthService:
    """Service for authentication operations."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with auth database."""
        self.db = db
        self.users_collection = db[auth_db.Collections.USERS]
        self.settings = get_settings()

    async def register_user(self, request: RegisterRequest) -> RegisterResponse:
        """
        Register a new user.

        Args:
            request: Registration request with username, email and password

        Returns:
            RegisterResponse with created user ID

        Raises:
            ValidationFailure: If the username or email is already taken
        """
        existing = await self.users_collection.find_one(
            {"$or": [{"username": request.username}, {"email": request.email}]}
        )
        if existing:
            if existing.get("username") == request.username:
                raise ValidationFailure("Username already registered")
            raise ValidationFailure("Email already registered")

        user_doc = {
            "username": request.username,
            "email": request.email,
            "hashed_password": hash_password(request.password),
            "created_at": datetime.now(timezone.utc),
        }

        # The unique indexes still catch a concurrent registration
        try:
            result = await self.users_collection.insert_one(user_doc)
        except DuplicateKeyError:
            raise ValidationFailure("Username or email already registered")

        user_id = str(result.inserted_id)
        logger.info(f"Registered user {request.username} ({user_id})")

        return RegisterResponse(
            user_id=user_id,
            username=request.username,
            email=request.email,
        )

    async def login(self, request: LoginRequest) -> LoginResponse:
        """
        Authenticate user and return JWT token.

        Args:
            request: Login request with email and password

        Returns:
            LoginResponse with JWT token

        Raises:
            NotFound: If no user has this email
            IncorrectPassword: If the password does not match
        """
        user_doc = await self.users_collection.find_one({"email": request.email})

        if not user_doc:
            logger.info(f"Login failed: unknown email {request.email}")
            raise NotFound("User not found")

        user_id = str(user_doc["_id"])

        if not verify_password(request.password, user_doc["hashed_password"]):
            logger.info(f"Login failed: wrong password for user {user_id}")
            raise IncorrectPassword()

        token = create_access_token(user_id=user_id, username=user_doc["username"])
        logger.info(f"User {user_id} logged in")

        return LoginResponse(
            token=token,
            user_id=user_id,
            expires_in=self.settings.jwt_access_token_expire_minutes * 60,
        )

    async def get_user_by_id(self, user_id: str) -> Optional[User]:
        """
        Get user by ID.

        Args:
            user_id: User ObjectId as string

        Returns:
            User model or None if not found or the id is malformed
        """
        try:
            oid = ObjectId(user_id)
        except (InvalidId, TypeError):
            return None

        user_doc = await self.users_collection.find_one({"_id": oid})

        if not user_doc:
            return None

        user_doc["_id"] = str(user_doc["_id"])
        return User(**user_doc)

    async def get_public_profile(self, user_id: str) -> dict:
        """
        Get the publicly visible fields of a user.

        Raises:
            NotFound: If the user does not exist
        """
        user = await self.get_user_by_id(user_id)
        if user is None:
            raise NotFound("User not found")
        return {"username": user.username, "email": user.email}
