"""
Authentication request/response schemas.
"""
from pydantic import BaseModel, EmailStr, Field

from app.schemas.common import CamelModel


class LoginRequest(BaseModel):
    """Login request body."""
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="User password")


class LoginResponse(CamelModel):
    """Login response with JWT token."""
    token: str = Field(..., description="JWT access token")
    user_id: str = Field(..., description="Authenticated user ID")
    token_type: str = Field(default="bearer", description="Token type")
    expires_in: int = Field(..., description="Token expiration time in seconds")


class RegisterRequest(BaseModel):
    """Registration request body."""
    username: str = Field(..., min_length=3, max_length=50, description="Unique username")
    email: EmailStr = Field(..., description="User email address (must be unique)")
    password: str = Field(..., min_length=1, description="User password")


class RegisterResponse(CamelModel):
    """Registration response."""
    user_id: str = Field(..., description="Created user ID")
    username: str = Field(..., description="Registered username")
    email: str = Field(..., description="Registered email")
    message: str = Field(
        default="User registered successfully",
        description="Success message"
    )


class IdentityResponse(CamelModel):
    """Identity carried by the caller's token."""
    user_id: str = Field(..., description="User ID")
    username: str = Field(..., description="Username")
