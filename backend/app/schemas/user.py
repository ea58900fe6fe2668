"""
User request/response schemas.
"""
from pydantic import BaseModel, Field


class UserPublicResponse(BaseModel):
    """Public user information (no id, no credentials)."""
    username: str = Field(..., description="Username")
    email: str = Field(..., description="User email")
