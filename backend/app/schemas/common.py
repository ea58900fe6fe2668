"""
Shared schema base and generic responses.
"""
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Schema serialised with camelCase keys, accepting either form on input."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class MessageResponse(BaseModel):
    """Plain confirmation message."""
    message: str = Field(..., description="Human readable confirmation")
