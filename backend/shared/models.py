"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base for models exposed over the API.

    Fields are declared in snake_case and serialized as camelCase
    (``created_at`` -> ``createdAt``). Either spelling is accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated user in the system.

    Built from verified token claims by the auth gate and passed
    explicitly to service calls for the lifetime of one request.
    It is never loaded from the store.
    """

    id: str = Field(..., description="User ID")
    email: str = Field(..., description="User's email address")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",  # Ignore extra fields from token claims
    }


class MessageResponse(BaseModel):
    """Plain confirmation response."""

    message: str
