"""
Users module data models.

These models define the data structures used by the users module
and exposed to other modules through the interface.
"""

from datetime import datetime
from typing import Optional
from pydantic import Field

from shared.models import CamelModel, Entity


class CreateUserRequest(CamelModel):
    """Request to create a new user."""

    username: str = Field(..., min_length=1, max_length=64, description="Unique login name")
    password: str = Field(..., min_length=1, description="Password")
    full_name: str = Field(..., min_length=1, description="Display name")
    profile_image: Optional[str] = Field(None, description="Avatar URL")
    verified: bool = Field(default=False, description="Whether the student is verified")


class User(Entity):
    """
    A stored user.

    The password is kept as submitted. This model is never returned from
    the API; routes respond with UserProfile instead.
    """

    username: str = Field(..., description="Unique login name")
    password: str = Field(..., description="Password (plaintext, demo only)")
    full_name: str = Field(..., description="Display name")
    profile_image: Optional[str] = Field(None, description="Avatar URL")
    verified: bool = Field(default=False, description="Whether the student is verified")


class UserProfile(CamelModel):
    """Public view of a user."""

    id: int = Field(..., description="User ID")
    username: str = Field(..., description="Unique login name")
    full_name: str = Field(..., description="Display name")
    profile_image: Optional[str] = Field(None, description="Avatar URL")
    verified: bool = Field(default=False, description="Whether the student is verified")
    created_at: datetime = Field(..., description="Account creation time")

    @classmethod
    def from_user(cls, user: User) -> "UserProfile":
        return cls(
            id=user.id,
            username=user.username,
            full_name=user.full_name,
            profile_image=user.profile_image,
            verified=user.verified,
            created_at=user.created_at,
        )
