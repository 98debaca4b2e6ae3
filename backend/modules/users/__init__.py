"""
Users module.

Holds the students who post rides, items and help requests, and resolves
the owner of every new resource.

Public API:
- IUserService: Interface for user operations
- User: Stored user (includes the password)
- UserProfile: Public view of a user
- CreateUserRequest: Request to create a user
"""

from .interfaces import IUserService
from .models import User, UserProfile, CreateUserRequest
from .exceptions import (
    UserNotFoundError,
    UsernameTakenError,
    OwnerNotFoundError,
)

__all__ = [
    # Interface
    "IUserService",
    # Models
    "User",
    "UserProfile",
    "CreateUserRequest",
    # Exceptions
    "UserNotFoundError",
    "UsernameTakenError",
    "OwnerNotFoundError",
]
