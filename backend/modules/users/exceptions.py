"""
Users module exceptions.
"""

from typing import Optional

from shared.exceptions import (
    NotFoundError,
    ConflictError,
    ConsistencyError,
)


class UserNotFoundError(NotFoundError):
    """Raised when a user is not found."""

    def __init__(self, user_id: int):
        super().__init__(
            f"User not found: {user_id}",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class UsernameTakenError(ConflictError):
    """Raised when creating a user with a username that already exists."""

    def __init__(self, username: str):
        super().__init__(
            f"Username already taken: {username}",
            code="USERNAME_TAKEN",
            details={"username": username},
        )


class OwnerNotFoundError(ConsistencyError):
    """
    Raised when the owner of a new ride, item or help request does not exist.

    The owner id comes from the current principal, not from the client,
    so this points at broken wiring rather than bad input.
    """

    def __init__(self, owner_id: Optional[int] = None):
        if owner_id is None:
            message = "No current user is configured"
            details = {}
        else:
            message = f"Owner not found: {owner_id}"
            details = {"owner_id": owner_id}
        super().__init__(message, code="OWNER_NOT_FOUND", details=details)
