"""
Users module interface.

Other modules should depend on IUserService, not the concrete implementation.
Rides, items and help requests use it to resolve owners at creation time.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.config import Settings

from .models import User, CreateUserRequest


@runtime_checkable
class IUserService(Protocol):
    """
    Interface for user operations.

    This protocol defines the contract that the users module exposes
    to other modules. Implementations must provide all these methods.
    """

    def create_user(self, request: CreateUserRequest) -> User:
        """
        Create a new user.

        Args:
            request: Validated user draft

        Returns:
            The stored user with its assigned id

        Raises:
            UsernameTakenError: If the username is already in use
        """
        ...

    def get_user(self, user_id: int) -> Optional[User]:
        """
        Get a user by ID.

        Returns:
            User if found, None otherwise
        """
        ...

    def get_user_by_username(self, username: str) -> Optional[User]:
        """
        Get a user by username.

        Returns:
            User if found, None otherwise
        """
        ...

    def require_owner(self, owner_id: int) -> User:
        """
        Resolve the owner of a resource being created.

        Raises:
            OwnerNotFoundError: If the id does not resolve to a user
        """
        ...

    def seed_demo_user(self, settings: Settings) -> User:
        """
        Create the demo principal described by settings.

        Returns:
            The created user (id 1 on a fresh store)
        """
        ...
