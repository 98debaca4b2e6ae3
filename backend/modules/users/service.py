"""
Users service implementation backed by the in-memory entity store.
"""

import logging
from typing import Optional

from shared.config import Settings
from shared.models import Clock, utc_now
from shared.repository import EntityStore

from .interfaces import IUserService
from .models import User, CreateUserRequest
from .exceptions import UsernameTakenError, OwnerNotFoundError

logger = logging.getLogger(__name__)


class UserService(IUserService):
    """
    User service over an EntityStore[User].

    Users are created once and never mutated or deleted.
    """

    def __init__(self, store: EntityStore[User], clock: Clock = utc_now):
        self._store = store
        self._clock = clock

    def create_user(self, request: CreateUserRequest) -> User:
        """Create a user, enforcing username uniqueness."""
        with self._store.locked():
            if self.get_user_by_username(request.username) is not None:
                raise UsernameTakenError(request.username)

            user = User(
                id=self._store.allocate_id(),
                created_at=self._clock(),
                username=request.username,
                password=request.password,
                full_name=request.full_name,
                profile_image=request.profile_image,
                verified=request.verified,
            )
            self._store.put(user)

        logger.info(f"Created user {user.id} ({user.username})")
        return user

    def get_user(self, user_id: int) -> Optional[User]:
        return self._store.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        return self._store.find(lambda user: user.username == username)

    def require_owner(self, owner_id: int) -> User:
        user = self._store.get(owner_id)
        if user is None:
            logger.error(f"Owner {owner_id} does not resolve to a user")
            raise OwnerNotFoundError(owner_id)
        return user

    def seed_demo_user(self, settings: Settings) -> User:
        """Create the demo principal that every request acts as."""
        return self.create_user(
            CreateUserRequest(
                username=settings.demo_username,
                password=settings.demo_password,
                full_name=settings.demo_full_name,
                profile_image=settings.demo_profile_image,
                verified=settings.demo_verified,
            )
        )
