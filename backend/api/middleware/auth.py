"""
Current-user resolution.

There is no login yet: every request acts as the demo principal seeded
by the service container.
"""

from fastapi import Depends

from modules.users.models import User
from modules.users.exceptions import OwnerNotFoundError

from ..dependencies import ServiceContainer, get_container


async def get_current_user(
    container: ServiceContainer = Depends(get_container),
) -> User:
    """
    Dependency that resolves the acting user.

    Usage:
        @router.post("")
        async def create(user: User = Depends(get_current_user)):
            return service.create(..., owner_id=user.id)

    Raises:
        OwnerNotFoundError: If the container was built without a demo user
    """
    if container.demo_user is None:
        raise OwnerNotFoundError()
    return container.demo_user
