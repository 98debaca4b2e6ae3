"""
User-related endpoints.

Responses use UserProfile, which never includes the password.
"""

from fastapi import APIRouter, Depends

from modules.users.interfaces import IUserService
from modules.users.models import CreateUserRequest, User, UserProfile
from modules.users.exceptions import UserNotFoundError

from ..dependencies import get_user_service
from ..middleware.auth import get_current_user

router = APIRouter()


@router.get("/me", response_model=UserProfile)
async def get_current_user_profile(
    user: User = Depends(get_current_user),
) -> UserProfile:
    """
    Get the current user's profile.
    """
    return UserProfile.from_user(user)


@router.get("/{user_id}", response_model=UserProfile)
async def get_user(
    user_id: int,
    service: IUserService = Depends(get_user_service),
) -> UserProfile:
    user = service.get_user(user_id)
    if user is None:
        raise UserNotFoundError(user_id)
    return UserProfile.from_user(user)


@router.post("", response_model=UserProfile, status_code=201)
async def create_user(
    request: CreateUserRequest,
    service: IUserService = Depends(get_user_service),
) -> UserProfile:
    """
    Create a user. Returns 409 if the username is taken.
    """
    return UserProfile.from_user(service.create_user(request))
