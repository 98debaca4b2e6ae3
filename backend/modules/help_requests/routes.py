"""
Help request API endpoints.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_help_request_service
from api.middleware.auth import get_current_user
from modules.users.models import User

from .interfaces import IHelpRequestService
from .models import CreateHelpRequestRequest, HelpRequest
from .exceptions import HelpRequestNotFoundError

router = APIRouter()


@router.get("", response_model=list[HelpRequest])
async def list_help_requests(
    service: IHelpRequestService = Depends(get_help_request_service),
) -> list[HelpRequest]:
    """
    List open help requests, most urgent first.
    """
    return service.list_help_requests()


@router.post("", response_model=HelpRequest, status_code=201)
async def create_help_request(
    request: CreateHelpRequestRequest,
    user: User = Depends(get_current_user),
    service: IHelpRequestService = Depends(get_help_request_service),
) -> HelpRequest:
    return service.create_help_request(request, user.id)


@router.get("/{request_id}", response_model=HelpRequest)
async def get_help_request(
    request_id: int,
    service: IHelpRequestService = Depends(get_help_request_service),
) -> HelpRequest:
    help_request = service.get_help_request(request_id)
    if help_request is None:
        raise HelpRequestNotFoundError(request_id)
    return help_request


@router.patch("/{request_id}/offer-help", response_model=HelpRequest)
async def offer_help(
    request_id: int,
    service: IHelpRequestService = Depends(get_help_request_service),
) -> HelpRequest:
    """
    Offer help on a request. Every call counts as one more helper.
    """
    return service.offer_help(request_id)
