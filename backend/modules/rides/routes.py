"""
Ride API endpoints.

Domain errors (RideNotFoundError, NoSeatsAvailableError) propagate to the
global error handlers.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_ride_service
from api.middleware.auth import get_current_user
from modules.users.models import User

from .interfaces import IRideService
from .models import CreateRideRequest, Ride
from .exceptions import RideNotFoundError

router = APIRouter()


@router.get("", response_model=list[Ride])
async def list_rides(
    service: IRideService = Depends(get_ride_service),
) -> list[Ride]:
    """
    List all rides, most recent first.
    """
    return service.list_rides()


@router.post("", response_model=Ride, status_code=201)
async def create_ride(
    request: CreateRideRequest,
    user: User = Depends(get_current_user),
    service: IRideService = Depends(get_ride_service),
) -> Ride:
    """
    Offer a ride as the current user.
    """
    return service.create_ride(request, user.id)


@router.get("/{ride_id}", response_model=Ride)
async def get_ride(
    ride_id: int,
    service: IRideService = Depends(get_ride_service),
) -> Ride:
    ride = service.get_ride(ride_id)
    if ride is None:
        raise RideNotFoundError(ride_id)
    return ride


@router.patch("/{ride_id}/request", response_model=Ride)
async def request_seat(
    ride_id: int,
    service: IRideService = Depends(get_ride_service),
) -> Ride:
    """
    Request one seat on a ride.

    Returns 400 when the ride is already full.
    """
    return service.request_seat(ride_id)
