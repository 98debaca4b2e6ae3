"""
Rides module.

Handles carpool ride creation, listing and seat requests.

Public API:
- IRideService: Interface for ride operations
- Ride: Stored ride with driver snapshot
- CreateRideRequest: Request to offer a ride
"""

from .interfaces import IRideService
from .models import Ride, CreateRideRequest, MIN_SEATS, MAX_SEATS
from .exceptions import RideNotFoundError, NoSeatsAvailableError

__all__ = [
    # Interface
    "IRideService",
    # Models
    "Ride",
    "CreateRideRequest",
    "MIN_SEATS",
    "MAX_SEATS",
    # Exceptions
    "RideNotFoundError",
    "NoSeatsAvailableError",
]
