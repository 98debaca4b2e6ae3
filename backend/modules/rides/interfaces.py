"""
Rides module interface.

The API layer depends on IRideService for all ride operations.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import Ride, CreateRideRequest


@runtime_checkable
class IRideService(Protocol):
    """
    Interface for ride operations.

    This protocol defines the contract that the rides module exposes
    to the API layer.
    """

    def create_ride(self, request: CreateRideRequest, owner_id: int) -> Ride:
        """
        Offer a new ride.

        All seats start available. The driver's name and image are copied
        from the owner at this point.

        Args:
            request: Validated ride draft
            owner_id: ID of the driver

        Returns:
            The stored ride

        Raises:
            OwnerNotFoundError: If owner_id does not resolve to a user
        """
        ...

    def get_ride(self, ride_id: int) -> Optional[Ride]:
        """
        Get a ride by ID.

        Returns:
            Ride if found, None otherwise
        """
        ...

    def list_rides(self) -> list[Ride]:
        """
        List all rides, most recent first.
        """
        ...

    def request_seat(self, ride_id: int) -> Ride:
        """
        Take one seat on a ride.

        Args:
            ride_id: Ride ID

        Returns:
            Updated ride with one fewer available seat

        Raises:
            RideNotFoundError: If the ride doesn't exist
            NoSeatsAvailableError: If no seats are left
        """
        ...
