"""
Rides service implementation backed by the in-memory entity store.
"""

import logging
from typing import Optional

from shared.models import Clock, utc_now
from shared.repository import EntityStore
from modules.users.interfaces import IUserService

from .interfaces import IRideService
from .models import Ride, CreateRideRequest
from .exceptions import RideNotFoundError, NoSeatsAvailableError

logger = logging.getLogger(__name__)


class RideService(IRideService):
    """
    Ride service over an EntityStore[Ride].

    request_seat is the only path that changes available_seats.
    """

    def __init__(
        self,
        store: EntityStore[Ride],
        users: IUserService,
        driver_rating: str,
        clock: Clock = utc_now,
    ):
        self._store = store
        self._users = users
        self._clock = clock
        self._driver_rating = driver_rating

    def create_ride(self, request: CreateRideRequest, owner_id: int) -> Ride:
        """Store a new ride with every seat available."""
        driver = self._users.require_owner(owner_id)

        with self._store.locked():
            ride = Ride(
                id=self._store.allocate_id(),
                created_at=self._clock(),
                driver_id=driver.id,
                from_location=request.from_location,
                to_location=request.to_location,
                date=request.date,
                time=request.time,
                total_seats=request.total_seats,
                available_seats=request.total_seats,
                cost_per_person=request.cost_per_person,
                vehicle_info=request.vehicle_info,
                driver_name=driver.full_name,
                driver_image=driver.profile_image or "",
                driver_rating=self._driver_rating,
            )
            self._store.put(ride)

        logger.info(
            f"Created ride {ride.id}: {ride.from_location} -> {ride.to_location} "
            f"({ride.total_seats} seats)"
        )
        return ride

    def get_ride(self, ride_id: int) -> Optional[Ride]:
        return self._store.get(ride_id)

    def list_rides(self) -> list[Ride]:
        """Newest first; rides created at the same instant list by id, highest first."""
        return sorted(
            self._store.list(),
            key=lambda ride: (ride.created_at, ride.id),
            reverse=True,
        )

    def request_seat(self, ride_id: int) -> Ride:
        """Decrement available_seats by one."""
        with self._store.locked():
            ride = self._store.get(ride_id)
            if ride is None:
                raise RideNotFoundError(ride_id)

            if ride.available_seats <= 0:
                logger.warning(f"Seat requested on full ride {ride_id}")
                raise NoSeatsAvailableError(ride_id)

            updated = ride.model_copy(
                update={"available_seats": ride.available_seats - 1}
            )
            self._store.put(updated)

        logger.info(
            f"Seat requested on ride {ride_id}: "
            f"{updated.available_seats}/{updated.total_seats} left"
        )
        return updated
