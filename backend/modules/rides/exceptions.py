"""
Rides module exceptions.
"""

from shared.exceptions import NotFoundError, RuleViolationError


class RideNotFoundError(NotFoundError):
    """Raised when a ride is not found."""

    def __init__(self, ride_id: int):
        super().__init__(
            f"Ride not found: {ride_id}",
            code="RIDE_NOT_FOUND",
            details={"ride_id": ride_id},
        )


class NoSeatsAvailableError(RuleViolationError):
    """Raised when requesting a seat on a full ride."""

    def __init__(self, ride_id: int):
        super().__init__(
            f"No seats available on ride: {ride_id}",
            code="NO_SEATS_AVAILABLE",
            details={"ride_id": ride_id},
        )
