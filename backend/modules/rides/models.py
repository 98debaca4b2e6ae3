"""
Rides module data models.

These models define the core data structures for carpool rides.
"""

from pydantic import Field, model_validator

from shared.models import CamelModel, Entity


MIN_SEATS = 1
MAX_SEATS = 8


class CreateRideRequest(CamelModel):
    """Request to offer a new ride."""

    from_location: str = Field(..., min_length=1, description="Pickup location")
    to_location: str = Field(..., min_length=1, description="Destination")
    date: str = Field(..., min_length=1, description="Departure date (free text)")
    time: str = Field(..., min_length=1, description="Departure time (free text)")
    total_seats: int = Field(
        ...,
        strict=True,
        ge=MIN_SEATS,
        le=MAX_SEATS,
        description="Seats offered to passengers",
    )
    cost_per_person: int = Field(..., strict=True, ge=1, description="Cost per passenger")
    vehicle_info: str = Field(..., min_length=1, description="Vehicle description")


class Ride(Entity):
    """
    A stored ride.

    Driver fields are a snapshot of the owning user taken at creation;
    they do not follow later profile changes.
    """

    driver_id: int = Field(..., description="Owning user ID")
    from_location: str = Field(..., description="Pickup location")
    to_location: str = Field(..., description="Destination")
    date: str = Field(..., description="Departure date (free text)")
    time: str = Field(..., description="Departure time (free text)")
    total_seats: int = Field(..., ge=MIN_SEATS, le=MAX_SEATS, description="Seats offered")
    available_seats: int = Field(..., ge=0, description="Seats not yet requested")
    cost_per_person: int = Field(..., ge=1, description="Cost per passenger")
    vehicle_info: str = Field(..., description="Vehicle description")

    # Driver snapshot
    driver_name: str = Field(..., description="Driver full name at creation")
    driver_image: str = Field(default="", description="Driver avatar URL at creation")
    driver_rating: str = Field(..., description="Placeholder driver rating")

    @model_validator(mode="after")
    def _check_seats(self) -> "Ride":
        if self.available_seats > self.total_seats:
            raise ValueError("available_seats cannot exceed total_seats")
        return self
