"""
Help requests module data models.

Urgency is stored as the free-text label the client submits. Listing
ranks it by prefix, so "Very Urgent (within 1 hour)" and "Very Urgent"
share a rank.
"""

from typing import Optional
from pydantic import Field

from shared.models import CamelModel, Entity


# (label prefix, rank); lower ranks list first
URGENCY_RANKS: list[tuple[str, int]] = [
    ("Very Urgent", 0),
    ("Urgent", 1),
    ("Soon", 2),
    ("Not urgent", 3),
]

# Rank for labels that match no prefix
UNRANKED_URGENCY = 4


def urgency_rank(label: str) -> int:
    """Rank an urgency label by its prefix."""
    for prefix, rank in URGENCY_RANKS:
        if label.startswith(prefix):
            return rank
    return UNRANKED_URGENCY


class CreateHelpRequestRequest(CamelModel):
    """Request to ask the campus for help."""

    title: str = Field(..., min_length=1, description="Short summary")
    category: str = Field(..., min_length=1, description="Help category")
    description: str = Field(..., min_length=1, description="What is needed")
    location: str = Field(..., min_length=1, description="Where help is needed")
    urgency: str = Field(
        ...,
        min_length=1,
        description="Urgency label (e.g., 'Very Urgent (within 1 hour)', 'Not urgent')",
    )


class HelpRequest(Entity):
    """
    A stored help request.

    helpers_count only ever grows. Nothing sets resolved yet, but
    resolved requests are excluded from listings.
    """

    requester_id: int = Field(..., description="Owning user ID")
    title: str = Field(..., description="Short summary")
    category: str = Field(..., description="Help category")
    description: str = Field(..., description="What is needed")
    location: str = Field(..., description="Where help is needed")
    urgency: str = Field(..., description="Urgency label")
    requester_name: str = Field(..., description="Requester full name at creation")
    requester_image: str = Field(default="", description="Requester avatar URL at creation")
    helpers_count: int = Field(default=0, ge=0, description="Number of help offers")
    resolved: bool = Field(default=False, description="Whether the request is closed")

    @property
    def urgency_rank(self) -> int:
        return urgency_rank(self.urgency)
