"""
Items module data models.
"""

from typing import Optional
from pydantic import Field

from shared.models import CamelModel, Entity


# Sentinel the client sends when no category filter is selected
ALL_CATEGORIES = "All Categories"


class CreateItemRequest(CamelModel):
    """Request to share a new item."""

    name: str = Field(..., min_length=1, description="Item name")
    category: str = Field(..., min_length=1, description="Item category")
    condition: str = Field(
        ...,
        min_length=1,
        description="Item condition (e.g., 'Like New', 'Good', 'Fair', 'Needs Repair')",
    )
    description: str = Field(..., min_length=1, description="Item description")
    image_url: Optional[str] = Field(None, description="Photo URL")


class Item(Entity):
    """
    A stored shareable item.

    ``available`` goes from True to False once, when the item is claimed.
    Sharer fields are a snapshot of the owner taken at creation.
    """

    sharer_id: int = Field(..., description="Owning user ID")
    name: str = Field(..., description="Item name")
    category: str = Field(..., description="Item category")
    condition: str = Field(..., description="Item condition")
    description: str = Field(..., description="Item description")
    image_url: Optional[str] = Field(None, description="Photo URL")
    sharer_name: str = Field(..., description="Sharer full name at creation")
    sharer_image: str = Field(default="", description="Sharer avatar URL at creation")
    available: bool = Field(default=True, description="False once claimed")
