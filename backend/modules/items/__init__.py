"""
Items module.

Handles shareable items and claiming them.

Public API:
- IItemService: Interface for item operations
- Item: Stored item with sharer snapshot
- CreateItemRequest: Request to share an item
"""

from .interfaces import IItemService
from .models import Item, CreateItemRequest, ALL_CATEGORIES
from .exceptions import ItemNotFoundError, ItemAlreadyClaimedError

__all__ = [
    # Interface
    "IItemService",
    # Models
    "Item",
    "CreateItemRequest",
    "ALL_CATEGORIES",
    # Exceptions
    "ItemNotFoundError",
    "ItemAlreadyClaimedError",
]
