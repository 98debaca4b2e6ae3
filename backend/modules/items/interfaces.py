"""
Items module interface.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import Item, CreateItemRequest


@runtime_checkable
class IItemService(Protocol):
    """Interface for shareable item operations."""

    def create_item(self, request: CreateItemRequest, owner_id: int) -> Item:
        """
        Share a new item. Items start available.

        Raises:
            OwnerNotFoundError: If owner_id does not resolve to a user
        """
        ...

    def get_item(self, item_id: int) -> Optional[Item]:
        """
        Get an item by ID, including claimed items.

        Returns:
            Item if found, None otherwise
        """
        ...

    def list_items(self, category: Optional[str] = None) -> list[Item]:
        """
        List available items, most recent first.

        Args:
            category: Optional exact category filter
        """
        ...

    def claim_item(self, item_id: int) -> Item:
        """
        Claim an item, marking it unavailable.

        Raises:
            ItemNotFoundError: If the item doesn't exist
            ItemAlreadyClaimedError: If the item was already claimed
        """
        ...
