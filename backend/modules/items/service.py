"""
Items service implementation backed by the in-memory entity store.
"""

import logging
from typing import Optional

from shared.models import Clock, utc_now
from shared.repository import EntityStore
from modules.users.interfaces import IUserService

from .interfaces import IItemService
from .models import Item, CreateItemRequest, ALL_CATEGORIES
from .exceptions import ItemNotFoundError, ItemAlreadyClaimedError

logger = logging.getLogger(__name__)


class ItemService(IItemService):
    """
    Item service over an EntityStore[Item].

    Claimed items drop out of list_items but stay reachable through get_item.
    """

    def __init__(
        self,
        store: EntityStore[Item],
        users: IUserService,
        clock: Clock = utc_now,
    ):
        self._store = store
        self._users = users
        self._clock = clock

    def create_item(self, request: CreateItemRequest, owner_id: int) -> Item:
        sharer = self._users.require_owner(owner_id)

        with self._store.locked():
            item = Item(
                id=self._store.allocate_id(),
                created_at=self._clock(),
                sharer_id=sharer.id,
                name=request.name,
                category=request.category,
                condition=request.condition,
                description=request.description,
                image_url=request.image_url,
                sharer_name=sharer.full_name,
                sharer_image=sharer.profile_image or "",
                available=True,
            )
            self._store.put(item)

        logger.info(f"Created item {item.id}: {item.name} ({item.category})")
        return item

    def get_item(self, item_id: int) -> Optional[Item]:
        return self._store.get(item_id)

    def list_items(self, category: Optional[str] = None) -> list[Item]:
        items = [item for item in self._store.list() if item.available]
        if category and category != ALL_CATEGORIES:
            items = [item for item in items if item.category == category]
        return sorted(items, key=lambda item: (item.created_at, item.id), reverse=True)

    def claim_item(self, item_id: int) -> Item:
        with self._store.locked():
            item = self._store.get(item_id)
            if item is None:
                raise ItemNotFoundError(item_id)

            if not item.available:
                logger.warning(f"Claim attempted on already claimed item {item_id}")
                raise ItemAlreadyClaimedError(item_id)

            updated = item.model_copy(update={"available": False})
            self._store.put(updated)

        logger.info(f"Item {item_id} claimed")
        return updated
