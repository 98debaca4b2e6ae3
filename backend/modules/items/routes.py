"""
Item API endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_item_service
from api.middleware.auth import get_current_user
from modules.users.models import User

from .interfaces import IItemService
from .models import CreateItemRequest, Item
from .exceptions import ItemNotFoundError

router = APIRouter()


@router.get("", response_model=list[Item])
async def list_items(
    category: Optional[str] = Query(default=None, description="Filter by category"),
    service: IItemService = Depends(get_item_service),
) -> list[Item]:
    """
    List items that are still available, most recent first.
    """
    return service.list_items(category)


@router.post("", response_model=Item, status_code=201)
async def create_item(
    request: CreateItemRequest,
    user: User = Depends(get_current_user),
    service: IItemService = Depends(get_item_service),
) -> Item:
    return service.create_item(request, user.id)


@router.get("/{item_id}", response_model=Item)
async def get_item(
    item_id: int,
    service: IItemService = Depends(get_item_service),
) -> Item:
    """
    Get an item, including one that has been claimed.
    """
    item = service.get_item(item_id)
    if item is None:
        raise ItemNotFoundError(item_id)
    return item


@router.patch("/{item_id}/request", response_model=Item)
async def claim_item(
    item_id: int,
    service: IItemService = Depends(get_item_service),
) -> Item:
    """
    Claim an item. Returns 400 if someone already claimed it.
    """
    return service.claim_item(item_id)
