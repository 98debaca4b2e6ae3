"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. The container owns every entity store; create_app builds
one per application and attaches it to ``app.state``, so each app instance
(and each test) gets its own volatile data.
"""

import logging
from typing import Optional

from fastapi import Request

from shared.config import Settings, get_settings
from shared.models import Clock, utc_now
from shared.repository import EntityStore
from modules.users.interfaces import IUserService
from modules.users.models import User
from modules.users.service import UserService
from modules.rides.interfaces import IRideService
from modules.rides.models import Ride
from modules.rides.service import RideService
from modules.items.interfaces import IItemService
from modules.items.models import Item
from modules.items.service import ItemService
from modules.help_requests.interfaces import IHelpRequestService
from modules.help_requests.models import HelpRequest
from modules.help_requests.service import HelpRequestService

logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    Container for all stores and service instances.

    One EntityStore per entity type is created here and handed to the
    service that owns it. Services are created eagerly because the demo
    principal has to exist before the first request.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        clock: Clock = utc_now,
        seed_demo_user: bool = True,
    ) -> None:
        self.settings = settings or get_settings()

        self.user_store: EntityStore[User] = EntityStore("users")
        self.ride_store: EntityStore[Ride] = EntityStore("rides")
        self.item_store: EntityStore[Item] = EntityStore("items")
        self.help_request_store: EntityStore[HelpRequest] = EntityStore("help_requests")

        self.users: IUserService = UserService(self.user_store, clock=clock)
        self.rides: IRideService = RideService(
            self.ride_store,
            users=self.users,
            clock=clock,
            driver_rating=self.settings.default_driver_rating,
        )
        self.items: IItemService = ItemService(self.item_store, users=self.users, clock=clock)
        self.help_requests: IHelpRequestService = HelpRequestService(
            self.help_request_store,
            users=self.users,
            clock=clock,
        )

        self.demo_user: Optional[User] = None
        if seed_demo_user:
            self.demo_user = self.users.seed_demo_user(self.settings)
            logger.info(f"Seeded demo user {self.demo_user.id} ({self.demo_user.username})")

    def store_counts(self) -> dict[str, int]:
        """Number of entities held by each store."""
        stores = (self.user_store, self.ride_store, self.item_store, self.help_request_store)
        return {store.name: len(store) for store in stores}


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_container(request: Request) -> ServiceContainer:
    """FastAPI dependency for the application's service container."""
    return request.app.state.container


def get_user_service(request: Request) -> IUserService:
    """FastAPI dependency for user service."""
    return get_container(request).users


def get_ride_service(request: Request) -> IRideService:
    """FastAPI dependency for ride service."""
    return get_container(request).rides


def get_item_service(request: Request) -> IItemService:
    """FastAPI dependency for item service."""
    return get_container(request).items


def get_help_request_service(request: Request) -> IHelpRequestService:
    """FastAPI dependency for help request service."""
    return get_container(request).help_requests
