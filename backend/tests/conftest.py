"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
Every fixture builds fresh stores, so no state leaks between tests.
"""

import pytest
from datetime import datetime, timezone, timedelta
from fastapi.testclient import TestClient

from shared.config import Settings
from shared.repository import EntityStore
from modules.users.models import User, CreateUserRequest
from modules.users.service import UserService
from modules.rides.models import CreateRideRequest
from modules.rides.service import RideService
from modules.items.models import CreateItemRequest
from modules.items.service import ItemService
from modules.help_requests.models import CreateHelpRequestRequest
from modules.help_requests.service import HelpRequestService
from api.app import create_app
from api.dependencies import ServiceContainer


class FakeClock:
    """Clock that advances one second per call."""

    def __init__(self, start: datetime = datetime(2024, 9, 1, 8, 0, tzinfo=timezone.utc)):
        self.current = start

    def __call__(self) -> datetime:
        now = self.current
        self.current = now + timedelta(seconds=1)
        return now


def make_ride_request(**overrides) -> CreateRideRequest:
    """Helper to create a ride draft."""
    data = {
        "from_location": "North Campus",
        "to_location": "Downtown Station",
        "date": "2024-09-05",
        "time": "08:30",
        "total_seats": 3,
        "cost_per_person": 5,
        "vehicle_info": "Blue Honda Civic",
    }
    data.update(overrides)
    return CreateRideRequest(**data)


def make_item_request(**overrides) -> CreateItemRequest:
    """Helper to create an item draft."""
    data = {
        "name": "Graphing Calculator",
        "category": "Electronics",
        "condition": "Good",
        "description": "TI-84, works fine",
    }
    data.update(overrides)
    return CreateItemRequest(**data)


def make_help_request(**overrides) -> CreateHelpRequestRequest:
    """Helper to create a help request draft."""
    data = {
        "title": "Need help moving a desk",
        "category": "Moving",
        "description": "Third floor, no elevator",
        "location": "West Hall",
        "urgency": "Soon (this week)",
    }
    data.update(overrides)
    return CreateHelpRequestRequest(**data)


@pytest.fixture
def settings() -> Settings:
    """Settings with defaults only (no .env, no environment)."""
    return Settings(_env_file=None)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def user_service(clock: FakeClock) -> UserService:
    return UserService(EntityStore("users"), clock=clock)


@pytest.fixture
def owner(user_service: UserService) -> User:
    """A user that owns rides, items and help requests."""
    return user_service.create_user(
        CreateUserRequest(
            username="maya.chen",
            password="secret",
            full_name="Maya Chen",
            profile_image="https://example.com/maya.png",
            verified=True,
        )
    )


@pytest.fixture
def ride_service(user_service: UserService, clock: FakeClock, settings: Settings) -> RideService:
    return RideService(
        EntityStore("rides"),
        users=user_service,
        driver_rating=settings.default_driver_rating,
        clock=clock,
    )


@pytest.fixture
def item_service(user_service: UserService, clock: FakeClock) -> ItemService:
    return ItemService(EntityStore("items"), users=user_service, clock=clock)


@pytest.fixture
def help_request_service(user_service: UserService, clock: FakeClock) -> HelpRequestService:
    return HelpRequestService(EntityStore("help_requests"), users=user_service, clock=clock)


@pytest.fixture
def container(settings: Settings, clock: FakeClock) -> ServiceContainer:
    """Container with the demo user seeded."""
    return ServiceContainer(settings, clock=clock)


@pytest.fixture
def app(container: ServiceContainer):
    """Create a fresh app for each test."""
    return create_app(container)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def ride_draft():
    """Factory for ride drafts; keyword overrides replace defaults."""
    return make_ride_request


@pytest.fixture
def item_draft():
    """Factory for item drafts."""
    return make_item_request


@pytest.fixture
def help_draft():
    """Factory for help request drafts."""
    return make_help_request
