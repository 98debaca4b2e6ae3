"""
Shared infrastructure for Campus Aid backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- repository: Generic in-memory entity store
- exceptions: Base exception classes
- logging_config: Root logger setup

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .exceptions import (
    CampusAidError,
    NotFoundError,
    RuleViolationError,
    ConflictError,
    ConsistencyError,
)
from .models import CamelModel, Entity, Clock, utc_now
from .repository import EntityStore

__all__ = [
    "Settings",
    "get_settings",
    "CampusAidError",
    "NotFoundError",
    "RuleViolationError",
    "ConflictError",
    "ConsistencyError",
    "CamelModel",
    "Entity",
    "Clock",
    "utc_now",
    "EntityStore",
]
