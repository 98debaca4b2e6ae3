"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from datetime import datetime, timezone
from typing import Callable

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Default clock for stamping ``created_at``."""
    return datetime.now(timezone.utc)


class CamelModel(BaseModel):
    """
    Base model for everything that crosses the HTTP boundary.

    Python attributes are snake_case; JSON uses camelCase to match the web
    client. Both spellings are accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class Entity(CamelModel):
    """
    Base for every stored record.

    Entities are immutable. A state transition builds a new value with
    ``model_copy(update=...)`` and puts it back into the store.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., ge=1, description="Id, unique within the entity type")
    created_at: datetime = Field(..., description="Creation time (UTC)")
