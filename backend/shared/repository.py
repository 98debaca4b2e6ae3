"""
Generic in-memory entity store.

Provides the storage abstraction shared by every module: one EntityStore
per entity type, holding a mapping from integer id to an immutable
Pydantic model. Services own the read-modify-write sequences and run them
inside ``locked()``.
"""

import threading
from contextlib import contextmanager
from typing import Callable, Generic, Iterator, Optional, TypeVar

from .models import Entity


T = TypeVar("T", bound=Entity)


class EntityStore(Generic[T]):
    """
    Keyed collection for a single entity type.

    Provides:
    - Monotonic id allocation starting at 1 (ids are never reused)
    - Lookup by id returning None when absent
    - Insert-or-replace by the entity's own id (last write wins)
    - Listing in insertion order; callers filter and sort

    The store is volatile and process-local. All methods are synchronous.

    Example:
        rides = EntityStore[Ride]("rides")
        with rides.locked():
            ride = Ride(id=rides.allocate_id(), ...)
            rides.put(ride)
    """

    def __init__(self, name: str) -> None:
        """
        Initialize an empty store.

        Args:
            name: Human-readable store name, used in logs and readiness output.
        """
        self.name = name
        self._entities: dict[int, T] = {}
        self._next_id = 1
        self._lock = threading.RLock()

    @contextmanager
    def locked(self) -> Iterator["EntityStore[T]"]:
        """Hold the store lock for a read-modify-write sequence."""
        with self._lock:
            yield self

    def allocate_id(self) -> int:
        """Return the next id for this store."""
        with self._lock:
            entity_id = self._next_id
            self._next_id += 1
            return entity_id

    def get(self, entity_id: int) -> Optional[T]:
        """Get an entity by id, or None if it does not exist."""
        return self._entities.get(entity_id)

    def put(self, entity: T) -> T:
        """Insert or replace an entity keyed by its id."""
        with self._lock:
            self._entities[entity.id] = entity
        return entity

    def list(self) -> list[T]:
        """Return a snapshot of all entities in insertion order."""
        with self._lock:
            return list(self._entities.values())

    def find(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """Return the first entity matching ``predicate``, or None."""
        for entity in self.list():
            if predicate(entity):
                return entity
        return None

    def __len__(self) -> int:
        return len(self._entities)
