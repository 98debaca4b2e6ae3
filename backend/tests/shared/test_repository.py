"""Tests for shared/repository.py."""

import threading
from datetime import datetime, timezone

import pytest

from shared.models import Entity
from shared.repository import EntityStore


class Note(Entity):
    """Minimal entity for exercising the store."""

    text: str


def make_note(store: EntityStore[Note], text: str = "hello") -> Note:
    return Note(id=store.allocate_id(), created_at=datetime.now(timezone.utc), text=text)


@pytest.fixture
def store() -> EntityStore[Note]:
    return EntityStore("notes")


class TestAllocateId:
    def test_starts_at_one(self, store):
        """First id should be 1."""
        assert store.allocate_id() == 1

    def test_strictly_increasing(self, store):
        """Ids should increase by one per call."""
        ids = [store.allocate_id() for _ in range(5)]
        assert ids == [1, 2, 3, 4, 5]

    def test_ids_not_reused_after_overwrite(self, store):
        """Overwriting an entity should not rewind the counter."""
        note = store.put(make_note(store))
        store.put(note.model_copy(update={"text": "changed"}))
        assert store.allocate_id() == 2

    def test_stores_allocate_independently(self):
        """Each store should have its own id sequence."""
        first = EntityStore("a")
        second = EntityStore("b")
        first.allocate_id()
        first.allocate_id()
        assert second.allocate_id() == 1

    def test_concurrent_allocation_is_unique(self, store):
        """Ids allocated from many threads should never collide."""
        results: list[int] = []

        def worker():
            for _ in range(200):
                results.append(store.allocate_id())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == len(set(results)) == 1600


class TestGetAndPut:
    def test_get_missing_returns_none(self, store):
        """get should return None rather than raise."""
        assert store.get(42) is None

    def test_put_then_get(self, store):
        """A stored entity should be retrievable by its id."""
        note = store.put(make_note(store))
        assert store.get(note.id) == note

    def test_put_overwrites(self, store):
        """put with an existing id should replace the value (last write wins)."""
        note = store.put(make_note(store, "first"))
        store.put(note.model_copy(update={"text": "second"}))
        assert store.get(note.id).text == "second"
        assert len(store) == 1


class TestList:
    def test_empty(self, store):
        assert store.list() == []

    def test_insertion_order(self, store):
        """list should return entities in insertion order."""
        a = store.put(make_note(store, "a"))
        b = store.put(make_note(store, "b"))
        c = store.put(make_note(store, "c"))
        assert [n.id for n in store.list()] == [a.id, b.id, c.id]

    def test_list_is_a_snapshot(self, store):
        """Mutating the returned list should not affect the store."""
        store.put(make_note(store))
        snapshot = store.list()
        snapshot.clear()
        assert len(store) == 1


class TestFind:
    def test_find_match(self, store):
        store.put(make_note(store, "a"))
        b = store.put(make_note(store, "b"))
        assert store.find(lambda n: n.text == "b") == b

    def test_find_no_match(self, store):
        store.put(make_note(store, "a"))
        assert store.find(lambda n: n.text == "z") is None


class TestLocked:
    def test_locked_is_reentrant(self, store):
        """Store methods should work while the caller holds the lock."""
        with store.locked():
            note = store.put(make_note(store))
            with store.locked():
                assert store.get(note.id) == note

    def test_locked_yields_store(self, store):
        with store.locked() as locked_store:
            assert locked_store is store
