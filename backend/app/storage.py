from __future__ import annotations

import logging

from app.rwlock import ReadWriteLock
from app.schemas import Item

logger = logging.getLogger(__name__)

SEED_ITEMS = ((1, "Item 1"), (2, "Item 2"))


class ItemNotFoundError(LookupError):
    def __init__(self, item_id: int):
        super().__init__(f"Item {item_id} not found")
        self.item_id = item_id


class ItemStore:
    """
    In-memory item collection safe for concurrent callers.

    One read/write lock guards both the mapping and the id counter. Reads
    (`list`, `get`, `count`) share the lock; writes (`create`, `update`,
    `delete`) hold it exclusively. Every returned `Item` is a copy, so callers
    cannot reach stored state outside the lock.
    """

    def __init__(self):
        self._lock = ReadWriteLock()
        self._items: dict[int, Item] = {}
        for item_id, name in SEED_ITEMS:
            self._items[item_id] = Item(id=item_id, name=name)
        self._next_id = max(self._items) + 1

    def list(self) -> list[Item]:
        with self._lock.read():
            snapshot = [item.model_copy() for item in self._items.values()]
        return snapshot

    def get(self, item_id: int) -> Item:
        with self._lock.read():
            item = self._items.get(item_id)
            found = item.model_copy() if item is not None else None
        if found is None:
            logger.debug("item %s not found", item_id)
            raise ItemNotFoundError(item_id)
        return found

    def count(self) -> int:
        with self._lock.read():
            return len(self._items)

    def create(self, name: str) -> Item:
        with self._lock.write():
            item_id = self._next_id
            self._next_id += 1
            stored = Item(id=item_id, name=name)
            self._items[item_id] = stored
            created = stored.model_copy()
        logger.debug("created item %s", item_id)
        return created

    def update(self, item_id: int, name: str) -> Item:
        with self._lock.write():
            if item_id not in self._items:
                raise ItemNotFoundError(item_id)
            stored = Item(id=item_id, name=name)
            self._items[item_id] = stored
            updated = stored.model_copy()
        logger.debug("updated item %s", item_id)
        return updated

    def delete(self, item_id: int) -> None:
        with self._lock.write():
            if self._items.pop(item_id, None) is None:
                raise ItemNotFoundError(item_id)
        logger.debug("deleted item %s", item_id)
