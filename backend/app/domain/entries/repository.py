"""Storage adapters for fitness entries."""

from __future__ import annotations

from dataclasses import replace
from threading import RLock
from typing import Iterable, Protocol

from ...infra.logging import get_logger
from .types import Entry, EntryNotFoundError

logger = get_logger(__name__)


class EntriesRepository(Protocol):  # pragma: no cover - interface only
    """Persistence abstraction consumed by the entries router."""

    def get_entries(self) -> list[Entry]: ...

    def get_entry(self, entry_id: int) -> Entry | None: ...

    def add_entry(self, entry: Entry) -> Entry: ...

    def update_entry(self, entry: Entry) -> Entry: ...

    def delete_entry(self, entry_id: int) -> bool: ...


class InMemoryEntriesRepository(EntriesRepository):
    """Process-lifetime entry store with monotonic id issuance.

    Entries are copied on the way in and on the way out, so callers never
    share mutable state with the store. Ids are never reused, even after the
    entry holding the highest id is deleted.
    """

    def __init__(self, seed: Iterable[Entry] | None = None) -> None:
        self._lock = RLock()
        self._entries: list[Entry] = []
        self._next_id = 1
        for entry in seed or ():
            self.add_entry(entry)

    def get_entries(self) -> list[Entry]:
        with self._lock:
            return [replace(entry) for entry in self._entries]

    def get_entry(self, entry_id: int) -> Entry | None:
        with self._lock:
            index = self._index_of(entry_id)
            if index is None:
                return None
            return replace(self._entries[index])

    def add_entry(self, entry: Entry) -> Entry:
        with self._lock:
            stored = replace(entry, id=self._next_id)
            self._next_id += 1
            self._entries.append(stored)
        logger.info(
            "entry_added",
            extra={"entry_id": stored.id, "activity_id": stored.activity_id},
        )
        return replace(stored)

    def update_entry(self, entry: Entry) -> Entry:
        with self._lock:
            index = self._index_of(entry.id)
            if index is None:
                raise EntryNotFoundError(entry.id)
            stored = replace(entry)
            self._entries[index] = stored
        logger.info("entry_updated", extra={"entry_id": stored.id})
        return replace(stored)

    def delete_entry(self, entry_id: int) -> bool:
        with self._lock:
            index = self._index_of(entry_id)
            if index is None:
                logger.info("entry_delete_missing", extra={"entry_id": entry_id})
                return False
            del self._entries[index]
        logger.info("entry_deleted", extra={"entry_id": entry_id})
        return True

    def _index_of(self, entry_id: int) -> int | None:
        for index, entry in enumerate(self._entries):
            if entry.id == entry_id:
                return index
        return None
