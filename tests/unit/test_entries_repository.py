"""Tests for the in-memory entries repository."""

from __future__ import annotations

from datetime import date

import pytest

from backend.app.domain.entries import (
    Entry,
    EntryNotFoundError,
    InMemoryEntriesRepository,
    sample_entries,
)
from backend.app.domain.entries import repository as repository_module
from tests.helpers.logging import RecordingLogger, find_log

pytestmark = [pytest.mark.entries]


def _entry(**overrides) -> Entry:
    values = {
        "date": date(2024, 1, 1),
        "activity_id": 2,
        "duration": 30.0,
        "exclude": False,
        "notes": "Morning ride",
    }
    values.update(overrides)
    return Entry(**values)


def test_add_entry_assigns_id_and_round_trips() -> None:
    repo = InMemoryEntriesRepository()

    stored = repo.add_entry(_entry(id=99))
    fetched = repo.get_entry(stored.id)

    assert stored.id == 1
    assert fetched == _entry(id=1)


def test_ids_are_not_reused_after_delete() -> None:
    repo = InMemoryEntriesRepository()
    first = repo.add_entry(_entry())
    second = repo.add_entry(_entry())

    assert repo.delete_entry(second.id) is True
    third = repo.add_entry(_entry())

    assert [first.id, second.id, third.id] == [1, 2, 3]


def test_get_entries_preserves_insertion_order() -> None:
    repo = InMemoryEntriesRepository()
    repo.add_entry(_entry(date=date(2024, 1, 5)))
    repo.add_entry(_entry(date=date(2024, 1, 1)))

    assert [entry.date for entry in repo.get_entries()] == [
        date(2024, 1, 5),
        date(2024, 1, 1),
    ]


def test_get_entry_returns_none_when_missing() -> None:
    repo = InMemoryEntriesRepository()

    assert repo.get_entry(42) is None


def test_update_entry_replaces_fields_and_keeps_id() -> None:
    repo = InMemoryEntriesRepository()
    stored = repo.add_entry(_entry())

    repo.update_entry(_entry(id=stored.id, duration=45.0, exclude=True, notes=None))

    fetched = repo.get_entry(stored.id)
    assert fetched is not None
    assert fetched.id == stored.id
    assert fetched.duration == 45.0
    assert fetched.exclude is True
    assert fetched.notes is None


def test_update_entry_raises_for_unknown_id() -> None:
    repo = InMemoryEntriesRepository()

    with pytest.raises(EntryNotFoundError) as exc:
        repo.update_entry(_entry(id=7))

    assert exc.value.entry_id == 7
    assert repo.get_entries() == []


def test_delete_entry_then_get_returns_none() -> None:
    repo = InMemoryEntriesRepository()
    stored = repo.add_entry(_entry())

    repo.delete_entry(stored.id)

    assert repo.get_entry(stored.id) is None


def test_delete_missing_entry_is_noop() -> None:
    repo = InMemoryEntriesRepository()
    repo.add_entry(_entry())

    assert repo.delete_entry(5) is False
    assert len(repo.get_entries()) == 1


def test_returned_entries_are_copies() -> None:
    repo = InMemoryEntriesRepository()
    inbound = _entry()
    stored = repo.add_entry(inbound)

    inbound.duration = 999
    stored.duration = 999
    repo.get_entries()[0].duration = 999

    fetched = repo.get_entry(stored.id)
    assert fetched is not None
    assert fetched.duration == 30.0


def test_seed_entries_receive_sequential_ids() -> None:
    repo = InMemoryEntriesRepository(seed=sample_entries())

    ids = [entry.id for entry in repo.get_entries()]
    assert ids == list(range(1, len(sample_entries()) + 1))


def test_write_operations_emit_structured_logs(monkeypatch) -> None:
    recorder = RecordingLogger()
    monkeypatch.setattr(repository_module, "logger", recorder)
    repo = InMemoryEntriesRepository()

    stored = repo.add_entry(_entry())
    repo.update_entry(_entry(id=stored.id, duration=10.0))
    repo.delete_entry(stored.id)
    repo.delete_entry(stored.id)

    assert find_log(recorder.records, message="entry_added")["extra"] == {
        "entry_id": 1,
        "activity_id": 2,
    }
    assert find_log(recorder.records, message="entry_updated")["extra"] == {
        "entry_id": 1
    }
    assert recorder.messages("info")[-2:] == ["entry_deleted", "entry_delete_missing"]
