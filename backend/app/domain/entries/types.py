"""Shared entry domain types."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date


@dataclass
class Entry:
    """One logged fitness activity occurrence."""

    date: date
    activity_id: int | None = None
    duration: float = 0.0
    exclude: bool = False
    notes: str | None = None
    id: int = 0


@dataclass(frozen=True)
class Activity:
    """Read-only activity lookup row used by the select list."""

    id: int
    name: str


@dataclass(frozen=True)
class EntryStatistics:
    total_activity: float
    number_of_active_days: int
    average_daily_activity: float


@dataclass
class ValidationErrors:
    """Per-field error map; the bound entry is valid iff it is empty."""

    fields: dict[str, list[str]] = field(default_factory=dict)

    def add(self, field_name: str, message: str) -> None:
        self.fields.setdefault(field_name, []).append(message)

    @property
    def is_valid(self) -> bool:
        return not self.fields

    def get(self, field_name: str) -> list[str]:
        return list(self.fields.get(field_name, []))


class EntryNotFoundError(KeyError):
    """Raised when an entry id does not match a stored entry."""

    def __init__(self, entry_id: int) -> None:
        super().__init__(entry_id)
        self.entry_id = entry_id

    def __str__(self) -> str:
        return f"Entry {self.entry_id} not found"
