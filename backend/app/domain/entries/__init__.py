"""Fitness entries domain package."""

from .activities import ActivitiesLookup, StaticActivityCatalog
from .forms import (
    DURATION_NOT_POSITIVE_MESSAGE,
    UNKNOWN_ACTIVITY_MESSAGE,
    EntryForm,
    EntryFormResult,
    bind_entry_form,
    form_values,
)
from .repository import EntriesRepository, InMemoryEntriesRepository
from .sample_data import sample_entries
from .statistics import compute_statistics
from .types import (
    Activity,
    Entry,
    EntryNotFoundError,
    EntryStatistics,
    ValidationErrors,
)

__all__ = [
    "ActivitiesLookup",
    "Activity",
    "DURATION_NOT_POSITIVE_MESSAGE",
    "EntriesRepository",
    "Entry",
    "EntryForm",
    "EntryFormResult",
    "EntryNotFoundError",
    "EntryStatistics",
    "InMemoryEntriesRepository",
    "StaticActivityCatalog",
    "UNKNOWN_ACTIVITY_MESSAGE",
    "ValidationErrors",
    "bind_entry_form",
    "compute_statistics",
    "form_values",
    "sample_entries",
]
