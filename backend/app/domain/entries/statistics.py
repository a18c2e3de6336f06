"""Aggregate statistics shown above the entries list."""

from __future__ import annotations

from typing import Iterable

from .types import Entry, EntryStatistics


def compute_statistics(entries: Iterable[Entry]) -> EntryStatistics:
    """Sum non-excluded durations and count distinct dates across all entries.

    Excluded entries still count toward active days. With no active days the
    average is reported as ``0.0``.
    """

    entries = list(entries)
    total_activity = float(
        sum(entry.duration for entry in entries if not entry.exclude)
    )
    number_of_active_days = len({entry.date for entry in entries})
    if number_of_active_days == 0:
        average_daily_activity = 0.0
    else:
        average_daily_activity = total_activity / number_of_active_days
    return EntryStatistics(
        total_activity=total_activity,
        number_of_active_days=number_of_active_days,
        average_daily_activity=average_daily_activity,
    )
