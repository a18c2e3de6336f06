"""Sample entries seeded into the dev repository."""

from __future__ import annotations

from datetime import date

from .types import Entry


def sample_entries() -> list[Entry]:
    """Return fresh sample entries; ids are assigned by the repository."""

    return [
        Entry(date=date(2024, 1, 2), activity_id=2, duration=10),
        Entry(date=date(2024, 1, 2), activity_id=2, duration=10, exclude=True),
        Entry(date=date(2024, 1, 3), activity_id=6, duration=20, notes="Easy pace"),
        Entry(date=date(2024, 1, 5), activity_id=7, duration=45),
        Entry(
            date=date(2024, 1, 7),
            activity_id=3,
            duration=120,
            notes="Trail loop with a steep finish",
        ),
        Entry(date=date(2024, 1, 8), activity_id=10, duration=30),
    ]
