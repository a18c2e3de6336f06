"""Static activity catalog backing the activity select list."""

from __future__ import annotations

from typing import Iterable, Protocol

from ...config.loader import ActivityConfig
from .types import Activity


class ActivitiesLookup(Protocol):  # pragma: no cover - interface only
    def list_activities(self) -> list[Activity]: ...

    def get(self, activity_id: int | None) -> Activity | None: ...


class StaticActivityCatalog(ActivitiesLookup):
    """Read-only list of ``{id, name}`` pairs, ordered as configured."""

    def __init__(self, activities: Iterable[Activity]) -> None:
        self._activities = tuple(activities)
        self._by_id = {activity.id: activity for activity in self._activities}

    @classmethod
    def from_config(cls, rows: Iterable[ActivityConfig]) -> "StaticActivityCatalog":
        return cls(Activity(id=row.id, name=row.name) for row in rows)

    def list_activities(self) -> list[Activity]:
        return list(self._activities)

    def get(self, activity_id: int | None) -> Activity | None:
        if activity_id is None:
            return None
        return self._by_id.get(activity_id)
