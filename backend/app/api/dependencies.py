"""Shared API dependencies."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from fastapi.templating import Jinja2Templates

from ..config import Settings, load_settings
from ..domain.entries import (
    EntriesRepository,
    InMemoryEntriesRepository,
    StaticActivityCatalog,
    sample_entries,
)
from ..domain.entries.activities import ActivitiesLookup
from ..infra.logging import get_logger

__all__ = [
    "TEMPLATES_DIR",
    "get_activities",
    "get_entries_repository",
    "get_settings",
    "get_templates",
]

logger = get_logger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"


def get_settings() -> Settings:
    """Return the active settings profile."""

    return load_settings()


@lru_cache()
def _entries_repository_singleton() -> EntriesRepository:
    settings = load_settings()
    seed = sample_entries() if settings.entries.seed_sample_data else None
    repository = InMemoryEntriesRepository(seed=seed)
    logger.info(
        "entries_repository_ready",
        extra={"seeded": seed is not None, "environment": settings.environment},
    )
    return repository


def get_entries_repository() -> EntriesRepository:
    """Return the process-wide entries repository instance."""

    return _entries_repository_singleton()


@lru_cache()
def _activities_singleton() -> StaticActivityCatalog:
    settings = load_settings()
    return StaticActivityCatalog.from_config(settings.entries.activities)


def get_activities() -> ActivitiesLookup:
    """Return the read-only activities lookup."""

    return _activities_singleton()


@lru_cache()
def get_templates() -> Jinja2Templates:
    """Return the shared Jinja2 template renderer."""

    return Jinja2Templates(directory=str(TEMPLATES_DIR))
