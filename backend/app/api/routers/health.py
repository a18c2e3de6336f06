"""System health endpoint."""

from typing import Any

from fastapi import APIRouter, Depends

from ...api.dependencies import get_entries_repository, get_settings
from ...config import Settings
from ...domain.entries import EntriesRepository

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/healthz")
def healthcheck(
    settings: Settings = Depends(get_settings),
    repository: EntriesRepository = Depends(get_entries_repository),
) -> dict[str, Any]:
    """Return coarse-grained backend readiness information."""

    return {
        "status": "ok",
        "environment": settings.environment,
        "entryStore": "in_memory",
        "entries": len(repository.get_entries()),
    }
