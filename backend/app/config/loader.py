"""YAML profile configuration loader for the Fitness Frog backend."""

from __future__ import annotations

import copy
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Sequence

import yaml

DEFAULT_ENVIRONMENT = "dev"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_ACTIVITIES: Sequence[dict[str, Any]] = (
    {"id": 1, "name": "Basketball"},
    {"id": 2, "name": "Biking"},
    {"id": 3, "name": "Hiking"},
    {"id": 4, "name": "Kayaking"},
    {"id": 5, "name": "Pickleball"},
    {"id": 6, "name": "Running"},
    {"id": 7, "name": "Swimming"},
    {"id": 8, "name": "Walking"},
    {"id": 9, "name": "Weight Lifting"},
    {"id": 10, "name": "Yoga"},
)
DEFAULT_PROFILE_DICT: dict[str, Any] = {
    "environment": DEFAULT_ENVIRONMENT,
    "logging": {"level": DEFAULT_LOG_LEVEL},
    "entries": {
        "seed_sample_data": False,
        "activities": list(DEFAULT_ACTIVITIES),
    },
}
CONFIG_PROFILE_ENV = "FITNESSFROG_CONFIG_PROFILE"
CONFIG_DIR_ENV = "FITNESSFROG_CONFIG_DIR"
DEFAULT_PROFILE = "dev"
DEFAULT_CONFIG_ROOT = Path(__file__).resolve().parents[3] / "config" / "profiles"
CONFIG_EXTENSIONS = (".yaml", ".yml")


@dataclass
class ActivityConfig:
    id: int
    name: str


@dataclass
class EntriesConfig:
    seed_sample_data: bool = False
    activities: List[ActivityConfig] = field(default_factory=list)


@dataclass
class Settings:
    environment: str = DEFAULT_ENVIRONMENT
    entries: EntriesConfig = field(default_factory=EntriesConfig)
    logging: dict[str, Any] = field(default_factory=dict)
    raw: dict[str, Any] = field(default_factory=dict)


def load_settings(
    profile: str | None = None, config_dir: str | Path | None = None
) -> Settings:
    """Load settings from the requested profile or fall back to defaults."""

    profile_name = profile or os.getenv(CONFIG_PROFILE_ENV, DEFAULT_PROFILE)
    config_root = Path(
        config_dir or os.getenv(CONFIG_DIR_ENV, DEFAULT_CONFIG_ROOT)
    ).expanduser()
    config_data = _load_profile_dict(profile_name, config_root)
    if not config_data:
        config_data = copy.deepcopy(DEFAULT_PROFILE_DICT)

    return Settings(
        environment=str(config_data.get("environment", DEFAULT_ENVIRONMENT)),
        entries=_build_entries_config(config_data.get("entries")),
        logging=dict(config_data.get("logging") or {"level": DEFAULT_LOG_LEVEL}),
        raw=config_data,
    )


def _load_profile_dict(profile_name: str, config_root: Path) -> dict[str, Any]:
    """Load the YAML profile if available, otherwise return an empty dict."""

    if not config_root.exists():
        return {}

    for extension in CONFIG_EXTENSIONS:
        candidate = config_root / f"{profile_name}{extension}"
        if not candidate.exists():
            continue
        try:
            with candidate.open("r", encoding="utf-8") as handle:
                loaded = yaml.safe_load(handle) or {}
        except yaml.YAMLError as exc:
            raise RuntimeError(
                f"Failed to parse config profile {candidate}: {exc}"
            ) from exc
        if not isinstance(loaded, dict):
            raise RuntimeError(
                f"Config profile {candidate} must be a mapping at the root"
            )
        return loaded

    return {}


def _build_entries_config(entries_cfg: dict[str, Any] | None) -> EntriesConfig:
    entries_cfg = entries_cfg or {}
    if not isinstance(entries_cfg, dict):
        raise RuntimeError("Config section 'entries' must be a mapping")
    activities_cfg = entries_cfg.get("activities") or list(DEFAULT_ACTIVITIES)
    if not isinstance(activities_cfg, list):
        raise RuntimeError("Config key 'entries.activities' must be a list")
    activities: List[ActivityConfig] = []
    seen_ids: set[int] = set()
    for item in activities_cfg:
        if not isinstance(item, dict):
            raise RuntimeError(f"Activity entries must be mappings: {item!r}")
        name = str(item.get("name") or "").strip()
        if "id" not in item or not name:
            raise RuntimeError(f"Activity entries need an id and a name: {item!r}")
        try:
            activity_id = int(item["id"])
        except (TypeError, ValueError) as exc:
            raise RuntimeError(
                f"Activity id must be an integer: {item['id']!r}"
            ) from exc
        if activity_id in seen_ids:
            raise RuntimeError(f"Duplicate activity id in settings: {activity_id}")
        seen_ids.add(activity_id)
        activities.append(ActivityConfig(id=activity_id, name=name))

    return EntriesConfig(
        seed_sample_data=bool(entries_cfg.get("seed_sample_data", False)),
        activities=activities,
    )
