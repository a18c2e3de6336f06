"""Tests for the YAML settings loader."""

from __future__ import annotations

import pytest

from backend.app.config import DEFAULT_ACTIVITIES, load_settings

pytestmark = [pytest.mark.config]


def test_load_settings_falls_back_to_defaults(monkeypatch, tmp_path):
    """Missing profiles should default to the built-in dev configuration."""

    monkeypatch.setenv("FITNESSFROG_CONFIG_PROFILE", "missing")
    monkeypatch.setenv("FITNESSFROG_CONFIG_DIR", str(tmp_path))
    settings = load_settings()

    assert settings.environment == "dev"
    assert settings.logging == {"level": "INFO"}
    assert settings.entries.seed_sample_data is False
    assert [activity.name for activity in settings.entries.activities] == [
        item["name"] for item in DEFAULT_ACTIVITIES
    ]


def test_load_settings_reads_yaml_profile(monkeypatch, tmp_path):
    """Config loader should parse YAML profiles and expose entry settings."""

    profiles_dir = tmp_path / "profiles"
    profiles_dir.mkdir()
    (profiles_dir / "staging.yml").write_text(
        """
environment: staging

logging:
  level: debug

entries:
  seed_sample_data: true
  activities:
    - {id: 3, name: Rowing}
    - {id: 1, name: "  Climbing "}
""",
        encoding="utf-8",
    )

    monkeypatch.setenv("FITNESSFROG_CONFIG_DIR", str(profiles_dir))
    settings = load_settings(profile="staging")

    assert settings.environment == "staging"
    assert settings.logging["level"] == "debug"
    assert settings.entries.seed_sample_data is True
    assert [(a.id, a.name) for a in settings.entries.activities] == [
        (3, "Rowing"),
        (1, "Climbing"),
    ]


def test_profile_without_activities_uses_default_catalog(tmp_path):
    (tmp_path / "dev.yaml").write_text("environment: test\n", encoding="utf-8")

    settings = load_settings(profile="dev", config_dir=tmp_path)

    assert settings.environment == "test"
    assert len(settings.entries.activities) == len(DEFAULT_ACTIVITIES)


def test_malformed_yaml_raises_runtime_error(tmp_path):
    (tmp_path / "dev.yaml").write_text("entries: [unclosed\n", encoding="utf-8")

    with pytest.raises(RuntimeError, match="Failed to parse config profile"):
        load_settings(profile="dev", config_dir=tmp_path)


def test_non_mapping_profile_raises_runtime_error(tmp_path):
    (tmp_path / "dev.yaml").write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(RuntimeError, match="must be a mapping"):
        load_settings(profile="dev", config_dir=tmp_path)


def test_duplicate_activity_ids_are_rejected(tmp_path):
    (tmp_path / "dev.yaml").write_text(
        """
entries:
  activities:
    - {id: 1, name: Running}
    - {id: 1, name: Jogging}
""",
        encoding="utf-8",
    )

    with pytest.raises(RuntimeError, match="Duplicate activity id"):
        load_settings(profile="dev", config_dir=tmp_path)


@pytest.mark.parametrize(
    ("body", "message"),
    [
        ("entries: [1]\n", "'entries' must be a mapping"),
        ("entries:\n  activities: Running\n", "must be a list"),
        ("entries:\n  activities:\n    - Running\n", "must be mappings"),
        (
            "entries:\n  activities:\n    - {id: abc, name: Running}\n",
            "must be an integer",
        ),
    ],
)
def test_malformed_entries_section_raises_runtime_error(tmp_path, body, message):
    (tmp_path / "dev.yaml").write_text(body, encoding="utf-8")

    with pytest.raises(RuntimeError, match=message):
        load_settings(profile="dev", config_dir=tmp_path)
