"""Config package exporting loader helpers."""

from .loader import DEFAULT_ACTIVITIES, Settings, load_settings

__all__ = ["Settings", "load_settings", "DEFAULT_ACTIVITIES"]
