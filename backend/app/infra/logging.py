"""Logging helpers shared across the Fitness Frog backend."""

from __future__ import annotations

import logging
from typing import Any, Mapping

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
ROOT_LOGGER_NAME = "backend"


def get_logger(name: str) -> logging.Logger:
    """Return a module logger; structured fields travel via ``extra``."""

    return logging.getLogger(name)


def configure_logging(logging_cfg: Mapping[str, Any] | None = None) -> None:
    """Apply the ``logging`` section of the active settings profile."""

    logging_cfg = logging_cfg or {}
    level_name = str(logging_cfg.get("level", DEFAULT_LOG_LEVEL)).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise RuntimeError(f"Unknown log level in settings: {level_name}")

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter(str(logging_cfg.get("format", DEFAULT_LOG_FORMAT)))
        )
        root.addHandler(handler)
