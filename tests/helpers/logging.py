"""Test helpers for capturing structured logging output."""

from __future__ import annotations

from typing import Any, Dict, List


class RecordingLogger:
    """Logger stand-in that keeps each call's message and ``extra`` payload."""

    def __init__(self) -> None:
        self.records: List[Dict[str, Any]] = []

    def _record(self, level: str, message: str, *args: Any, **kwargs: Any) -> None:
        self.records.append(
            {
                "level": level,
                "message": message,
                "args": args,
                "extra": dict(kwargs.get("extra") or {}),
            }
        )

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._record("debug", message, *args, **kwargs)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._record("info", message, *args, **kwargs)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._record("warning", message, *args, **kwargs)

    def messages(self, level: str | None = None) -> List[str]:
        return [
            record["message"]
            for record in self.records
            if level is None or record["level"] == level
        ]


def find_log(records: List[Dict[str, Any]], *, message: str) -> Dict[str, Any]:
    for record in records:
        if record["message"] == message:
            return record
    raise AssertionError(f"Log '{message}' not recorded")
