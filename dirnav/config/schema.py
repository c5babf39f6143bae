from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

DELETE_BINDINGS: tuple[str, ...] = ("d", "ctrl+delete", "both")

_LOG_LEVELS = frozenset(logging.getLevelNamesMapping())


@dataclass(slots=True)
class AppConfig:
    start_path: str | None = None
    poll_interval: float = 0.5
    notice_timeout: float = 1.0
    log_file: str = "~/.local/state/dirnav/dirnav.log"
    log_level: str = "INFO"
    delete_binding: str = "both"

    def to_dict(self) -> dict[str, Any]:
        return {
            "startPath": self.start_path,
            "pollInterval": self.poll_interval,
            "noticeTimeout": self.notice_timeout,
            "logFile": self.log_file,
            "logLevel": self.log_level,
            "deleteBinding": self.delete_binding,
        }


def _parse_log_level(value: Any, default: str) -> str:
    level = str(value).upper()
    return level if level in _LOG_LEVELS else default


def _parse_delete_binding(value: Any) -> str:
    binding = str(value).lower()
    return binding if binding in DELETE_BINDINGS else "both"


def from_dict(data: dict[str, Any], defaults: AppConfig) -> AppConfig:
    start_path_raw = data.get("startPath", defaults.start_path)

    return AppConfig(
        start_path=str(start_path_raw) if start_path_raw is not None else None,
        poll_interval=max(0.05, float(data.get("pollInterval", defaults.poll_interval))),
        notice_timeout=max(0.1, float(data.get("noticeTimeout", defaults.notice_timeout))),
        log_file=str(data.get("logFile", defaults.log_file)),
        log_level=_parse_log_level(data.get("logLevel", defaults.log_level), defaults.log_level),
        delete_binding=_parse_delete_binding(data.get("deleteBinding", defaults.delete_binding)),
    )
