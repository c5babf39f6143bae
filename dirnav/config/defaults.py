from __future__ import annotations

from dirnav.config.schema import AppConfig


def default_config() -> AppConfig:
    return AppConfig()
