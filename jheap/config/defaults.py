from __future__ import annotations

from jheap.config.schema import AppConfig


def default_config() -> AppConfig:
    return AppConfig()
