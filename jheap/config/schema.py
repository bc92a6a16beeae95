from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from jheap.models.errors import InvalidHeapRatio
from jheap.services.heap import HEAP_RATIO, validate_heap_ratio


@dataclass(slots=True)
class AppConfig:
    heap_ratio: float = HEAP_RATIO
    memory_limit_env: str = "MEMORY_LIMIT"

    def to_dict(self) -> dict[str, Any]:
        return {
            "heapRatio": self.heap_ratio,
            "memoryLimitEnv": self.memory_limit_env,
        }


def _parse_heap_ratio(value: Any) -> float:
    # JSON numbers only; "0.5" is rejected rather than coerced.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidHeapRatio(f"heapRatio must be a number, got {value!r}")
    validate_heap_ratio(value)
    return value


def _parse_memory_limit_env(value: Any) -> str:
    if not isinstance(value, str) or not value:
        raise ValueError(f"memoryLimitEnv must be a non-empty string, got {value!r}")
    return value


def from_dict(data: dict[str, Any], defaults: AppConfig) -> AppConfig:
    return AppConfig(
        heap_ratio=_parse_heap_ratio(data.get("heapRatio", defaults.heap_ratio)),
        memory_limit_env=_parse_memory_limit_env(data.get("memoryLimitEnv", defaults.memory_limit_env)),
    )
