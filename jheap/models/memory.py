from __future__ import annotations

from dataclasses import dataclass

from jheap.models.enums import Unit


@dataclass(slots=True, frozen=True)
class MinifiedSize:
    value: int
    unit: Unit

    @property
    def num_bytes(self) -> int:
        return self.value * self.unit.value

    def __str__(self) -> str:
        return f"{self.value}{self.unit.symbol}"
