from __future__ import annotations

from enum import Enum


class Unit(int, Enum):
    BYTE = 1
    KILO = 1024
    MEGA = 1024**2
    GIGA = 1024**3

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS: dict[Unit, str] = {
    Unit.BYTE: "B",
    Unit.KILO: "K",
    Unit.MEGA: "M",
    Unit.GIGA: "G",
}

UNIT_FROM_CHAR: dict[str, Unit] = {symbol.lower(): unit for unit, symbol in _SYMBOLS.items()}
