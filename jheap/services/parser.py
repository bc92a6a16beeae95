from __future__ import annotations

import logging
import re

from jheap.models.enums import UNIT_FROM_CHAR
from jheap.models.errors import MalformedMemorySize

logger = logging.getLogger(__name__)

# Whole number, optionally written with a zero fraction ("512.0").
_INTEGER_LITERAL = re.compile(r"([0-9]+)(?:\.0+)?")


def parse_memory_size(raw: str) -> int:
    """Convert a size such as ``512m`` or ``2G`` into an exact byte count.

    The literal ``"0"`` is accepted without a unit. Anything else must be a
    whole number followed by one of ``b``, ``k``, ``m`` or ``g`` (any case).
    """
    if not isinstance(raw, str):
        raise MalformedMemorySize(f"Invalid memory size {raw!r}")
    if raw == "0":
        return 0
    if len(raw) < 2:
        raise MalformedMemorySize(f"Invalid memory size '{raw}'")

    value, unit_char = raw[:-1], raw[-1]
    match = _INTEGER_LITERAL.fullmatch(value)
    if match is None:
        raise MalformedMemorySize(f"Invalid memory size '{raw}'")

    unit = UNIT_FROM_CHAR.get(unit_char.lower())
    if unit is None:
        raise MalformedMemorySize(f"Invalid unit '{unit_char}' in memory size '{raw}'")

    try:
        magnitude = int(match.group(1))
    except ValueError as exc:
        raise MalformedMemorySize(f"Invalid memory size '{raw[:32]}...': {exc}") from exc

    num_bytes = magnitude * unit.value
    logger.debug("Parsed memory size %r as %d bytes", raw, num_bytes)
    return num_bytes
