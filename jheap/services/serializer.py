from __future__ import annotations

import logging
from fractions import Fraction

from jheap.models.enums import Unit
from jheap.models.errors import NegativeMemoryLimit
from jheap.models.memory import MinifiedSize

logger = logging.getLogger(__name__)

# Largest first. KILO is the fallback and is rounded rather than tested.
EXACT_UNITS: tuple[Unit, ...] = (Unit.GIGA, Unit.MEGA)


def minify_memory_size(num_bytes: int | Fraction) -> MinifiedSize:
    """Render a byte count with the largest unit that represents it exactly.

    Values that are not a whole number of megabytes fall back to kilobytes,
    rounded to the nearest integer (half to even), so a size is always
    produced.
    """
    exact = Fraction(num_bytes)
    if exact < 0:
        raise NegativeMemoryLimit(f"Invalid negative memory size {num_bytes}")

    for unit in EXACT_UNITS:
        quotient = exact / unit.value
        if quotient.denominator == 1:
            size = MinifiedSize(int(quotient), unit)
            break
    else:
        size = MinifiedSize(round(exact / Unit.KILO.value), Unit.KILO)

    logger.debug("Minified %s bytes to %s", num_bytes, size)
    return size
