from __future__ import annotations

import logging
import math
from decimal import Decimal
from fractions import Fraction
from numbers import Real

from jheap.models.errors import InvalidHeapRatio

logger = logging.getLogger(__name__)

HEAP_RATIO = 0.75


def validate_heap_ratio(ratio: Real | Decimal) -> Fraction:
    """Return ``ratio`` as an exact fraction, rejecting anything outside (0, 1]."""
    if isinstance(ratio, bool) or not isinstance(ratio, (Real, Decimal)):
        raise InvalidHeapRatio(f"Invalid heap ratio {ratio!r}")
    if isinstance(ratio, (float, Decimal)) and not math.isfinite(ratio):
        raise InvalidHeapRatio(f"Invalid heap ratio {ratio!r}")

    # Floats are read as the decimal they print as, so 0.3 is exactly 3/10.
    exact = Fraction(repr(ratio)) if isinstance(ratio, float) else Fraction(ratio)
    if exact > 1:
        raise InvalidHeapRatio(f"Heap ratio {ratio} could not be greater than 100%")
    if exact <= 0:
        raise InvalidHeapRatio(f"Heap ratio {ratio} must be greater than 0%")
    return exact


def calculate_heap_bytes(total_bytes: int, ratio: Real | Decimal) -> Fraction:
    heap_bytes = total_bytes * validate_heap_ratio(ratio)
    logger.debug("Heap is %s of %d bytes: %s bytes", ratio, total_bytes, heap_bytes)
    return heap_bytes
