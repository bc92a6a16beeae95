from __future__ import annotations

import logging
from decimal import Decimal
from numbers import Real

from result import Err, Ok, Result

from jheap.models.errors import HeapSizeError, NegativeMemoryLimit
from jheap.services.heap import HEAP_RATIO, calculate_heap_bytes
from jheap.services.parser import parse_memory_size
from jheap.services.serializer import minify_memory_size

logger = logging.getLogger(__name__)

TMPDIR_PROPERTY = "-Djava.io.tmpdir=$TMPDIR"
VIRTUALIZED_TUNING = "-Xtune:virtualized"
# Enables every TLS protocol when SSLContext.getInstance("TLS") is called.
TLS_OVERRIDE = "-Dcom.ibm.jsse2.overrideDefaultTLS=true"
SHARED_CLASSES_OFF = "-Xshareclasses:none"


def build_heap_options(memory_limit: str | None, ratio: Real | Decimal = HEAP_RATIO) -> list[str]:
    """Return ``["-Xmx<size>"]`` for the given limit, or ``[]`` when no limit is known."""
    if memory_limit is None:
        logger.debug("No memory limit set, leaving heap size to the JVM")
        return []

    total_bytes = parse_memory_size(memory_limit)
    if total_bytes < 0:
        raise NegativeMemoryLimit(f"Invalid negative memory limit {memory_limit}")

    heap_size = minify_memory_size(calculate_heap_bytes(total_bytes, ratio))
    return [f"-Xmx{heap_size}"]


def try_build_heap_options(
    memory_limit: str | None, ratio: Real | Decimal = HEAP_RATIO
) -> Result[list[str], HeapSizeError]:
    try:
        return Ok(build_heap_options(memory_limit, ratio))
    except HeapSizeError as exc:
        return Err(exc)


def with_release_opts(heap_opts: list[str]) -> list[str]:
    """Place heap options among the fixed options the JRE is always started with."""
    return [TMPDIR_PROPERTY, VIRTUALIZED_TUNING, *heap_opts, TLS_OVERRIDE, SHARED_CLASSES_OFF]


def build_java_opts(memory_limit: str | None, ratio: Real | Decimal = HEAP_RATIO) -> list[str]:
    return with_release_opts(build_heap_options(memory_limit, ratio))
