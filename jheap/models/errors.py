from __future__ import annotations


class HeapSizeError(ValueError):
    """Base class for every failure raised while computing JVM memory options."""


class MalformedMemorySize(HeapSizeError):
    pass


class NegativeMemoryLimit(HeapSizeError):
    pass


class InvalidHeapRatio(HeapSizeError):
    pass


class ChecksumMismatch(HeapSizeError):
    def __init__(self, path: str, expected: str, actual: str) -> None:
        super().__init__(f"sha256 checksum mismatch for {path}: expected {expected}, got {actual}")
        self.path = path
        self.expected = expected
        self.actual = actual
