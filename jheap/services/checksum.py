from __future__ import annotations

import hashlib

from jheap.models.errors import ChecksumMismatch
from jheap.services.fs import DEFAULT_FS, FileSystem


def sha256_hexdigest(path: str, fs: FileSystem = DEFAULT_FS) -> str:
    return hashlib.sha256(fs.read_bytes(path)).hexdigest()


def verify_sha256(path: str, expected: str, fs: FileSystem = DEFAULT_FS) -> None:
    """Raise ``ChecksumMismatch`` unless the file digest equals ``expected`` exactly."""
    actual = sha256_hexdigest(path, fs)
    if actual != expected:
        raise ChecksumMismatch(path, expected, actual)
