from __future__ import annotations

import hashlib

import pytest

from jheap.models.errors import ChecksumMismatch
from jheap.services.checksum import sha256_hexdigest, verify_sha256
from jheap.services.installer import render_response_file
from tests.fs_mock import MemoryFileSystem

PAYLOAD = b"#!/bin/sh\necho installing\n"
DIGEST = hashlib.sha256(PAYLOAD).hexdigest()


def test_digest_of_file_content() -> None:
    fs = MemoryFileSystem().add_file("/cache/ibm-java.bin", content=PAYLOAD)
    assert sha256_hexdigest("/cache/ibm-java.bin", fs) == DIGEST


def test_matching_digest_passes() -> None:
    fs = MemoryFileSystem().add_file("/cache/ibm-java.bin", content=PAYLOAD)
    verify_sha256("/cache/ibm-java.bin", DIGEST, fs)


def test_mismatch_raises_with_both_digests() -> None:
    fs = MemoryFileSystem().add_file("/cache/ibm-java.bin", content=b"tampered")
    with pytest.raises(ChecksumMismatch) as exc_info:
        verify_sha256("/cache/ibm-java.bin", DIGEST, fs)

    assert exc_info.value.expected == DIGEST
    assert exc_info.value.actual == hashlib.sha256(b"tampered").hexdigest()
    assert "/cache/ibm-java.bin" in str(exc_info.value)


def test_comparison_is_exact() -> None:
    fs = MemoryFileSystem().add_file("/cache/ibm-java.bin", content=PAYLOAD)
    with pytest.raises(ChecksumMismatch):
        verify_sha256("/cache/ibm-java.bin", DIGEST.upper(), fs)


def test_missing_artifact_raises_os_error() -> None:
    fs = MemoryFileSystem().add_dir("/cache")
    with pytest.raises(OSError):
        verify_sha256("/cache", DIGEST, fs)


def test_response_file() -> None:
    assert render_response_file("/app/.java/jre") == (
        "INSTALLER_UI=silent\nLICENSE_ACCEPTED=TRUE\nUSER_INSTALL_DIR=/app/.java/jre\n"
    )
