"""
Hashing module for the scanner package.

Provides the content hash calculation and the per-file fingerprint that
turns a path into a FileRecord.
"""

from __future__ import annotations

import hashlib
import os
from datetime import datetime
from pathlib import Path

from ..config import HASH_ALGORITHM, HASH_CHUNK_SIZE
from ..models import FileRecord


class FingerprintError(Exception):
    """A file could not be read or hashed."""

    def __init__(self, path: str | Path, cause: BaseException):
        self.path = str(path)
        self.cause = cause
        super().__init__(f"Cannot fingerprint {self.path}: {cause}")


def calculate_file_hash(filepath: str | Path, algorithm: str = HASH_ALGORITHM) -> str:
    """
    Calculate cryptographic hash of a file.

    Args:
        filepath: Path to the file
        algorithm: Hash algorithm to use (default: sha256)

    Returns:
        Hex digest of the full file content

    Raises:
        OSError: If the file cannot be read
    """
    hasher = hashlib.new(algorithm)
    with open(filepath, 'rb') as f:
        for chunk in iter(lambda: f.read(HASH_CHUNK_SIZE), b''):
            hasher.update(chunk)
    return hasher.hexdigest()


def _creation_time(stat_result: os.stat_result) -> datetime:
    # st_birthtime exists on macOS/BSD; elsewhere ctime is the closest we have
    timestamp = getattr(stat_result, 'st_birthtime', stat_result.st_ctime)
    return datetime.fromtimestamp(timestamp)


def fingerprint_file(filepath: str | Path) -> FileRecord:
    """
    Read metadata and hash the content of one file.

    Metadata is captured once, before hashing, and not re-read.

    Args:
        filepath: Path to the file

    Returns:
        FileRecord for the file

    Raises:
        FingerprintError: If the file cannot be stat'ed or read
    """
    path = os.path.abspath(filepath)
    try:
        stat_result = os.stat(path)
        content_hash = calculate_file_hash(path)
    except OSError as e:
        raise FingerprintError(path, e) from e

    return FileRecord(
        full_path=path,
        size_bytes=stat_result.st_size,
        content_hash=content_hash,
        last_modified=datetime.fromtimestamp(stat_result.st_mtime),
        created=_creation_time(stat_result),
    )


__all__ = [
    'FingerprintError',
    'calculate_file_hash',
    'fingerprint_file',
]
