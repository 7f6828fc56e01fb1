"""
Scanner package for the Photo Duplicate Finder.

Provides the scan pipeline: discover matching files, fingerprint their
content, and group them by hash.

Public API:
- normalize_patterns: Turn extensions into glob patterns
- find_photo_files: Discover matching files in a directory tree
- calculate_file_hash: Calculate SHA-256 hash of a file
- fingerprint_file: Build a FileRecord for one file
- fingerprint_files: Fingerprint many files with progress and error isolation
- group_by_hash: Group records by content hash
- find_duplicate_groups: Keep only groups with two or more members
- summarize_groups: Derive unique/duplicate/wasted-space figures
"""

from __future__ import annotations

from .file_discovery import normalize_patterns, find_photo_files
from .hashing import (
    FingerprintError,
    calculate_file_hash,
    fingerprint_file,
)
from .parallel import ScanStats, fingerprint_files
from .deduplication import (
    group_by_hash,
    find_duplicate_groups,
    summarize_groups,
)


__all__ = [
    # File discovery
    'normalize_patterns',
    'find_photo_files',
    # Fingerprinting
    'FingerprintError',
    'calculate_file_hash',
    'fingerprint_file',
    'fingerprint_files',
    'ScanStats',
    # Grouping
    'group_by_hash',
    'find_duplicate_groups',
    'summarize_groups',
]
