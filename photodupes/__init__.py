"""
Photo Duplicate Finder
======================
Finds byte-identical photos anywhere under a directory tree.

Features:
- Recursive discovery by extension or glob pattern
- SHA-256 content fingerprints
- Duplicate groups with wasted-space figures
- Console report and full CSV export
- Optional parallel hashing
"""

__version__ = "1.0.0"

from .models import FileRecord, HashGroup, ScanSummary, ReportRow, build_report_rows
from .config import DEFAULT_EXTENSIONS
from .scanner import (
    normalize_patterns,
    find_photo_files,
    calculate_file_hash,
    fingerprint_file,
    fingerprint_files,
    FingerprintError,
    ScanStats,
    group_by_hash,
    find_duplicate_groups,
    summarize_groups,
)

__all__ = [
    "FileRecord",
    "HashGroup",
    "ScanSummary",
    "ReportRow",
    "build_report_rows",
    "DEFAULT_EXTENSIONS",
    "normalize_patterns",
    "find_photo_files",
    "calculate_file_hash",
    "fingerprint_file",
    "fingerprint_files",
    "FingerprintError",
    "ScanStats",
    "group_by_hash",
    "find_duplicate_groups",
    "summarize_groups",
]
