"""
Deduplication module for the scanner package.

Groups fingerprinted files by content hash and derives the duplicate
figures used in reports.
"""

from __future__ import annotations

from typing import Iterable, Optional

from ..models import FileRecord, HashGroup, ScanSummary


def group_by_hash(records: Iterable[FileRecord]) -> list[HashGroup]:
    """
    Group records by exact content hash.

    Args:
        records: FileRecord objects in discovery order

    Returns:
        One HashGroup per distinct hash, ordered by the first time each
        hash was seen; members keep their input order
    """
    # dicts keep insertion order, which gives first-seen grouping for free
    hash_groups: dict[str, list[FileRecord]] = {}
    for record in records:
        hash_groups.setdefault(record.content_hash, []).append(record)

    return [
        HashGroup(content_hash=content_hash, records=tuple(members))
        for content_hash, members in hash_groups.items()
    ]


def find_duplicate_groups(groups: list[HashGroup]) -> list[HashGroup]:
    """Return only the groups with two or more members, order preserved."""
    return [group for group in groups if group.is_duplicate]


def summarize_groups(
    groups: list[HashGroup],
    discovered: Optional[int] = None,
    skipped: int = 0,
) -> ScanSummary:
    """
    Calculate statistics for hash groups.

    Args:
        groups: All hash groups from group_by_hash
        discovered: Number of files found before fingerprinting
        skipped: Number of files that failed to fingerprint

    Returns:
        ScanSummary with unique, duplicate and wasted-space figures
    """
    return ScanSummary.from_groups(groups, discovered=discovered, skipped=skipped)


__all__ = [
    'group_by_hash',
    'find_duplicate_groups',
    'summarize_groups',
]
