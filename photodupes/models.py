"""
Data models for Photo Duplicate Finder.

Contains dataclasses for representing fingerprinted files, hash groups
and the aggregate figures reported at the end of a scan.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
import os


def format_size(size_bytes: int) -> str:
    """Format file size in human-readable form."""
    for unit in ['B', 'KB', 'MB', 'GB']:
        if size_bytes < 1024:
            return f"{size_bytes:.1f} {unit}"
        size_bytes /= 1024
    return f"{size_bytes:.1f} TB"


@dataclass(frozen=True)
class FileRecord:
    """
    One successfully fingerprinted file.

    Attributes:
        full_path: Resolved absolute path to the file
        size_bytes: Size in bytes at scan time
        content_hash: SHA-256 hex digest of the full file content
        last_modified: Modification time from filesystem metadata
        created: Creation time (birth time where available, else ctime)
    """
    full_path: str
    size_bytes: int
    content_hash: str
    last_modified: datetime
    created: datetime

    @property
    def file_name(self) -> str:
        """Return just the filename portion of the path."""
        return os.path.basename(self.full_path)

    @property
    def directory(self) -> str:
        """Return the directory containing this file."""
        return os.path.dirname(self.full_path)

    @property
    def size_kb(self) -> float:
        return round(self.size_bytes / 1024, 2)

    @property
    def size_mb(self) -> float:
        return round(self.size_bytes / (1024 * 1024), 2)

    @property
    def size_formatted(self) -> str:
        """Return human-readable file size."""
        return format_size(self.size_bytes)


@dataclass
class HashGroup:
    """
    All files sharing one content hash.

    Attributes:
        content_hash: The shared SHA-256 digest
        records: Member records in first-seen order
    """
    content_hash: str
    records: tuple = field(default_factory=tuple)

    @property
    def member_count(self) -> int:
        """Number of files in this group."""
        return len(self.records)

    @property
    def is_duplicate(self) -> bool:
        return self.member_count >= 2

    @property
    def size_bytes(self) -> int:
        """Size of one member (identical content implies identical size)."""
        if not self.records:
            return 0
        return self.records[0].size_bytes

    @property
    def wasted_bytes(self) -> int:
        """Bytes held by redundant copies, excluding one canonical copy."""
        if not self.records:
            return 0
        return (self.member_count - 1) * self.size_bytes


@dataclass
class ScanSummary:
    """Aggregate figures for one scan."""
    files_discovered: int = 0
    files_processed: int = 0
    files_skipped: int = 0
    unique_count: int = 0
    duplicate_group_count: int = 0
    total_duplicate_files: int = 0
    wasted_bytes: int = 0

    @property
    def wasted_mb(self) -> float:
        return round(self.wasted_bytes / (1024 * 1024), 2)

    @classmethod
    def from_groups(
        cls,
        groups: list,
        discovered: Optional[int] = None,
        skipped: int = 0,
    ) -> 'ScanSummary':
        """
        Build a summary from the full list of hash groups.

        Args:
            groups: All HashGroup objects (unique and duplicate)
            discovered: Number of files enumerated before fingerprinting
                (defaults to the number of processed files)
            skipped: Number of files that could not be fingerprinted
        """
        processed = sum(g.member_count for g in groups)
        duplicate_groups = [g for g in groups if g.is_duplicate]
        return cls(
            files_discovered=processed + skipped if discovered is None else discovered,
            files_processed=processed,
            files_skipped=skipped,
            unique_count=sum(1 for g in groups if g.member_count == 1),
            duplicate_group_count=len(duplicate_groups),
            total_duplicate_files=sum(g.member_count - 1 for g in duplicate_groups),
            wasted_bytes=sum(g.wasted_bytes for g in duplicate_groups),
        )


STATUS_DUPLICATE = "DUPLICATE"
STATUS_UNIQUE = "UNIQUE"


@dataclass(frozen=True)
class ReportRow:
    """One line of the full listing and of the CSV export."""
    status: str  # "DUPLICATE" or "UNIQUE"
    duplicate_count: int  # member count of the file's hash group
    record: FileRecord

    @property
    def is_duplicate(self) -> bool:
        return self.status == STATUS_DUPLICATE


def build_report_rows(records: list, groups: list) -> list:
    """
    Build one ReportRow per record, duplicates first.

    Args:
        records: FileRecord objects in discovery order
        groups: HashGroup objects for the same records

    Returns:
        List of ReportRow; ties keep discovery order
    """
    counts = {g.content_hash: g.member_count for g in groups}
    rows = []
    for record in records:
        count = counts.get(record.content_hash, 1)
        status = STATUS_DUPLICATE if count > 1 else STATUS_UNIQUE
        rows.append(ReportRow(status=status, duplicate_count=count, record=record))
    # sorted() is stable, so discovery order survives within each status
    return sorted(rows, key=lambda row: not row.is_duplicate)
