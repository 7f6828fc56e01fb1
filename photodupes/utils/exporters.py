"""
Export functionality for the Photo Duplicate Finder.

Writes the complete per-file report to CSV. The export always covers
every fingerprinted file, whatever the console display mode.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import TextIO

from ..models import ReportRow
from .formatters import format_path, format_timestamp

CSV_COLUMNS = [
    'Status',
    'DuplicateCount',
    'FileName',
    'Directory',
    'FullPath',
    'SizeBytes',
    'SizeKB',
    'SizeMB',
    'Hash',
    'LastModified',
    'Created',
]


def _row_values(row: ReportRow) -> list:
    record = row.record
    return [
        row.status,
        row.duplicate_count,
        format_path(record.file_name),
        format_path(record.directory),
        format_path(record.full_path),
        record.size_bytes,
        f"{record.size_kb:.2f}",
        f"{record.size_mb:.2f}",
        record.content_hash,
        format_timestamp(record.last_modified),
        format_timestamp(record.created),
    ]


def write_csv(rows: list[ReportRow], file_handle: TextIO) -> int:
    """
    Write report rows as CSV to an open file handle.

    Args:
        rows: Rows from build_report_rows
        file_handle: Text handle opened with newline=''

    Returns:
        Number of data rows written (header excluded)
    """
    writer = csv.writer(file_handle)
    writer.writerow(CSV_COLUMNS)
    count = 0
    for row in rows:
        writer.writerow(_row_values(row))
        count += 1
    return count


def export_csv(rows: list[ReportRow], output_path: str | Path) -> int:
    """
    Export the full report to a CSV file.

    Any existing file at output_path is overwritten.

    Args:
        rows: Rows from build_report_rows
        output_path: Path to output file

    Returns:
        Number of data rows written

    Raises:
        OSError: If file cannot be written
    """
    with open(output_path, 'w', encoding='utf-8', newline='') as f:
        return write_csv(rows, f)


__all__ = ['CSV_COLUMNS', 'write_csv', 'export_csv']
