"""
Report formatting and display for the CLI interface.

Provides functions to print scan results in a human-readable format.
"""

from __future__ import annotations

from ..config import REPORT_WIDTH
from ..models import HashGroup, ReportRow, ScanSummary, format_size
from ..utils.formatters import (
    format_number,
    format_path,
    format_size_mb,
    format_timestamp,
)


def _print_section_header(title: str) -> None:
    """Print a section header with divider lines."""
    print("\n" + "-" * REPORT_WIDTH)
    print(title)
    print("-" * REPORT_WIDTH)


def _format_row(row: ReportRow) -> str:
    record = row.record
    return (f"[{row.status} x{row.duplicate_count}] {format_path(record.full_path)}\n"
            f"         {record.size_formatted} | "
            f"modified {format_timestamp(record.last_modified)}")


def print_summary(summary: ScanSummary) -> None:
    """
    Print the scan summary block.

    Notes:
        - Skipped files are only listed when there were any
        - Wasted space is shown in MB (2 decimals) and in adaptive units
    """
    print("\n" + "=" * REPORT_WIDTH)
    print("PHOTO DUPLICATE REPORT")
    print("=" * REPORT_WIDTH)

    print(f"\nFiles discovered:       {format_number(summary.files_discovered)}")
    print(f"Files processed:        {format_number(summary.files_processed)}")
    if summary.files_skipped:
        print(f"Files skipped:          {format_number(summary.files_skipped)} (unreadable)")
    print(f"Unique files:           {format_number(summary.unique_count)}")
    print(f"Duplicate groups:       {format_number(summary.duplicate_group_count)}")
    print(f"Duplicate files:        {format_number(summary.total_duplicate_files)}")
    print(f"Wasted space:           {format_size_mb(summary.wasted_bytes)} "
          f"({format_size(summary.wasted_bytes)})")


def print_full_listing(rows: list[ReportRow]) -> None:
    """Print one entry per file, duplicates first."""
    _print_section_header(f"ALL FILES ({format_number(len(rows))})")
    for row in rows:
        print(_format_row(row))


def print_duplicates_only(duplicate_groups: list[HashGroup]) -> None:
    """
    Print each duplicate group with its members.

    Args:
        duplicate_groups: Groups with two or more members, first-seen order
    """
    _print_section_header("DUPLICATE GROUPS")

    if not duplicate_groups:
        print("\nNo duplicate files found.")
        return

    for i, group in enumerate(duplicate_groups, 1):
        print(f"\nGroup {i} ({group.member_count} files, "
              f"{format_size(group.size_bytes)} each):")
        print(f"  Hash: {group.content_hash}")
        for record in group.records:
            print(f"  {format_path(record.full_path)}")
            print(f"      modified {format_timestamp(record.last_modified)}")


def print_no_files_found(root, patterns) -> None:
    """Print the message shown when discovery returns nothing."""
    pattern_text = ", ".join(sorted(patterns)) if patterns else "(none)"
    print(f"\nNo files found in {format_path(root)} matching: {pattern_text}")


__all__ = [
    'print_summary',
    'print_full_listing',
    'print_duplicates_only',
    'print_no_files_found',
]
