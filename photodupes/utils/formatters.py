"""
Formatting utilities for the Photo Duplicate Finder.

Provides human-readable formatting for numbers, timestamps, and file sizes.
"""

from __future__ import annotations

import os
from datetime import datetime

from ..config import TIMESTAMP_FORMAT
# Re-export format_size from models for convenience
from ..models import format_size


def format_number(n: int) -> str:
    """
    Format large numbers with commas for readability.

    Examples:
        >>> format_number(1000)
        '1,000'
        >>> format_number(1234567)
        '1,234,567'
    """
    return f"{n:,}"


def format_size_mb(size_bytes: int) -> str:
    """
    Format a byte count as megabytes with two decimals.

    Examples:
        >>> format_size_mb(1572864)
        '1.50 MB'
        >>> format_size_mb(0)
        '0.00 MB'
    """
    return f"{size_bytes / (1024 * 1024):.2f} MB"


def format_path(path) -> str:
    """
    Render a path as valid UTF-8 text.

    Names that are not valid UTF-8 on disk come back from os.walk with
    surrogate escapes; those bytes are shown as U+FFFD so console and
    CSV output never fail to encode.
    """
    return os.fsencode(path).decode('utf-8', 'replace')


def format_timestamp(value: datetime) -> str:
    """Format a timestamp for listings and exports."""
    return value.strftime(TIMESTAMP_FORMAT)


__all__ = ['format_number', 'format_path', 'format_size_mb', 'format_timestamp', 'format_size']
