"""
Utilities package for the Photo Duplicate Finder.

Provides:
- formatters: Human-readable formatting for numbers, timestamps, and file sizes
- validators: Input validation
- exporters: Export scan results to CSV
"""

from __future__ import annotations

from . import formatters
from . import validators
from . import exporters

from .formatters import format_number, format_path, format_size_mb, format_timestamp, format_size
from .validators import validate_directory, validate_workers
from .exporters import CSV_COLUMNS, write_csv, export_csv

__all__ = [
    # Submodules
    'formatters',
    'validators',
    'exporters',
    # Formatters
    'format_number',
    'format_path',
    'format_size_mb',
    'format_timestamp',
    'format_size',
    # Validators
    'validate_directory',
    'validate_workers',
    # Exporters
    'CSV_COLUMNS',
    'write_csv',
    'export_csv',
]
