"""
Input validation for the Photo Duplicate Finder.

Validators return (is_valid, error_message) tuples so callers decide how
to report a failure.
"""

from __future__ import annotations

import os
from pathlib import Path


def validate_directory(directory: str | Path) -> tuple[bool, str]:
    """
    Validate that a directory exists and is accessible.

    Args:
        directory: Directory path to validate

    Returns:
        Tuple of (is_valid, error_message)

    Examples:
        >>> validate_directory('/nonexistent/directory')
        (False, 'Directory not found: /nonexistent/directory')
    """
    if not directory:
        return False, "Directory path is required"

    directory = str(directory)

    if not os.path.exists(directory):
        return False, f"Directory not found: {directory}"

    if not os.path.isdir(directory):
        return False, f"Path is not a directory: {directory}"

    if not os.access(directory, os.R_OK | os.X_OK):
        return False, f"Cannot read directory (permission denied): {directory}"

    return True, ""


def validate_workers(workers) -> tuple[bool, str]:
    """
    Validate the number of hashing workers.

    Examples:
        >>> validate_workers(4)
        (True, '')
        >>> validate_workers(0)
        (False, 'Workers must be between 1 and 32')
    """
    try:
        workers = int(workers)
    except (ValueError, TypeError):
        return False, "Workers must be an integer"
    if not 1 <= workers <= 32:
        return False, "Workers must be between 1 and 32"
    return True, ""


__all__ = [
    'validate_directory',
    'validate_workers',
]
