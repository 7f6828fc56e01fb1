"""
File discovery module for the scanner package.

Provides functionality to find photo files under a directory tree by
matching their base names against a set of glob patterns.
"""

from __future__ import annotations

import fnmatch
import logging
import os
from pathlib import Path
from typing import Iterable

from ..config import GLOB_CHARS

logger = logging.getLogger(__name__)


def normalize_patterns(extensions: Iterable[str]) -> frozenset[str]:
    """
    Turn user supplied extensions into lower-case glob patterns.

    Args:
        extensions: Entries such as 'jpg', '.jpg' or '*.jpg'

    Returns:
        Frozen set of glob patterns (empty entries are dropped)

    Examples:
        >>> sorted(normalize_patterns(['jpg', '.PNG', 'IMG_*.cr2', '']))
        ['*.jpg', '*.png', 'img_*.cr2']
    """
    patterns = set()
    for entry in extensions:
        entry = entry.strip().lower()
        if not entry:
            continue
        if GLOB_CHARS.intersection(entry):
            patterns.add(entry)
        else:
            patterns.add('*.' + entry.lstrip('.'))
    return frozenset(patterns)


def matches_any(filename: str, patterns: Iterable[str]) -> bool:
    """Check a base name against the patterns, ignoring case."""
    name = filename.lower()
    return any(fnmatch.fnmatchcase(name, pattern) for pattern in patterns)


def _log_walk_error(error: OSError) -> None:
    logger.warning(f"Skipping unreadable directory {error.filename}: {error.strerror or error}")


def find_photo_files(root_path: str | Path, patterns: Iterable[str]) -> list[str]:
    """
    Find all files under root_path whose name matches any pattern.

    Args:
        root_path: Directory to search (recursively)
        patterns: Glob patterns as produced by normalize_patterns

    Returns:
        List of resolved absolute file paths as strings, in a stable
        discovery order

    Raises:
        FileNotFoundError: If root_path does not exist
        NotADirectoryError: If root_path is not a directory

    Notes:
        - Directories that cannot be listed are skipped with a warning
        - Each file is returned once even when it matches several patterns
          or is reachable through a symlink and its target
        - Broken symlinks and non-regular files are ignored
    """
    root = Path(root_path)
    if not root.exists():
        raise FileNotFoundError(f"Directory not found: {root}")
    if not root.is_dir():
        raise NotADirectoryError(f"Path is not a directory: {root}")

    patterns = [p.lower() for p in patterns]
    if not patterns:
        return []

    files = []
    seen = set()  # Track resolved paths to avoid duplicates

    for dirpath, dirnames, filenames in os.walk(root.resolve(), onerror=_log_walk_error):
        # Sort in place so the walk descends in a reproducible order
        dirnames.sort()
        for filename in sorted(filenames):
            if not matches_any(filename, patterns):
                continue
            filepath = Path(dirpath) / filename
            if not filepath.is_file():
                continue
            resolved = str(filepath.resolve())
            if resolved not in seen:
                seen.add(resolved)
                files.append(resolved)

    logger.debug(f"Discovered {len(files):,} matching files under {root}")
    return files


__all__ = ['normalize_patterns', 'matches_any', 'find_photo_files']
