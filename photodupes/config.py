"""
Configuration constants for Photo Duplicate Finder.

This module contains the built-in defaults:
- Photo extensions scanned when none are given
- Hashing and worker settings
- Timestamp formatting for reports
"""

# Default photo formats, matched case-insensitively against file names
DEFAULT_EXTENSIONS = (
    # Common formats
    'jpg', 'jpeg', 'png', 'gif', 'bmp', 'tiff', 'tif', 'webp', 'heic',
    # RAW formats
    'raw', 'cr2', 'nef', 'arw', 'dng',
)

# Characters that mark an --extensions entry as a glob rather than a bare extension
GLOB_CHARS = frozenset('*?[')

# Read size for content hashing
HASH_CHUNK_SIZE = 65536

# Hash algorithm used for content fingerprints
HASH_ALGORITHM = 'sha256'

# Default number of parallel hashing workers (1 = sequential)
DEFAULT_WORKERS = 1

# Timestamp format for console listings and CSV export
TIMESTAMP_FORMAT = '%Y-%m-%d %H:%M:%S'

# Console report width
REPORT_WIDTH = 70

# User configuration location
import os
CONFIG_DIR = os.path.join(os.path.expanduser('~'), '.photodupes')
