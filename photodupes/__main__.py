"""
Allow running the package with: python -m photodupes

Examples:
    python -m photodupes --path /path/to/photos
    python -m photodupes --path /path/to/photos --show-duplicates-only
"""

import sys

from .cli import main


if __name__ == '__main__':
    sys.exit(main())
