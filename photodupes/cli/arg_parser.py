"""
Argument parsing for the CLI interface.

Provides functions to create and configure the argument parser for the
photo duplicate finder command-line interface.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from ..config import DEFAULT_EXTENSIONS


def create_parser() -> argparse.ArgumentParser:
    """
    Create and configure the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance

    Notes:
        --extensions and --workers default to None so the orchestrator can
        fall back to the user configuration.
    """
    parser = argparse.ArgumentParser(
        description='Find duplicate photos by content hash',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s --path /path/to/photos
      Scan a photo library and list every file, duplicates first

  %(prog)s --path /path/to/photos --show-duplicates-only
      Only show groups of identical files

  %(prog)s --path /path/to/photos --extensions jpg,cr2 --output-file report.csv
      Scan JPEG and Canon RAW files and export a full CSV report

  %(prog)s --extensions "IMG_*.jpg"
      Glob patterns are matched against file names (case-insensitive)
        """
    )

    parser.add_argument(
        '-p', '--path',
        type=Path,
        default=Path('.'),
        help='Directory to scan recursively. Default: current directory'
    )

    parser.add_argument(
        '-x', '--extensions',
        type=str,
        default=None,
        help=('Comma-separated extensions or glob patterns. '
              f'Default: {",".join(DEFAULT_EXTENSIONS)}')
    )

    parser.add_argument(
        '-o', '--output-file',
        type=Path,
        default=None,
        help='Write a CSV report of every file to this path (overwritten)'
    )

    parser.add_argument(
        '-d', '--show-duplicates-only',
        action='store_true',
        help='Only list duplicate groups on the console'
    )

    # Performance options
    parser.add_argument(
        '-w', '--workers',
        type=int,
        default=None,
        help='Number of parallel hashing workers. Default: 1 (sequential)'
    )

    # Output options
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Verbose output'
    )

    parser.add_argument(
        '--no-progress',
        action='store_true',
        help='Disable progress bar (useful for piping output)'
    )

    return parser


def parse_arguments(argv=None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        argv: List of argument strings (default: sys.argv)

    Returns:
        Parsed arguments as Namespace object

    Examples:
        >>> args = parse_arguments(['--path', '/photos', '--show-duplicates-only'])
        >>> args.path
        PosixPath('/photos')
        >>> args.show_duplicates_only
        True
    """
    parser = create_parser()
    return parser.parse_args(argv)


__all__ = [
    'create_parser',
    'parse_arguments',
]
