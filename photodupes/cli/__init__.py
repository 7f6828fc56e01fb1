"""
CLI package for the Photo Duplicate Finder.

Provides the command-line interface for scanning a directory tree for
duplicate photos and reporting or exporting the results.

Public API:
- main: Entry point for CLI execution
- CLIOrchestrator: CLI workflow orchestration class
"""

from __future__ import annotations

import logging

from .orchestrator import CLIOrchestrator, setup_logging
from .arg_parser import create_parser, parse_arguments
from .reporting import (
    print_summary,
    print_full_listing,
    print_duplicates_only,
    print_no_files_found,
)


def main(argv=None) -> int:
    """
    Main entry point for the CLI.

    Delegates to CLIOrchestrator to execute the complete workflow.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    orchestrator = CLIOrchestrator()
    try:
        return orchestrator.run(argv)
    except Exception:
        logging.getLogger(__name__).exception("Unexpected error during scan")
        return 1


__all__ = [
    # Main entry point
    'main',
    # Core classes
    'CLIOrchestrator',
    # Utilities
    'setup_logging',
    'create_parser',
    'parse_arguments',
    'print_summary',
    'print_full_listing',
    'print_duplicates_only',
    'print_no_files_found',
]
