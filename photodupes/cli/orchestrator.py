"""
CLI workflow orchestration for the Photo Duplicate Finder.

Provides the CLIOrchestrator class that coordinates the scan from
argument parsing through console reporting and CSV export.
"""

from __future__ import annotations

import logging

from ..scanner import (
    normalize_patterns,
    find_photo_files,
    fingerprint_files,
    group_by_hash,
    find_duplicate_groups,
    summarize_groups,
)
from ..models import build_report_rows
from ..user_config import get_user_config
from ..utils.exporters import export_csv
from ..utils.validators import validate_directory, validate_workers
from .arg_parser import parse_arguments
from .reporting import (
    print_summary,
    print_full_listing,
    print_duplicates_only,
    print_no_files_found,
)


def setup_logging(verbose: bool = False) -> logging.Logger:
    """
    Configure logging for the CLI.

    Args:
        verbose: Enable verbose (DEBUG level) logging

    Returns:
        Configured logger instance
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    return logging.getLogger(__name__)


class CLIOrchestrator:
    """
    Orchestrates the CLI scanning workflow.

    Runs the pipeline discover -> fingerprint -> group -> report, passing
    each stage's output to the next.
    """

    def __init__(self):
        """Initialize the orchestrator."""
        self.logger = logging.getLogger(__name__)
        self.args = None
        self.root = None
        self.patterns = frozenset()
        self.workers = 1
        self.show_progress = True
        self.photo_files = []
        self.records = []
        self.scan_stats = None
        self.groups = []
        self.summary = None

    def run(self, argv=None) -> int:
        """
        Execute the complete CLI workflow.

        Args:
            argv: Argument list (default: sys.argv)

        Returns:
            Exit code (0 for success, 1 for error)

        Workflow phases:
        1. Setup & argument parsing
        2. Validation
        3. Configuration
        4. File discovery
        5. Fingerprinting
        6. Grouping
        7. Reporting
        8. CSV export
        """
        # Phase 1: Setup
        exit_code = self._setup_phase(argv)
        if exit_code != 0:
            return exit_code

        # Phase 2: Validation
        exit_code = self._validate_phase()
        if exit_code != 0:
            return exit_code

        # Phase 3: Configuration
        self._configure_phase()

        # Phase 4: Discovery
        self._scan_phase()
        if not self.photo_files:
            print_no_files_found(self.root, self.patterns)
            return 0

        # Phase 5: Fingerprinting
        self._fingerprint_phase()

        # Phase 6-7: Grouping & Reporting
        self._group_phase()
        self._report_phase()

        # Phase 8: Export
        if self.args.output_file:
            return self._export_phase()

        return 0

    def _setup_phase(self, argv=None) -> int:
        """Phase 1: Parse arguments and setup logging."""
        self.args = parse_arguments(argv)
        self.logger = setup_logging(self.args.verbose)
        return 0

    def _validate_phase(self) -> int:
        """
        Phase 2: Validate arguments.

        Returns:
            0 for success, 1 for validation error
        """
        is_valid, error = validate_directory(self.args.path)
        if not is_valid:
            self.logger.error(error)
            return 1
        self.root = self.args.path.resolve()

        if self.args.workers is not None:
            is_valid, error = validate_workers(self.args.workers)
            if not is_valid:
                self.logger.error(error)
                return 1

        return 0

    def _configure_phase(self) -> None:
        """Phase 3: Resolve options against the user configuration."""
        user_config = get_user_config()

        if self.args.extensions is not None:
            extensions = self.args.extensions.split(',')
        else:
            extensions = user_config.default_extensions
        self.patterns = normalize_patterns(extensions)
        self.logger.debug(f"Patterns: {', '.join(sorted(self.patterns)) or '(none)'}")

        if self.args.workers is not None:
            self.workers = self.args.workers
        else:
            self.workers = user_config.default_workers

        self.show_progress = not self.args.no_progress

    def _scan_phase(self) -> None:
        """Phase 4: Discover matching files."""
        self.logger.info(f"Scanning {self.root} for photos...")
        self.photo_files = find_photo_files(self.root, self.patterns)
        self.logger.info(f"Found {len(self.photo_files):,} matching files")

    def _fingerprint_phase(self) -> None:
        """Phase 5: Hash every discovered file."""
        if self.workers > 1:
            self.logger.info(f"Hashing files with {self.workers} workers...")
        self.records, self.scan_stats = fingerprint_files(
            self.photo_files,
            max_workers=self.workers,
            show_progress=self.show_progress,
        )
        if self.scan_stats.failed:
            self.logger.warning(f"Could not read {self.scan_stats.failed:,} files")

    def _group_phase(self) -> None:
        """Phase 6: Group records by content hash."""
        self.groups = group_by_hash(self.records)
        self.summary = summarize_groups(
            self.groups,
            discovered=len(self.photo_files),
            skipped=self.scan_stats.failed,
        )
        self.logger.info(f"Found {self.summary.duplicate_group_count:,} duplicate groups")

    def _report_phase(self) -> None:
        """Phase 7: Print summary and listing."""
        print_summary(self.summary)
        if self.args.show_duplicates_only:
            print_duplicates_only(find_duplicate_groups(self.groups))
        else:
            print_full_listing(build_report_rows(self.records, self.groups))

    def _export_phase(self) -> int:
        """
        Phase 8: Write the CSV report.

        Returns:
            0 for success, 1 if the file could not be written
        """
        rows = build_report_rows(self.records, self.groups)
        try:
            count = export_csv(rows, self.args.output_file)
        except OSError as e:
            self.logger.error(f"Cannot write CSV report {self.args.output_file}: {e}")
            return 1
        self.logger.info(f"Exported {count:,} rows to: {self.args.output_file}")
        return 0


__all__ = ['CLIOrchestrator', 'setup_logging']
