"""
Fingerprinting driver for the scanner package.

Hashes a list of discovered files sequentially or on a bounded thread
pool, with progress tracking and per-file failure isolation.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Optional, Callable

from tqdm import tqdm
from tqdm.contrib.logging import logging_redirect_tqdm

from ..config import DEFAULT_WORKERS
from ..models import FileRecord
from . import hashing

logger = logging.getLogger(__name__)


@dataclass
class ScanStats:
    """Statistics about fingerprinting during a scan."""
    total_files: int = 0
    processed: int = 0
    failed: int = 0
    failed_paths: list[str] = field(default_factory=list)

    @property
    def success_rate(self) -> float:
        """Return the share of files fingerprinted as a percentage."""
        if self.total_files == 0:
            return 0.0
        return (self.processed / self.total_files) * 100


def fingerprint_files(
    filepaths: list[str],
    max_workers: int = DEFAULT_WORKERS,
    progress_callback: Optional[Callable[[int, int], None]] = None,
    show_progress: bool = True,
) -> tuple[list[FileRecord], ScanStats]:
    """
    Fingerprint multiple files, optionally in parallel.

    Args:
        filepaths: Paths to fingerprint, in discovery order
        max_workers: Number of worker threads (1 = sequential). Also bounds
            how many files are open at once.
        progress_callback: Optional callback(processed, total) invoked after
            every file, whether it succeeded or failed
        show_progress: Whether to show a tqdm progress bar

    Returns:
        Tuple of (records in discovery order, ScanStats)

    Notes:
        Files that cannot be read are logged as warnings as soon as they
        fail and are left out of the returned records.
    """
    total = len(filepaths)
    stats = ScanStats(total_files=total)
    if not filepaths:
        return [], stats

    # Slot per input path so parallel results can be put back in order
    slots: list[Optional[FileRecord]] = [None] * total

    def _record_outcome(index: int, record: Optional[FileRecord], error: Optional[Exception]) -> None:
        if error is not None:
            stats.failed += 1
            stats.failed_paths.append(filepaths[index])
            logger.warning(str(error))
        else:
            slots[index] = record
            stats.processed += 1
        pbar.update(1)
        if progress_callback:
            progress_callback(stats.processed + stats.failed, total)

    # Route warnings through tqdm.write so they do not tear the bar
    with logging_redirect_tqdm(), tqdm(
        total=total,
        desc="Hashing files",
        unit="file",
        ncols=80,
        disable=not show_progress,
    ) as pbar:
        if max_workers <= 1:
            for index, path in enumerate(filepaths):
                try:
                    _record_outcome(index, hashing.fingerprint_file(path), None)
                except hashing.FingerprintError as e:
                    _record_outcome(index, None, e)
        else:
            with ThreadPoolExecutor(max_workers=max_workers) as executor:
                futures = {
                    executor.submit(hashing.fingerprint_file, path): index
                    for index, path in enumerate(filepaths)
                }
                for future in as_completed(futures):
                    index = futures[future]
                    try:
                        _record_outcome(index, future.result(), None)
                    except hashing.FingerprintError as e:
                        _record_outcome(index, None, e)

    records = [record for record in slots if record is not None]
    logger.debug(
        f"Fingerprinted {stats.processed:,} of {total:,} files "
        f"({stats.success_rate:.1f}% success)"
    )
    return records, stats


__all__ = ['ScanStats', 'fingerprint_files']
