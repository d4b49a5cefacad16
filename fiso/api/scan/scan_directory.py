"""Scan engine: walk, extract, aggregate."""

import logging
import time
from datetime import datetime, timedelta, timezone
from pathlib import Path

from ...constants import DEFAULT_OLD_FILE_DAYS
from ...utils.normalize_path import normalize_path
from .aggregate_entries import aggregate_entries
from .extract_metadata import extract_metadata
from .ScanResult import ScanResult
from .staleness_threshold import staleness_threshold
from .walk_entries import walk_entries

logger = logging.getLogger(__name__)


def scan_directory(
    root: str | Path,
    recursive: bool = False,
    old_file_days: int = DEFAULT_OLD_FILE_DAYS,
    now: datetime | None = None,
) -> ScanResult:
    """Scan ``root`` and return its summary.

    Args:
        root: Directory to scan (``~`` is expanded)
        recursive: Descend into subdirectories instead of direct children only
        old_file_days: Age in days beyond which a file counts as old
        now: Reference instant for the staleness cutoff (defaults to current UTC time)

    Raises:
        RootNotFoundError: If ``root`` does not exist or is not a directory
    """
    root_path = normalize_path(root)
    entries = walk_entries(root_path, recursive=recursive)

    threshold = staleness_threshold(now or datetime.now(timezone.utc), old_file_days)
    logger.info("Scanning %s (recursive=%s)", root_path, recursive)

    started = time.perf_counter()
    extracted = (scan_entry for scan_entry in map(extract_metadata, entries) if scan_entry is not None)
    summary = aggregate_entries(extracted, threshold)
    elapsed = timedelta(seconds=time.perf_counter() - started)

    logger.info(
        "Scanned %s: %d file(s), %d dir(s), %d bytes",
        root_path,
        summary.file_count,
        summary.directory_count,
        summary.total_bytes,
    )
    return ScanResult(root=root_path, recursive=recursive, summary=summary, elapsed=elapsed)
