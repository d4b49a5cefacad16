"""Fold a stream of entries into a ScanSummary."""

from collections.abc import Iterable
from datetime import datetime

from .ScanEntry import ScanEntry
from .ScanSummary import ScanSummary


def aggregate_entries(entries: Iterable[ScanEntry], threshold: datetime) -> ScanSummary:
    """Consume ``entries`` in a single pass and return the finished summary.

    ``threshold`` is fixed for the whole pass so every file is judged
    against the same cutoff.
    """
    summary = ScanSummary()
    for entry in entries:
        summary.add(entry, threshold)
    return summary
