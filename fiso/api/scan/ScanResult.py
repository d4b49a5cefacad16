"""Finished scan: summary plus timing."""

from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path

from .ScanSummary import ScanSummary


@dataclass(frozen=True)
class ScanResult:
    root: Path
    recursive: bool
    summary: ScanSummary
    elapsed: timedelta

    @property
    def elapsed_ms(self) -> int:
        """Elapsed time in whole milliseconds (truncated)."""
        return self.elapsed // timedelta(milliseconds=1)
