"""Aggregated counters for one scan."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .ScanEntry import ScanEntry


@dataclass
class ScanSummary:
    """Mutable accumulator owned by a single scan.

    Invariants: ``file_count == sum(extensions.values())`` and
    ``old_files <= file_count``.
    """

    file_count: int = 0
    directory_count: int = 0
    total_bytes: int = 0
    extensions: dict[str, int] = field(default_factory=dict)
    old_files: int = 0

    def add(self, entry: ScanEntry, threshold: datetime) -> None:
        """Fold one entry into the counters."""
        if entry.kind == "file":
            self.file_count += 1
            self.extensions[entry.extension] = self.extensions.get(entry.extension, 0) + 1
            self.total_bytes += entry.size
            if entry.modified is not None and entry.modified < threshold:
                self.old_files += 1
        elif entry.kind == "directory":
            self.directory_count += 1

    def top_extensions(self, limit: int) -> list[tuple[str, int]]:
        """Return at most ``limit`` extensions, most frequent first.

        Ties are ordered by extension name so reports are reproducible.
        """
        if limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")
        ranked = sorted(self.extensions.items(), key=lambda item: (-item[1], item[0]))
        return ranked[:limit]

    def to_dict(self) -> dict[str, Any]:
        return {
            "file_count": self.file_count,
            "directory_count": self.directory_count,
            "total_bytes": self.total_bytes,
            "extensions": dict(self.extensions),
            "old_files": self.old_files,
        }
