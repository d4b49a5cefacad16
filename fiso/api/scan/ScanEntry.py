"""Per-entry metadata record produced during a scan."""

from dataclasses import dataclass
from datetime import datetime
from typing import Literal

EntryKind = Literal["file", "directory", "other"]


@dataclass(frozen=True)
class ScanEntry:
    """One filesystem object encountered during traversal.

    ``size`` is 0 and ``modified`` is None when metadata could not be read.
    """

    path: str
    name: str
    kind: EntryKind
    extension: str
    size: int = 0
    modified: datetime | None = None
