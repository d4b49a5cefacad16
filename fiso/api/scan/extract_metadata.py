"""Per-entry metadata with graceful degradation."""

import logging
import os
from datetime import datetime, timezone

from .decode_name import decode_name
from .file_extension import file_extension
from .ScanEntry import EntryKind, ScanEntry

logger = logging.getLogger(__name__)


def extract_metadata(entry: os.DirEntry) -> ScanEntry | None:
    """Build a ScanEntry for a walker entry.

    Kind is determined without following symlinks, so links, sockets and
    devices count as ``other``. A failed ``stat`` keeps the entry with size 0
    and no modification time. Returns None only when the entry's kind cannot
    be determined (e.g. it vanished), in which case it should be skipped.
    """
    kind = _entry_kind(entry)
    if kind is None:
        return None

    name = decode_name(entry.name)
    extension = file_extension(entry.name)

    try:
        stat = entry.stat(follow_symlinks=False)
    except OSError as exc:
        logger.debug("Metadata unavailable for %s: %s", name, exc)
        return ScanEntry(path=decode_name(entry.path), name=name, kind=kind, extension=extension)

    return ScanEntry(
        path=decode_name(entry.path),
        name=name,
        kind=kind,
        extension=extension,
        size=stat.st_size,
        modified=datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc),
    )


def _entry_kind(entry: os.DirEntry) -> EntryKind | None:
    try:
        if entry.is_dir(follow_symlinks=False):
            return "directory"
        if entry.is_file(follow_symlinks=False):
            return "file"
    except OSError as exc:
        logger.debug("Skipping unreadable entry %s: %s", decode_name(entry.path), exc)
        return None
    return "other"
