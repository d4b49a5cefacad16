"""Lazy directory traversal for scans."""

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from .RootNotFoundError import RootNotFoundError

logger = logging.getLogger(__name__)


def walk_entries(root: Path, recursive: bool = False) -> Iterator[os.DirEntry]:
    """Yield the entries below ``root``.

    Flat mode yields only the direct children of ``root``. Recursive mode
    yields every descendant depth-first: a directory comes before its
    contents, and siblings come in name order. Directory symlinks are not
    followed. The root itself is never yielded.

    Directories that cannot be listed are skipped; the walk continues with
    the rest of the tree.

    Raises:
        RootNotFoundError: Immediately (not on first iteration) if ``root``
            is not an existing directory.
    """
    if not root.is_dir():
        raise RootNotFoundError(root)
    return _iter_entries(os.fspath(root), recursive)


def _iter_entries(root: str, recursive: bool) -> Iterator[os.DirEntry]:
    # Explicit stack keeps deep trees clear of the recursion limit
    stack = [iter(_list_directory(root))]
    while stack:
        entry = next(stack[-1], None)
        if entry is None:
            stack.pop()
            continue
        yield entry
        if recursive and _is_directory(entry):
            stack.append(iter(_list_directory(entry.path)))


def _list_directory(path: str) -> list[os.DirEntry]:
    try:
        with os.scandir(path) as it:
            return sorted(it, key=lambda entry: entry.name)
    except OSError as exc:
        logger.debug("Skipping unreadable directory %s: %s", path, exc)
        return []


def _is_directory(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError:
        return False
