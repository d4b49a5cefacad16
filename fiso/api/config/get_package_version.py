"""Installed fiso version."""

import importlib.metadata as importlib_metadata
from functools import lru_cache


@lru_cache(maxsize=1)
def get_package_version() -> str:
    """Return the installed distribution version, or ``unknown`` in a bare checkout."""
    try:
        return importlib_metadata.version("fiso")
    except importlib_metadata.PackageNotFoundError:
        return "unknown"
