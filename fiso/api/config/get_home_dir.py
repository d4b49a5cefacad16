"""Get fiso home directory path or path under it."""

import os
from pathlib import Path

from ...constants import FISO_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get fiso home directory path or path under it.

    Checks FISO_HOME environment variable first, then HOME, and falls back
    to ``~/.fiso``.

    Args:
        *parts: Optional path components to join (e.g., "config.json")

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.fiso")
        >>> get_home_dir("config.json")
        Path("/Users/user/.fiso/config.json")
    """
    fiso_home_env = os.environ.get("FISO_HOME")
    if fiso_home_env:
        fiso_home = Path(fiso_home_env).expanduser().resolve()
    else:
        # Check HOME environment variable (for test isolation)
        home_env = os.environ.get("HOME")
        if home_env:
            fiso_home = Path(home_env) / FISO_HOME_EXT
        else:
            fiso_home = Path.home() / FISO_HOME_EXT

    return fiso_home / Path(*parts) if parts else fiso_home
