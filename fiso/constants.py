"""Shared constants for fiso dot-directories and defaults."""

FISO_HOME_EXT = ".fiso"  # user-level state/config directory suffix

FISO_HOME_DISPLAY = f"~/{FISO_HOME_EXT}"  # user-readable path hint

DEFAULT_RULES_PATH = f"{FISO_HOME_DISPLAY}/rules.yml"

# Files older than this many days (relative to scan start) are reported as old
DEFAULT_OLD_FILE_DAYS = 180

DEFAULT_EXTENSION_DISPLAY_LIMIT = 10

# Histogram bucket for files without an extension
NO_EXTENSION = "Other"
