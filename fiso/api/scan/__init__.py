"""Scan API module."""

from .RootNotFoundError import RootNotFoundError
from .ScanConfig import ScanConfig
from .ScanEntry import ScanEntry
from .ScanResult import ScanResult
from .ScanSummary import ScanSummary

__all__ = [
    "RootNotFoundError",
    "ScanConfig",
    "ScanEntry",
    "ScanResult",
    "ScanSummary",
]
