"""Sort API module."""

from .SortConfig import SortConfig

__all__ = ["SortConfig"]
