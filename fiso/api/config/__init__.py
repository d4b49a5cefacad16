"""Config API module."""

from .FisoConfig import FisoConfig
from .LogConfig import LogConfig

__all__ = ["FisoConfig", "LogConfig"]
