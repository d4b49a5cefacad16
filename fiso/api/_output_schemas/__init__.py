"""Output schemas for API commands - enforces consistent output structure.

Importing this package registers every domain's schemas.
"""

from . import scan, sort  # noqa: F401
from ._base import BaseOutputSchema
from ._registry import get_output_schema, register_output_schema

__all__ = ["BaseOutputSchema", "get_output_schema", "register_output_schema"]
