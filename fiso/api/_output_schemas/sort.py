"""Output schemas for sort commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class SortSortOutput(BaseOutputSchema):
    """Output schema for sort command."""

    path: str = Field(..., description="Directory requested for sorting")
    rules: str = Field(..., description="Rules file path (not read)")
    message: str = Field(..., description="Acknowledgement text")
    success: bool = Field(..., description="Whether the request was acknowledged")


register_output_schema("sort", "sort", SortSortOutput)
