"""Output schemas for scan commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ScanScanOutput(BaseOutputSchema):
    """Output schema for scan command."""

    path: str = Field(..., description="Root directory that was scanned")
    recursive: bool = Field(..., description="Whether nested directories were traversed")
    file_count: int = Field(..., ge=0, description="Number of regular files")
    directory_count: int = Field(..., ge=0, description="Number of directories")
    total_bytes: int = Field(..., ge=0, description="Sum of file sizes in bytes")
    extensions: dict[str, int] = Field(..., description="Extension histogram ('Other' for extensionless files)")
    old_files: int = Field(..., ge=0, description="Files modified before the staleness threshold")
    elapsed_ms: int = Field(..., ge=0, description="Scan duration in milliseconds")
    report: str = Field(..., description="Rendered text report, empty if the scan failed")
    success: bool = Field(..., description="Whether the scan completed")


class ScanListOutput(BaseOutputSchema):
    """Output schema for list command."""

    path: str = Field(..., description="Root directory that was listed")
    recursive: bool = Field(..., description="Whether nested directories were traversed")
    names: list[str] = Field(..., description="Names of non-directory entries in walk order")
    count: int = Field(..., ge=0, description="Number of names listed")
    success: bool = Field(..., description="Whether the listing completed")


register_output_schema("scan", "scan", ScanScanOutput)
register_output_schema("scan", "list", ScanListOutput)
