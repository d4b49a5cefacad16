"""Scan configuration."""

from pydantic import BaseModel, ConfigDict, Field

from ...constants import DEFAULT_EXTENSION_DISPLAY_LIMIT, DEFAULT_OLD_FILE_DAYS


class ScanConfig(BaseModel):
    """Defaults applied to ``fiso scan``."""

    model_config = ConfigDict(extra="forbid")

    old_file_days: int = Field(DEFAULT_OLD_FILE_DAYS, gt=0, description="Age in days after which a file counts as old")
    extension_display_limit: int = Field(
        DEFAULT_EXTENSION_DISPLAY_LIMIT, ge=0, description="Rows shown in the extension table"
    )
