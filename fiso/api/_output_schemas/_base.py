"""Fields shared by every command output."""

from pydantic import BaseModel, ConfigDict, Field


class BaseOutputSchema(BaseModel):
    """Command output with ``errors`` and ``warnings``; unknown keys are rejected."""

    model_config = ConfigDict(extra="forbid")

    errors: list[str] = Field(default_factory=list, description="Problems that made the command fail")
    warnings: list[str] = Field(default_factory=list, description="Problems the command worked around")
