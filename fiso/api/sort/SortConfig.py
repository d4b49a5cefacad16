"""Sort configuration."""

from pydantic import BaseModel, ConfigDict, Field

from ...constants import DEFAULT_RULES_PATH


class SortConfig(BaseModel):
    """Defaults applied to ``fiso sort``."""

    model_config = ConfigDict(extra="forbid")

    rules: str = Field(DEFAULT_RULES_PATH, description="Path to the sorting rules file")
