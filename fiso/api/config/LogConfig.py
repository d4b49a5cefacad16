"""The ``log`` section of config.json."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class LogConfig(BaseModel):
    """Level of the ``fiso`` logger writing to ``<home>/fiso.log``."""

    model_config = ConfigDict(extra="forbid")

    level: LogLevel = Field("INFO", description="DEBUG also records skipped entries")
