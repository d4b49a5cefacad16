"""Outcome of one fiso command, consumed by the CLI in four stages."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

ProgressCallback = Callable[["StageResult"], Iterator[tuple[float, str]]]


@dataclass
class StageResult:
    """Announcement, progress generator and the fields the generator fills.

    ``progress_callback`` yields ``(fraction, message)`` tuples and sets
    ``result``, ``output`` and ``success`` before it finishes.
    """

    announce: str
    progress_callback: ProgressCallback
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False

    @property
    def exit_code(self) -> int:
        return 0 if self.success else 1
