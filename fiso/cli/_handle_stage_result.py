"""Decorator to handle StageResult for CLI display."""

import functools
from collections.abc import Callable
from typing import TypeVar

import typer

from ._run_single_execution import _run_single_execution
from .display.CLIDisplay import CLIDisplay

F = TypeVar("F", bound=Callable)

DISPLAY_FORMATS = ("text", "json", "yaml")


def _extract_display_format(ctx: typer.Context | None) -> str:
    """Get the display format stored on ``ctx`` or one of its parents.

    Falls back to ``text`` when no context carries one.
    """
    current = ctx
    while current is not None:
        obj = current.obj
        if isinstance(obj, dict) and "display_format" in obj:
            value = obj["display_format"]
            if value in DISPLAY_FORMATS:
                return value
            raise ValueError(f"Invalid display_format value: {value!r}")
        current = current.parent
    return "text"


def handle_stage_result(
    func: F,
    ctx: typer.Context | None = None,
    result_printer: Callable[[dict], None] | None = None,
) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    1. Announce (stderr)
    2. Progress (stderr)
    3. Result (stderr)
    4. Output (stdout: ``result_printer`` in text mode, else JSON/YAML)

    The display format is read from ``ctx``, where the root callback stores
    it. The wrapped function exits with 0 on success and 1 on failure.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        display = CLIDisplay()
        _run_single_execution(func, args, kwargs, display, _extract_display_format(ctx), result_printer)

    return wrapper  # type: ignore[return-value]
