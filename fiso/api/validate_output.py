"""Check a command's output dict against the schema registered for it."""

from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from ._output_schemas import get_output_schema


def _command_key(func: Callable) -> tuple[str, str]:
    """Map ``fiso.api.<domain>.cmd_<name>`` to ``(domain, name)``."""
    parts = func.__module__.split(".")
    if len(parts) < 3 or parts[:2] != ["fiso", "api"] or not func.__name__.startswith("cmd_"):
        raise ValueError(f"{func.__module__}.{func.__name__} is not a fiso command")
    return parts[2], func.__name__.removeprefix("cmd_")


def validate_output(func: Callable, output: dict[str, Any]) -> dict[str, Any]:
    """Validate ``output`` for ``func`` and return it with defaults filled in.

    Raises:
        ValueError: If ``func`` has no registered schema or the output does not match it
    """
    domain, command = _command_key(func)
    schema_class = get_output_schema(domain, command)
    if schema_class is None:
        raise ValueError(f"No output schema registered for {domain}.{command}")

    try:
        return schema_class(**output).model_dump(mode="python")
    except ValidationError as e:
        raise ValueError(f"Output validation failed for {domain}.{command}: {e}\nGot output: {output}") from e
