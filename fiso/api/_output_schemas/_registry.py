"""Schema lookup table, kept apart from the schema modules that fill it."""

from pydantic import BaseModel

_SCHEMAS: dict[tuple[str, str], type[BaseModel]] = {}


def register_output_schema(domain: str, command_name: str, schema_class: type[BaseModel]) -> None:
    """Register ``schema_class`` as the output of ``fiso.api.<domain>.cmd_<command_name>``."""
    key = (domain, command_name)
    if key in _SCHEMAS:
        raise ValueError(f"Schema already registered for {domain}.{command_name}")
    _SCHEMAS[key] = schema_class


def get_output_schema(domain: str, command_name: str) -> type[BaseModel] | None:
    return _SCHEMAS.get((domain, command_name))
