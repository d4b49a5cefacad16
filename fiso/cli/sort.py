"""Sort command."""

from typing import Annotated

import typer

from fiso.api.sort.cmd_sort import cmd_sort
from fiso.cli._handle_stage_result import handle_stage_result


def _print_message(output: dict) -> None:
    typer.echo(output["message"])


def sort_command(
    ctx: typer.Context,
    directory: Annotated[str, typer.Argument(help="Directory to sort")],
    rules: Annotated[
        str | None, typer.Option("--rules", "-r", help="Rules file (config default: ~/.fiso/rules.yml)")
    ] = None,
) -> None:
    """Acknowledge a sort request (no files are moved)."""
    handle_stage_result(cmd_sort, ctx, result_printer=_print_message)(directory, rules)
