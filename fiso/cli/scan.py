"""Scan and list commands."""

from typing import Annotated

import typer

from fiso.api.scan.cmd_list import cmd_list
from fiso.api.scan.cmd_scan import cmd_scan
from fiso.cli._handle_stage_result import handle_stage_result


def _print_report(output: dict) -> None:
    typer.echo(output["report"])


def _print_names(output: dict) -> None:
    for name in output["names"]:
        typer.echo(name)


def scan_command(
    ctx: typer.Context,
    directory: Annotated[str, typer.Argument(help="Directory to scan")],
    limit: Annotated[
        int | None, typer.Argument(min=0, help="Maximum rows in the extension table (config default: 10)")
    ] = None,
    recursive: Annotated[bool, typer.Option("--recursive", "-r", help="Include nested directories")] = False,
) -> None:
    """Summarize files, sizes and extensions in a directory."""
    handle_stage_result(cmd_scan, ctx, result_printer=_print_report)(directory, recursive, limit)


def list_command(
    ctx: typer.Context,
    directory: Annotated[str, typer.Argument(help="Directory to list")],
    recursive: Annotated[bool, typer.Option("--recursive", "-r", help="Include nested directories")] = False,
) -> None:
    """Print the names of the files in a directory."""
    handle_stage_result(cmd_list, ctx, result_printer=_print_names)(directory, recursive)
