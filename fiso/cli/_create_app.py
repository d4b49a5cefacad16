"""Create the main Typer CLI app."""

import typer

from fiso.cli._handle_stage_result import DISPLAY_FORMATS
from fiso.cli.scan import list_command, scan_command
from fiso.cli.sort import sort_command


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        name="fiso",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Directory inventory and file sorting",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    app.command(name="scan")(scan_command)
    app.command(name="list")(list_command)
    app.command(name="sort")(sort_command)

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("text", "--display", "-d", help="Output format: text, json or yaml"),
    ) -> None:
        if display not in DISPLAY_FORMATS:
            typer.echo(f"Error: --display must be one of {', '.join(DISPLAY_FORMATS)}, got '{display}'", err=True)
            raise typer.Exit(1)

        # Store display format in context for use by commands
        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    return app
