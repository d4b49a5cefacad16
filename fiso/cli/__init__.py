"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import typer

    from fiso.api.config.FisoConfig import FisoConfig
    from fiso.api.config.get_package_version import get_package_version
    from fiso.cli._create_app import _create_app
    from fiso.utils.logger import configure_logging

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-v" in argv:
        print(f"fiso {get_package_version()}")
        return 0

    try:
        level = FisoConfig.load().log.level
    except ValueError:
        # Commands report the config error themselves
        level = "INFO"
    try:
        configure_logging(level=level)
    except OSError as e:
        typer.echo(f"Warning: log file disabled: {e}", err=True)

    app = _create_app()
    try:
        app(argv, prog_name="fiso")
        return 0
    except SystemExit as e:
        if e.code is None:
            return 0
        return e.code if isinstance(e.code, int) else 1
    except typer.Exit as e:
        return e.exit_code
