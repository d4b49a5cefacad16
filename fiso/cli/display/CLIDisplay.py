"""CLI display implementation using Rich library."""

import json
import sys
from datetime import datetime
from typing import Any

from rich.console import Console


class CLIDisplay:
    """Status lines on stderr, command output on stdout.

    Stdout carries only the command's output so reports can be piped.
    """

    def __init__(self):
        self.stderr_console = Console(file=sys.stderr)

    def status(self, message: str, **kwargs) -> None:  # noqa: ARG002
        timestamp = datetime.now().strftime("%H:%M:%S")
        self.stderr_console.print(f"[dim]{timestamp}[/dim] [blue]i[/blue] {message}", highlight=False)

    def success(self, message: str, **kwargs) -> None:  # noqa: ARG002
        timestamp = datetime.now().strftime("%H:%M:%S")
        self.stderr_console.print(f"[dim]{timestamp}[/dim] [green]✓[/green] {message}", highlight=False)

    def error(self, message: str, **kwargs) -> None:
        timestamp = datetime.now().strftime("%H:%M:%S")
        details = kwargs.get("details", "")
        self.stderr_console.print(f"[dim]{timestamp}[/dim] [red]✗[/red] {message}", highlight=False)
        if details:
            self.stderr_console.print(f"  [dim]{details}[/dim]", highlight=False)

    def info(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.stderr_console.print(message, highlight=False)

    def json_output(self, data: Any, **kwargs) -> None:
        output_format = kwargs.get("format", "yaml")
        indent = kwargs.get("indent", 2)

        if output_format == "yaml":
            import yaml

            yaml_str = yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
            print(yaml_str, end="", file=sys.stdout)
        else:
            print(json.dumps(data, indent=indent, ensure_ascii=False), file=sys.stdout)
