"""
This module defines the command-line interface (CLI) for CICD360.

It uses the `click` library for the commands and `rich` for terminal output:
`serve` starts the HTTP server and `info` prints the same details the `/info`
endpoint reports.
"""

import click
from rich.console import Console
from rich.table import Table

from . import __version__
from .config import ConfigError, get_config
from .my_logging import setup_logging
from .server.routes.info import build_info_response

# Initialize Rich console for pretty output
console = Console()


@click.group()
@click.version_option(__version__, prog_name="cicd360")
def main() -> None:
    """CICD360 - health and build information service."""
    pass


@main.command()
def serve() -> None:
    """Start the CICD360 HTTP server.

    The port and environment label come from the PORT and ENVIRONMENT
    environment variables.
    """
    setup_logging()

    try:
        config = get_config()
    except ConfigError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise SystemExit(1) from e

    from .server.runner import serve as run_server

    run_server(config)


@main.command()
def info() -> None:
    """Show application and runtime information."""
    try:
        config = get_config()
    except ConfigError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise SystemExit(1) from e

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Field", style="dim")
    table.add_column("Value")

    for field, value in build_info_response(config).model_dump().items():
        table.add_row(field, str(value))
    table.add_row("port", str(config.port))

    console.print(table)


if __name__ == "__main__":
    main()
