#!/usr/bin/env python3
"""
SSH runner CLI - validate and inspect pipeline manifests
"""

import typer

from . import __version__
from .commands.describe import describe_command
from .commands.validate import validate_command
from .helpers.logger import resolve_log_level, setup_logger


def configure_logging(output_format: str = "TEXT", log_level: str = None):
    """Configure logging based on output format and log level."""
    # For JSON output, send logs to stderr to keep stdout clean
    json_output = output_format.upper() == "JSON"
    setup_logger("ssh_runner", resolve_log_level(log_level), json_output)


app = typer.Typer(
    help="SSH runner - validate and inspect pipeline manifests",
    no_args_is_help=True,
    add_completion=False,
    epilog="💡 Use 'ssh-runner <command> --help' for command-specific help",
)


# Global log level option
LOG_LEVEL = None


def _version_callback(value: bool):
    if value:
        typer.echo(f"ssh-runner {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    log_level: str = typer.Option(
        None,
        "--log-level",
        help="Set logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        case_sensitive=False,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show the version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
):
    """SSH runner - validate and inspect pipeline manifests."""
    global LOG_LEVEL
    LOG_LEVEL = log_level


@app.command(
    "validate",
    help="Validate every document of a manifest. Example: ssh-runner validate --manifest .drone.yml",
    rich_help_panel="Manifest Commands",
)
def validate(
    file_path: str = typer.Option(
        ".drone.yml", "--manifest", "-m", help="Path to the manifest file"
    ),
    output: str = typer.Option(
        "TEXT", "--output", "-o", help="Output format: TEXT (default) or JSON"
    ),
):
    """Validate every document of a manifest."""
    configure_logging(output, LOG_LEVEL)
    validate_command(file_path, output)


@app.command(
    "describe",
    help="Describe the resources of a manifest. Example: ssh-runner describe --manifest .drone.yml",
    rich_help_panel="Manifest Commands",
)
def describe(
    file_path: str = typer.Option(
        ".drone.yml", "--manifest", "-m", help="Path to the manifest file"
    ),
    output: str = typer.Option(
        "TEXT", "--output", "-o", help="Output format: TEXT (default) or JSON"
    ),
):
    """Describe the resources of a manifest."""
    configure_logging(output, LOG_LEVEL)
    describe_command(file_path, output)


if __name__ == "__main__":
    app()
