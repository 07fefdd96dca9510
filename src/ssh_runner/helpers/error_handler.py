"""Error handling utilities for the SSH runner CLI."""

import typer


def handle_error(message: str, exit_code: int = 1) -> None:
    """Print an error and exit the command."""
    typer.echo(f"❌ Error: {message}", err=True)
    raise typer.Exit(exit_code)


def handle_success(message: str) -> None:
    """Print a success message."""
    typer.echo(f"✅ {message}")


def validate_output_format(output: str) -> str:
    """Normalize the --output option, exiting on unknown formats."""
    normalized = (output or "TEXT").upper()
    if normalized not in ("TEXT", "JSON"):
        handle_error(f"Unsupported output format '{output}'. Use TEXT or JSON")
    return normalized
