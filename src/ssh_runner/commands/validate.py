"""Validate command for the SSH runner CLI."""

import json

import typer

from ..helpers.error_handler import handle_success, validate_output_format
from ..loader import default_registry
from ..manifest.validation import validate_manifest_file


def validate_command(manifest_file: str, output: str = "TEXT") -> None:
    """Validate every document of a manifest and report all problems."""
    output = validate_output_format(output)
    is_valid, errors, manifest = validate_manifest_file(
        manifest_file, default_registry()
    )
    resource_count = len(manifest.resources) if manifest else 0

    if output == "JSON":
        typer.echo(
            json.dumps(
                {
                    "manifest": manifest_file,
                    "valid": is_valid,
                    "resources": resource_count,
                    "errors": errors,
                },
                indent=2,
            )
        )
    elif is_valid:
        handle_success(f"{manifest_file} is valid ({resource_count} resources)")
    else:
        typer.echo(f"❌ {manifest_file} has {len(errors)} invalid document(s):", err=True)
        for error in errors:
            typer.echo(f"  - {error}", err=True)

    if not is_valid:
        raise typer.Exit(1)
