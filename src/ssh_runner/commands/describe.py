"""Describe command for the SSH runner CLI."""

import json
from typing import Any, Dict, List

import typer
from rich.console import Console
from rich.table import Table

from ..helpers.error_handler import handle_error, validate_output_format
from ..loader import load_manifest
from ..manifest.errors import ManifestError
from ..manifest.variable import Literal, SecretRef, Variable
from ..resource.pipeline import KIND, TYPE, Pipeline


def _describe_variable(variable: Variable, reveal: bool = True) -> str:
    """Render a variable without leaking credentials."""
    if isinstance(variable, SecretRef) and variable:
        return f"from_secret: {variable.name}"
    if isinstance(variable, Literal) and variable:
        return variable.value if reveal else "set"
    return "-"


def _pipeline_data(pipeline: Pipeline) -> Dict[str, Any]:
    server = pipeline.server
    return {
        "name": pipeline.name,
        "version": pipeline.version,
        "server": {
            "host": _describe_variable(server.host),
            "user": _describe_variable(server.user),
            "password": _describe_variable(server.password, reveal=False),
            "ssh_key": _describe_variable(server.ssh_key, reveal=False),
        },
        "platform": pipeline.platform.to_dict(),
        "workspace": pipeline.workspace.path,
        "clone_depth": pipeline.clone.depth,
        "steps": [
            {
                "name": step.name,
                "shell": step.shell,
                "depends_on": list(step.depends_on),
                "commands": len(step.commands),
                "failure": step.failure.value,
            }
            for step in pipeline.steps
        ],
    }


def _resource_label(resource: Any) -> str:
    parts = [resource.kind]
    if resource.type:
        parts[0] = f"{resource.kind}/{resource.type}"
    if resource.name:
        parts.append(resource.name)
    return " ".join(parts)


def _print_steps(console: Console, steps: List[Dict[str, Any]]) -> None:
    table = Table(show_header=True, header_style="bold")
    table.add_column("Step")
    table.add_column("Depends On")
    table.add_column("Commands", justify="right")
    table.add_column("Failure")
    for step in steps:
        table.add_row(
            step["name"],
            ", ".join(step["depends_on"]) or "-",
            str(step["commands"]),
            step["failure"],
        )
    console.print(table)


def describe_command(manifest_file: str, output: str = "TEXT") -> None:
    """Describe the resources of a manifest."""
    output = validate_output_format(output)
    try:
        manifest = load_manifest(manifest_file)
    except FileNotFoundError as e:
        handle_error(str(e))
    except ManifestError as e:
        handle_error(f"Invalid manifest {manifest_file}: {e}")

    pipelines = [
        _pipeline_data(r)
        for r in manifest.resources
        if r.kind == KIND and r.type == TYPE
    ]

    if output == "JSON":
        output_data = {
            "manifest": manifest_file,
            "resources": [
                {"kind": r.kind, "type": r.type, "name": r.name}
                for r in manifest.resources
            ],
            "pipelines": pipelines,
        }
        typer.echo(json.dumps(output_data, indent=2))
        return

    console = Console()
    typer.echo(f"Manifest: {manifest_file}")
    typer.echo(f"Resources: {len(manifest.resources)}")
    for resource in manifest.resources:
        typer.echo(f"  - {_resource_label(resource)}")

    for pipeline in pipelines:
        server = pipeline["server"]
        platform = pipeline["platform"]
        typer.echo(f"\nPipeline: {pipeline['name']}")
        typer.echo(f"  Server: {server['user']}@{server['host']}")
        typer.echo(
            f"  Credentials: password={server['password']}, ssh_key={server['ssh_key']}"
        )
        if platform:
            typer.echo(
                f"  Platform: {platform.get('os', '-')}/{platform.get('arch', '-')}"
            )
        _print_steps(console, pipeline["steps"])
