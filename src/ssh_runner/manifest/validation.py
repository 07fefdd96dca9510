"""
Schema validation utilities for manifest documents.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import jsonschema

from ..helpers.logger import get_logger
from ..helpers.utils import load_yaml
from .errors import MalformedInputError, ManifestError
from .parser import Manifest, read_manifest, resolve
from .raw import parse_raw
from .registry import ResourceRegistry

logger = get_logger("manifest.validation")


def load_schema(schema_path: Path) -> Dict[str, Any]:
    """Load a JSON schema stored as YAML."""
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema file not found: {schema_path}")

    return load_yaml(str(schema_path))


def validate_schema(
    data: Dict[str, Any], schema: Dict[str, Any]
) -> Tuple[bool, List[str]]:
    """
    Validate a document against a schema.

    Args:
        data: Parsed document
        schema: Draft 7 schema to validate against

    Returns:
        Tuple of (is_valid, list_of_error_messages)
    """
    validator = jsonschema.Draft7Validator(schema)
    errors = sorted(
        validator.iter_errors(data), key=lambda e: [str(p) for p in e.absolute_path]
    )

    if not errors:
        return True, []

    error_messages = []
    for error in errors:
        path = (
            " -> ".join(str(p) for p in error.absolute_path)
            if error.absolute_path
            else "root"
        )
        error_messages.append(f"Path '{path}': {error.message}")

    return False, error_messages


def check_schema(data: Dict[str, Any], schema: Dict[str, Any], where: str) -> None:
    """
    Like validate_schema, but raises.

    Raises:
        MalformedInputError: Listing every schema violation
    """
    is_valid, errors = validate_schema(data, schema)
    if not is_valid:
        raise MalformedInputError(
            f"{where} does not match schema:\n"
            + "\n".join(f"  - {error}" for error in errors),
            errors,
        )


def validate_manifest_file(
    manifest_path: str, registry: ResourceRegistry
) -> Tuple[bool, List[str], Optional[Manifest]]:
    """
    Validate every document of a manifest file.

    Unlike ``parse_file`` this keeps going after a bad document so all
    problems are reported at once.

    Args:
        manifest_path: Path to the manifest file
        registry: Resource families to decode with

    Returns:
        Tuple of (is_valid, list_of_error_messages, manifest). The manifest
        holds the documents that decoded cleanly.
    """
    try:
        raws = parse_raw(read_manifest(manifest_path))
    except FileNotFoundError:
        return False, [f"File not found: {manifest_path}"], None
    except MalformedInputError as e:
        return False, [str(e)], None

    manifest = Manifest()
    errors = []
    for index, raw in enumerate(raws, start=1):
        label = f"document {index} ({raw.kind or '?'}/{raw.type or '*'})"
        try:
            resource = resolve(raw, registry)
        except ManifestError as e:
            logger.debug(f"{label} rejected: {e}")
            errors.append(f"{label}: {e}")
            continue
        if resource is not None:
            manifest.resources.append(resource)

    return not errors, errors, manifest
