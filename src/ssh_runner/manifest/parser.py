"""Manifest parsing: raw documents to decoded resources."""

from dataclasses import dataclass, field
from typing import IO, Any, List, Optional, Union

import yaml

from ..helpers.logger import get_logger
from ..helpers.utils import read_manifest_text
from .errors import MalformedInputError
from .raw import RawResource, parse_raw
from .registry import ResourceRegistry

logger = get_logger("manifest.parser")


@dataclass
class Manifest:
    """Resources of one manifest file, in document order."""

    resources: List[Any] = field(default_factory=list)
    _file_path: Optional[str] = field(default=None, init=False, compare=False)

    def of_kind(self, kind: str) -> List[Any]:
        return [r for r in self.resources if r.kind == kind]


def resolve(raw: RawResource, registry: ResourceRegistry) -> Optional[Any]:
    """
    Decode one raw document.

    Returns:
        The resource, or None when no registered family owns the document.

    Raises:
        MalformedInputError: Missing kind or a body that does not decode
        LintError: The resource decoded but failed its lint rules
    """
    if not raw.kind:
        raise MalformedInputError("missing resource kind")

    resource, matched = registry.parse(raw)
    if not matched:
        logger.warning(
            f"Skipping resource kind={raw.kind!r} type={raw.type!r}: no registered family"
        )
        return None

    logger.debug(f"Decoded {raw.kind}/{raw.type or '*'} resource {raw.name!r}")
    return resource


def read_manifest(manifest_file: str) -> str:
    """
    Read a manifest file as UTF-8 text.

    Raises:
        FileNotFoundError: If the file doesn't exist
        MalformedInputError: If the file cannot be read or is not UTF-8
    """
    try:
        return read_manifest_text(manifest_file)
    except FileNotFoundError:
        raise
    except UnicodeDecodeError as e:
        raise MalformedInputError(
            f"{manifest_file}: not valid UTF-8 ({e.reason})"
        ) from e
    except OSError as e:
        raise MalformedInputError(
            f"{manifest_file}: cannot read file ({e.strerror or e})"
        ) from e


def parse_string(text: str, registry: ResourceRegistry) -> Manifest:
    """
    Parse a multi-document YAML string.

    Stops at the first document that fails to decode or lint.
    """
    manifest = Manifest()
    for raw in parse_raw(text):
        resource = resolve(raw, registry)
        if resource is not None:
            manifest.resources.append(resource)
    return manifest


def parse(stream: Union[str, IO[str]], registry: ResourceRegistry) -> Manifest:
    """Parse a manifest from a string or a text stream."""
    text = stream if isinstance(stream, str) else stream.read()
    return parse_string(text, registry)


def parse_file(manifest_file: str, registry: ResourceRegistry) -> Manifest:
    """Load a manifest file."""
    logger.debug(f"Parsing manifest {manifest_file}")
    manifest = parse_string(read_manifest(manifest_file), registry)
    manifest._file_path = manifest_file
    return manifest


def dump(resources: List[Any]) -> str:
    """Write resources back out as a multi-document YAML string."""
    return yaml.safe_dump_all(
        [resource.to_dict() for resource in resources],
        explicit_start=True,
        sort_keys=False,
        default_flow_style=False,
    )
