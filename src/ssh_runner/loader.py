"""Default resource registry and manifest loading."""

from .manifest import secret, signature
from .manifest.parser import Manifest, parse_file
from .manifest.registry import ResourceRegistry
from .resource import parser as ssh_pipeline


def default_registry() -> ResourceRegistry:
    """Secret, signature, and SSH pipeline families, in that order."""
    return ResourceRegistry(
        [
            secret.family,
            signature.family,
            ssh_pipeline.family,
        ]
    )


def load_manifest(manifest_file: str) -> Manifest:
    """Parse and lint a manifest file with the default registry."""
    return parse_file(manifest_file, default_registry())
