"""
Manifest module for the SSH runner.

Generic machinery shared by every resource family: raw documents, the
registry, variables, conditions, and the built-in secret and signature
resources.
"""

from .conditions import Condition, Conditions
from .errors import LintError, MalformedInputError, ManifestError
from .models import Clone, Platform, Workspace
from .parser import (
    Manifest,
    dump,
    parse,
    parse_file,
    parse_string,
    read_manifest,
    resolve,
)
from .raw import RawResource, parse_raw
from .registry import ResourceFamily, ResourceRegistry
from .secret import Secret, SecretGet
from .signature import Signature
from .validation import validate_manifest_file
from .variable import ABSENT, Absent, Literal, SecretRef, Variable, decode_variable

__all__ = [
    "ABSENT",
    "Absent",
    "Clone",
    "Condition",
    "Conditions",
    "LintError",
    "Literal",
    "MalformedInputError",
    "Manifest",
    "ManifestError",
    "Platform",
    "RawResource",
    "ResourceFamily",
    "ResourceRegistry",
    "Secret",
    "SecretGet",
    "SecretRef",
    "Signature",
    "Variable",
    "Workspace",
    "decode_variable",
    "dump",
    "parse",
    "parse_file",
    "parse_raw",
    "parse_string",
    "read_manifest",
    "resolve",
    "validate_manifest_file",
]
