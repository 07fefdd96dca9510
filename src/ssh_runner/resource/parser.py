"""Matching and decoding of ``kind: pipeline``, ``type: ssh`` documents."""

from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from ..manifest.raw import RawResource
from ..manifest.registry import ResourceFamily
from ..manifest.validation import check_schema, load_schema
from .linter import lint
from .pipeline import KIND, TYPE, Pipeline

SCHEMA_PATH = Path(__file__).parent / "pipeline-schema.yaml"


@lru_cache(maxsize=1)
def load_pipeline_schema() -> Dict[str, Any]:
    """Load the SSH pipeline schema."""
    return load_schema(SCHEMA_PATH)


def match(raw: RawResource) -> bool:
    """True for ``kind: pipeline`` with ``type: ssh``. The body is not looked at."""
    return raw.kind == KIND and raw.type == TYPE


def decode(raw: RawResource) -> Pipeline:
    """
    Decode a matched document into a pipeline.

    Raises:
        MalformedInputError: When the document does not match the schema
    """
    check_schema(raw.data, load_pipeline_schema(), f"pipeline {raw.name!r}")
    return Pipeline.from_dict(raw.data, raw.text or None)


def decode_and_lint(raw: RawResource) -> Pipeline:
    pipeline = decode(raw)
    lint(pipeline)
    return pipeline


def parse(raw: RawResource) -> Tuple[Optional[Pipeline], bool]:
    """
    Decode and lint the document if it is an SSH pipeline.

    Returns:
        ``(None, False)`` for other documents, ``(pipeline, True)`` otherwise

    Raises:
        MalformedInputError: The document does not decode
        LintError: The pipeline fails a lint rule
    """
    if not match(raw):
        return None, False
    return decode_and_lint(raw), True


family = ResourceFamily(kind=KIND, type=TYPE, decode=decode_and_lint)
