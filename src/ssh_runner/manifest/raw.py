"""Splitting a manifest into raw resource envelopes."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import yaml

from .errors import MalformedInputError
from .variable import scalar_text

NULL_TAG = "tag:yaml.org,2002:null"


@dataclass
class RawResource:
    """
    One manifest document before it is decoded.

    Only the discriminator fields are pulled out; ``data`` keeps the whole
    document mapping for the resource family that claims it. ``text`` is the
    same document with every scalar left as written in the file, so string
    fields keep spellings such as ``0123``, ``1.10`` or ``yes`` that YAML
    would otherwise resolve to numbers and booleans.
    """

    kind: str = ""
    type: str = ""
    version: str = ""
    name: str = ""
    data: Dict[str, Any] = field(default_factory=dict)
    text: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_document(
        cls,
        document: Dict[str, Any],
        index: int = 0,
        text: Optional[Dict[str, Any]] = None,
    ) -> "RawResource":
        where = f"document {index + 1}"
        for key in ("kind", "type"):
            value = document.get(key)
            if value is not None and not isinstance(value, str):
                raise MalformedInputError(f"{where}: '{key}' must be a string")

        if text is None:
            text = document
        return cls(
            kind=document.get("kind") or "",
            type=document.get("type") or "",
            version=_optional_text(text.get("version")),
            name=_optional_text(text.get("name")),
            data=document,
            text=text,
        )


def _optional_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        return ""
    return scalar_text(value)


def _source_text(node: yaml.Node, memo: Dict[int, Any]) -> Any:
    # Mirrors the constructed document, but scalars stay as written.
    if id(node) in memo:
        return memo[id(node)]
    if isinstance(node, yaml.MappingNode):
        mapping: Dict[Any, Any] = {}
        memo[id(node)] = mapping
        for key_node, value_node in node.value:
            mapping[_source_text(key_node, memo)] = _source_text(value_node, memo)
        return mapping
    if isinstance(node, yaml.SequenceNode):
        sequence: List[Any] = []
        memo[id(node)] = sequence
        sequence.extend(_source_text(item, memo) for item in node.value)
        return sequence
    if node.tag == NULL_TAG:
        return None
    return node.value


def parse_raw(text: str) -> List[RawResource]:
    """
    Split a multi-document YAML string into raw resources.

    Empty documents are skipped.

    Raises:
        MalformedInputError: On YAML syntax errors or non-mapping documents
    """
    loader = yaml.SafeLoader(text)
    documents = []
    try:
        while loader.check_node():
            node = loader.get_node()
            # constructing first also flattens merge keys in the node tree
            document = loader.construct_document(node)
            documents.append((document, _source_text(node, {})))
    except yaml.YAMLError as e:
        raise MalformedInputError(f"YAML syntax error: {e}") from e
    finally:
        loader.dispose()

    resources = []
    for index, (document, source) in enumerate(documents):
        if document is None:
            continue
        if not isinstance(document, dict):
            raise MalformedInputError(
                f"document {index + 1}: expected a mapping, got {type(document).__name__}"
            )
        resources.append(RawResource.from_document(document, index, source))
    return resources
