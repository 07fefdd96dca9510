"""Signature resources: HMAC of the manifest, checked by the server."""

from dataclasses import dataclass
from typing import Any, Dict

from .raw import RawResource
from .registry import ResourceFamily
from .validation import check_schema

KIND = "signature"

SCHEMA = {
    "type": "object",
    "required": ["hmac"],
    "properties": {
        "kind": {"const": KIND},
        "hmac": {"type": "string", "minLength": 1},
    },
}


@dataclass
class Signature:
    """Signature resource."""

    hmac: str
    kind: str = KIND

    # resources without these fields still answer the common accessors
    @property
    def type(self) -> str:
        return ""

    @property
    def name(self) -> str:
        return ""

    @property
    def version(self) -> str:
        return ""

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "hmac": self.hmac}


def decode(raw: RawResource) -> Signature:
    check_schema(raw.data, SCHEMA, "signature")
    return Signature(hmac=raw.data["hmac"])


family = ResourceFamily(kind=KIND, type=None, decode=decode)
