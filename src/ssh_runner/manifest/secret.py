"""Secret resources: encrypted values or references to an external store."""

from dataclasses import dataclass, field
from typing import Any, Dict

from .raw import RawResource
from .registry import ResourceFamily
from .validation import check_schema

KIND = "secret"

SCHEMA = {
    "type": "object",
    "required": ["name"],
    "properties": {
        "kind": {"const": KIND},
        "type": {"type": "string"},
        "version": {"type": ["string", "number"]},
        "name": {"type": "string", "minLength": 1},
        "data": {"type": "string"},
        "get": {
            "type": "object",
            "properties": {
                "path": {"type": "string"},
                "name": {"type": "string"},
                "key": {"type": "string"},
            },
        },
    },
}


@dataclass
class SecretGet:
    """Location of a secret in an external store."""

    path: str = ""
    name: str = ""
    key: str = ""


@dataclass
class Secret:
    """Secret resource."""

    name: str
    kind: str = KIND
    type: str = ""
    version: str = ""
    data: str = ""
    get: SecretGet = field(default_factory=SecretGet)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"kind": self.kind}
        if self.version:
            data["version"] = self.version
        if self.type:
            data["type"] = self.type
        data["name"] = self.name
        if self.data:
            data["data"] = self.data
        get = {k: v for k, v in vars(self.get).items() if v}
        if get:
            data["get"] = get
        return data


def decode(raw: RawResource) -> Secret:
    check_schema(raw.data, SCHEMA, f"secret {raw.name!r}")
    get_data = raw.data.get("get") or {}
    return Secret(
        name=raw.data["name"],
        type=raw.type,
        version=raw.version,
        data=raw.data.get("data", ""),
        get=SecretGet(
            path=get_data.get("path", ""),
            name=get_data.get("name", ""),
            key=get_data.get("key", ""),
        ),
    )


family = ResourceFamily(kind=KIND, type=None, decode=decode)
