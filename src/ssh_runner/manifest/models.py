"""Value records shared by pipeline resources."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .variable import scalar_text


@dataclass
class Workspace:
    """Workspace configuration."""

    path: str = ""

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "Workspace":
        data = data or {}
        return cls(path=data.get("path", ""))

    def to_dict(self) -> Dict[str, Any]:
        return {"path": self.path} if self.path else {}


@dataclass
class Platform:
    """Target platform of the remote host."""

    os: str = ""
    arch: str = ""
    variant: str = ""
    version: str = ""

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "Platform":
        data = data or {}
        return cls(
            os=data.get("os", ""),
            arch=data.get("arch", ""),
            variant=data.get("variant", ""),
            version=scalar_text(data.get("version", "")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            key: value
            for key, value in (
                ("os", self.os),
                ("arch", self.arch),
                ("variant", self.variant),
                ("version", self.version),
            )
            if value
        }


@dataclass
class Clone:
    """Clone configuration. A depth of 0 means full history."""

    depth: int = 0
    disable: bool = False
    skip_verify: bool = False

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "Clone":
        data = data or {}
        return cls(
            depth=data.get("depth", 0),
            disable=data.get("disable", False),
            skip_verify=data.get("skip_verify", False),
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if self.depth:
            data["depth"] = self.depth
        if self.disable:
            data["disable"] = True
        if self.skip_verify:
            data["skip_verify"] = True
        return data
