"""Include/exclude filters used by pipeline triggers and step ``when`` blocks."""

from dataclasses import dataclass, field, fields
from fnmatch import fnmatchcase
from typing import Any, Dict, Iterable, List, Optional

from .errors import MalformedInputError


def _string_list(raw: Any, where: str) -> List[str]:
    if raw is None:
        return []
    if isinstance(raw, str):
        return [raw]
    if isinstance(raw, list) and all(isinstance(item, str) for item in raw):
        return list(raw)
    raise MalformedInputError(f"{where}: expected a string or a list of strings")


@dataclass
class Condition:
    """
    A single filter such as ``branch`` or ``event``.

    Entries are glob patterns. An empty condition matches everything, an
    excluded value never matches, and a non-empty include list must match.
    """

    include: List[str] = field(default_factory=list)
    exclude: List[str] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.include and not self.exclude

    def match(self, value: str) -> bool:
        if any(fnmatchcase(value, pattern) for pattern in self.exclude):
            return False
        if self.include:
            return any(fnmatchcase(value, pattern) for pattern in self.include)
        return True

    def match_any(self, values: Iterable[str]) -> bool:
        """Match a multi-valued input, such as the list of changed paths."""
        if self.is_empty():
            return True
        return any(self.match(value) for value in values)

    @classmethod
    def from_yaml(cls, raw: Any, where: str = "condition") -> "Condition":
        """
        Accepts ``master``, ``[master, develop]`` or
        ``{include: [...], exclude: [...]}``.
        """
        if raw is None:
            return cls()
        if isinstance(raw, dict):
            unknown = set(raw) - {"include", "exclude"}
            if unknown:
                raise MalformedInputError(
                    f"{where}: unknown keys {sorted(unknown)}"
                )
            return cls(
                include=_string_list(raw.get("include"), f"{where}.include"),
                exclude=_string_list(raw.get("exclude"), f"{where}.exclude"),
            )
        return cls(include=_string_list(raw, where))

    def to_dict(self) -> Dict[str, List[str]]:
        data = {}
        if self.include:
            data["include"] = list(self.include)
        if self.exclude:
            data["exclude"] = list(self.exclude)
        return data


@dataclass
class Conditions:
    """Named conditions combined with logical AND."""

    action: Condition = field(default_factory=Condition)
    branch: Condition = field(default_factory=Condition)
    cron: Condition = field(default_factory=Condition)
    event: Condition = field(default_factory=Condition)
    instance: Condition = field(default_factory=Condition)
    paths: Condition = field(default_factory=Condition)
    ref: Condition = field(default_factory=Condition)
    repo: Condition = field(default_factory=Condition)
    status: Condition = field(default_factory=Condition)
    target: Condition = field(default_factory=Condition)

    @classmethod
    def names(cls) -> List[str]:
        return [f.name for f in fields(cls)]

    def match(self, **values: Any) -> bool:
        """
        Check the given values against their conditions.

        ``paths`` takes a list of changed files (or a single path); every
        other name takes a string. Names that are not passed are not checked.

        Example:
            trigger.match(branch="master", event="push")
        """
        known = self.names()
        for name, value in values.items():
            if name not in known:
                raise ValueError(f"Unknown condition: {name}")
            if value is None:
                continue
            condition: Condition = getattr(self, name)
            if name == "paths":
                if isinstance(value, str):
                    value = [value]
                if not condition.match_any(value):
                    return False
            elif not condition.match(value):
                return False
        return True

    @classmethod
    def from_yaml(cls, raw: Optional[Dict[str, Any]], where: str = "when") -> "Conditions":
        if raw is None:
            return cls()
        if not isinstance(raw, dict):
            raise MalformedInputError(f"{where}: expected a mapping")
        unknown = set(raw) - set(cls.names())
        if unknown:
            raise MalformedInputError(f"{where}: unknown conditions {sorted(unknown)}")
        return cls(
            **{
                name: Condition.from_yaml(value, f"{where}.{name}")
                for name, value in raw.items()
            }
        )

    def to_dict(self) -> Dict[str, Dict[str, List[str]]]:
        data = {}
        for name in self.names():
            condition = getattr(self, name).to_dict()
            if condition:
                data[name] = condition
        return data
