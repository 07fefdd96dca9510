"""
Variables: values that are either written inline or taken from a secret.

A manifest field holding a variable accepts two YAML shapes::

    password: correct-horse-battery-staple   # Literal
    ssh_key:
      from_secret: private_key               # SecretRef

Secret references are only recorded here. Looking the secret up is the job of
whoever executes the pipeline.
"""

from dataclasses import dataclass
from typing import Any, Union

from .errors import MalformedInputError

SECRET_KEY = "from_secret"


@dataclass(frozen=True)
class Literal:
    """A value written inline in the manifest."""

    value: str

    def __bool__(self) -> bool:
        return self.value != ""

    def to_yaml(self) -> Any:
        return self.value


@dataclass(frozen=True)
class SecretRef:
    """A pointer to a secret held outside the manifest."""

    name: str

    def __bool__(self) -> bool:
        return self.name != ""

    def to_yaml(self) -> Any:
        return {SECRET_KEY: self.name}


@dataclass(frozen=True)
class Absent:
    """No value was given."""

    def __bool__(self) -> bool:
        return False

    def to_yaml(self) -> Any:
        return None


ABSENT = Absent()

Variable = Union[Literal, SecretRef, Absent]


def scalar_text(value: Any) -> str:
    # YAML spelling, not Python's: true rather than True
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def decode_variable(raw: Any, field_name: str = "value") -> Variable:
    """
    Build a variable from its YAML shape.

    Args:
        raw: A scalar, a ``{from_secret: name}`` mapping, or None
        field_name: Used in error messages

    Raises:
        MalformedInputError: For lists, or mappings without ``from_secret``
    """
    if raw is None:
        return ABSENT
    if isinstance(raw, (str, int, float, bool)):
        return Literal(scalar_text(raw))
    if isinstance(raw, dict):
        if SECRET_KEY not in raw:
            raise MalformedInputError(
                f"{field_name}: mapping must contain '{SECRET_KEY}'"
            )
        secret = raw[SECRET_KEY]
        if not isinstance(secret, str):
            raise MalformedInputError(f"{field_name}: '{SECRET_KEY}' must be a string")
        return SecretRef(secret)
    raise MalformedInputError(
        f"{field_name}: expected a string or a '{SECRET_KEY}' mapping, got {type(raw).__name__}"
    )


def is_present(variable: Variable) -> bool:
    """True when the variable holds a non-empty literal or secret name."""
    return bool(variable)
