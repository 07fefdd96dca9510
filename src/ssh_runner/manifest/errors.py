"""Errors raised while decoding and linting manifests."""

from typing import List, Optional


class ManifestError(ValueError):
    """Base class for manifest problems."""


class MalformedInputError(ManifestError):
    """The document does not have the shape its resource family expects."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors = list(errors) if errors else [message]


class LintError(ManifestError):
    """The document decoded but breaks a semantic rule."""

    def __init__(
        self, reason: str, step: Optional[str] = None, field: Optional[str] = None
    ):
        self.reason = reason
        self.step = step
        self.field = field
        super().__init__(f"{reason}: {step}" if step else reason)
