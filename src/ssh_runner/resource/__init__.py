"""
Resource module for the SSH runner.

Contains the SSH pipeline data model, its decoder, and its linter.
"""

from .linter import lint
from .parser import decode, family, match, parse
from .pipeline import Failure, Pipeline, Server, Step

__all__ = [
    "Failure",
    "Pipeline",
    "Server",
    "Step",
    "decode",
    "family",
    "lint",
    "match",
    "parse",
]
