"""Pipeline manifest decoder and linter for the SSH runner."""

__version__ = "1.0.0"
