"""Utility functions for the SSH runner."""

import os
from typing import Any, Dict

import yaml


def read_manifest_text(file_path: str) -> str:
    """
    Read a manifest file.

    Args:
        file_path: Path to the manifest file

    Returns:
        The file contents

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(
            f"Manifest file not found: {file_path}\n"
            f"Please create a manifest file or specify the correct path using --manifest/-m option."
        )

    with open(file_path, "r", encoding="utf-8") as f:
        return f.read()


def load_yaml(file_path: str) -> Dict[str, Any]:
    """
    Load and parse a single-document YAML file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        yaml.YAMLError: If the file contains invalid YAML
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"YAML file not found: {file_path}")

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise yaml.YAMLError(f"Invalid YAML syntax in {file_path}: {e}")
