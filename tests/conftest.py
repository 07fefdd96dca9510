from pathlib import Path

import pytest

from ssh_runner.loader import default_registry

TESTDATA = Path(__file__).parent / "testdata"


@pytest.fixture
def testdata() -> Path:
    """Directory holding the fixture manifests."""
    return TESTDATA


@pytest.fixture
def registry():
    return default_registry()


@pytest.fixture
def write_manifest(tmp_path):
    """Write manifest content to a temporary .yml file and return its path."""

    def _write(content: str, name: str = "manifest.yml") -> str:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)

    return _write
