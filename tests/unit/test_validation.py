"""
Unit tests for manifest validation functionality.
"""

from ssh_runner.manifest.validation import (
    validate_manifest_file,
    validate_schema,
)
from ssh_runner.resource.parser import load_pipeline_schema

VALID_MANIFEST = """
kind: signature
hmac: abc
---
kind: pipeline
type: ssh
name: default
server:
  host: localhost
  user: root
  password: root
steps:
- name: build
  commands: [make]
"""


class TestManifestValidation:
    """Test manifest validation functions."""

    def test_valid_manifest(self, write_manifest, registry):
        """Test validation of a valid manifest."""
        manifest_file = write_manifest(VALID_MANIFEST)

        is_valid, errors, manifest = validate_manifest_file(manifest_file, registry)

        assert is_valid
        assert errors == []
        assert len(manifest.resources) == 2

    def test_invalid_yaml_syntax(self, testdata, registry):
        """Test validation with invalid YAML syntax."""
        is_valid, errors, manifest = validate_manifest_file(
            str(testdata / "malformed.yml"), registry
        )

        assert not is_valid
        assert len(errors) == 1
        assert "YAML syntax error" in errors[0]
        assert manifest is None

    def test_file_not_found(self, registry):
        is_valid, errors, manifest = validate_manifest_file("missing.yml", registry)

        assert not is_valid
        assert errors == ["File not found: missing.yml"]

    def test_file_not_utf8(self, tmp_path, registry):
        """Test that undecodable bytes are reported, not raised."""
        manifest_file = tmp_path / "binary.yml"
        manifest_file.write_bytes(b"kind: signature\nhmac: \xff\xfe\n")

        is_valid, errors, manifest = validate_manifest_file(str(manifest_file), registry)

        assert not is_valid
        assert len(errors) == 1
        assert "not valid UTF-8" in errors[0]
        assert manifest is None

    def test_directory_path(self, tmp_path, registry):
        is_valid, errors, manifest = validate_manifest_file(str(tmp_path), registry)

        assert not is_valid
        assert "cannot read file" in errors[0]
        assert manifest is None

    def test_reports_every_bad_document(self, write_manifest, registry):
        """Test that validation keeps going after a bad document."""
        content = """
kind: pipeline
type: ssh
name: first
server: {host: localhost, user: root, password: root}
steps:
- name: build
- name: build
---
kind: signature
hmac: abc
---
kind: pipeline
type: ssh
name: second
steps:
- name: test
"""
        manifest_file = write_manifest(content)

        is_valid, errors, manifest = validate_manifest_file(manifest_file, registry)

        assert not is_valid
        assert errors == [
            "document 1 (pipeline/ssh): duplicate name: build",
            "document 3 (pipeline/ssh): missing host",
        ]
        assert [r.kind for r in manifest.resources] == ["signature"]

    def test_missing_kind(self, write_manifest, registry):
        manifest_file = write_manifest("name: orphan\n")

        is_valid, errors, _ = validate_manifest_file(manifest_file, registry)

        assert not is_valid
        assert errors == ["document 1 (?/*): missing resource kind"]


class TestSchemaValidation:
    """Test validating documents against the pipeline schema."""

    def test_valid_document(self):
        is_valid, errors = validate_schema(
            {"kind": "pipeline", "type": "ssh", "name": "default"},
            load_pipeline_schema(),
        )
        assert is_valid
        assert errors == []

    def test_errors_name_their_path(self):
        document = {
            "kind": "pipeline",
            "type": "ssh",
            "name": "default",
            "steps": [{"name": "build", "detach": "yes"}],
        }

        is_valid, errors = validate_schema(document, load_pipeline_schema())

        assert not is_valid
        assert errors == ["Path 'steps -> 0 -> detach': 'yes' is not of type 'boolean'"]

    def test_root_errors(self):
        is_valid, errors = validate_schema(
            {"kind": "pipeline", "type": "ssh"}, load_pipeline_schema()
        )
        assert not is_valid
        assert errors == ["Path 'root': 'name' is a required property"]
