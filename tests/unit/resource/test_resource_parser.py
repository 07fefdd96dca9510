"""Unit tests for SSH pipeline matching and decoding."""

import pytest

from ssh_runner.manifest import (
    ABSENT,
    LintError,
    Literal,
    MalformedInputError,
    RawResource,
    SecretRef,
    parse_raw,
)
from ssh_runner.resource import Failure, decode, match, parse


def raw_from_yaml(text: str) -> RawResource:
    return parse_raw(text)[0]


VALID_PIPELINE = """
kind: pipeline
type: ssh
name: default
server:
  host: localhost
  user: root
  password:
    from_secret: password
steps:
- name: build
  commands:
  - make
"""


class TestMatch:
    """Test which documents the SSH pipeline family owns."""

    def test_match(self):
        assert match(RawResource(kind="pipeline", type="ssh"))

    def test_kind_mismatch(self):
        assert not match(RawResource(kind="approval", type="ssh"))

    def test_type_mismatch(self):
        assert not match(RawResource(kind="pipeline", type="docker"))

    def test_case_sensitive(self):
        assert not match(RawResource(kind="Pipeline", type="ssh"))
        assert not match(RawResource(kind="pipeline", type="SSH"))

    def test_match_ignores_body(self):
        """Matching never looks at the body, even an undecodable one."""
        raw = RawResource(kind="pipeline", type="ssh", data={"steps": "nonsense"})
        assert match(raw)


class TestParse:
    """Test the parse entry point."""

    def test_parse_no_match(self):
        resource, matched = parse(RawResource(kind="pipeline", type="docker"))
        assert resource is None
        assert not matched

    def test_parse_match(self):
        pipeline, matched = parse(raw_from_yaml(VALID_PIPELINE))
        assert matched
        assert pipeline.name == "default"
        assert pipeline.server.password == SecretRef("password")

    def test_parse_runs_lint(self):
        raw = raw_from_yaml(VALID_PIPELINE.replace("host: localhost", "host: ''"))
        with pytest.raises(LintError, match="missing host"):
            parse(raw)

    def test_parse_malformed(self):
        raw = raw_from_yaml(VALID_PIPELINE.replace("- make", "- {make: all}"))
        with pytest.raises(MalformedInputError, match="steps -> 0 -> commands -> 0"):
            parse(raw)


class TestDecode:
    """Test defaults and field mapping."""

    def test_defaults(self):
        pipeline = decode(raw_from_yaml(VALID_PIPELINE))
        step = pipeline.steps[0]

        assert step.shell == "/bin/sh"
        assert step.failure is Failure.FAIL
        assert step.detach is False
        assert step.depends_on == []
        assert pipeline.clone.depth == 0
        assert pipeline.server.ssh_key is ABSENT
        assert pipeline.version == ""

    def test_windows_shell(self):
        raw = raw_from_yaml(VALID_PIPELINE + "platform:\n  os: windows\n")
        assert decode(raw).steps[0].shell == "powershell"

    def test_explicit_shell_kept(self):
        raw = raw_from_yaml(
            VALID_PIPELINE.replace("- name: build", "- name: build\n  shell: /bin/bash")
        )
        assert decode(raw).steps[0].shell == "/bin/bash"

    def test_failure_values(self):
        for value, expected in (
            ("ignore", Failure.IGNORE),
            ("never", Failure.NEVER),
            ("", Failure.FAIL),
        ):
            raw = raw_from_yaml(
                VALID_PIPELINE.replace(
                    "- name: build", f"- name: build\n  failure: '{value}'"
                )
            )
            assert decode(raw).steps[0].failure is expected

    def test_unknown_failure_value(self):
        raw = raw_from_yaml(
            VALID_PIPELINE.replace("- name: build", "- name: build\n  failure: maybe")
        )
        with pytest.raises(MalformedInputError, match="failure"):
            decode(raw)

    def test_environment_variables(self):
        text = VALID_PIPELINE + """  environment:
    GOOS: linux
    DEBUG: true
    TOKEN:
      from_secret: token
"""
        environment = decode(raw_from_yaml(text)).steps[0].environment
        assert environment == {
            "GOOS": Literal("linux"),
            "DEBUG": Literal("true"),
            "TOKEN": SecretRef("token"),
        }

    def test_numeric_version(self):
        raw = raw_from_yaml(VALID_PIPELINE + "version: 1\n")
        assert decode(raw).version == "1"

    def test_missing_name(self):
        raw = raw_from_yaml(VALID_PIPELINE.replace("name: default\n", ""))
        with pytest.raises(MalformedInputError, match="'name' is a required property"):
            decode(raw)

    def test_wrong_type(self):
        raw = raw_from_yaml(VALID_PIPELINE + "clone:\n  depth: deep\n")
        with pytest.raises(MalformedInputError) as exc_info:
            decode(raw)
        assert exc_info.value.errors == [
            "Path 'clone -> depth': 'deep' is not of type 'integer'"
        ]

    def test_unknown_server_field(self):
        raw = raw_from_yaml(VALID_PIPELINE.replace("user: root", "user: root\n  port: 22"))
        with pytest.raises(MalformedInputError, match="server"):
            decode(raw)

    def test_step_without_name_decodes(self):
        """An unnamed step is a lint problem, not a decode problem."""
        raw = raw_from_yaml(VALID_PIPELINE.replace("- name: build\n  commands", "- commands"))
        assert decode(raw).steps[0].name == ""

    def test_trigger_and_when(self):
        text = VALID_PIPELINE + """  when:
    branch:
      exclude: [main]
trigger:
  event: [push, tag]
"""
        pipeline = decode(raw_from_yaml(text))
        assert pipeline.trigger.event.include == ["push", "tag"]
        assert pipeline.steps[0].when.branch.exclude == ["main"]

    def test_string_fields_keep_their_spelling(self):
        """Scalars that YAML would turn into numbers or booleans stay as written."""
        text = VALID_PIPELINE.replace(
            "password:\n    from_secret: password", "password: 0123"
        ) + """  environment:
    MASK: 0x1F
    VERBOSE: yes
    RATIO: 1.10
version: 1.10
"""
        pipeline = decode(raw_from_yaml(text))

        assert pipeline.version == "1.10"
        assert pipeline.server.password == Literal("0123")
        assert pipeline.steps[0].environment == {
            "MASK": Literal("0x1F"),
            "VERBOSE": Literal("yes"),
            "RATIO": Literal("1.10"),
        }

    def test_numeric_platform_version(self):
        raw = raw_from_yaml(
            VALID_PIPELINE + "platform:\n  os: windows\n  arch: amd64\n  version: 1809\n"
        )
        pipeline = decode(raw)

        assert pipeline.platform.version == "1809"
        assert pipeline.steps[0].shell == "powershell"

    def test_node_values_keep_their_spelling(self):
        raw = raw_from_yaml(VALID_PIPELINE + "node:\n  disk: 010\n  gpu: no\n")
        assert decode(raw).node == {"disk": "010", "gpu": "no"}
