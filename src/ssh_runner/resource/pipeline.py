"""SSH pipeline data model."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from ..manifest.conditions import Conditions
from ..manifest.models import Clone, Platform, Workspace
from ..manifest.variable import ABSENT, Variable, decode_variable, scalar_text

KIND = "pipeline"
TYPE = "ssh"

DEFAULT_SHELL = "/bin/sh"
WINDOWS_SHELL = "powershell"


class Failure(str, Enum):
    """What a failing step does to the pipeline."""

    FAIL = "fail"
    IGNORE = "ignore"
    NEVER = "never"

    @classmethod
    def parse(cls, value: Optional[str]) -> "Failure":
        if not value:
            return cls.FAIL
        return cls(value)


def default_shell(os_name: str) -> str:
    """Shell used for steps that do not name one."""
    return WINDOWS_SHELL if os_name == "windows" else DEFAULT_SHELL


@dataclass
class Server:
    """Remote host the steps run on."""

    host: Variable = ABSENT
    user: Variable = ABSENT
    password: Variable = ABSENT
    ssh_key: Variable = ABSENT

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "Server":
        data = data or {}
        return cls(
            host=decode_variable(data.get("host"), "server.host"),
            user=decode_variable(data.get("user"), "server.user"),
            password=decode_variable(data.get("password"), "server.password"),
            ssh_key=decode_variable(data.get("ssh_key"), "server.ssh_key"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            name: value.to_yaml()
            for name, value in (
                ("host", self.host),
                ("user", self.user),
                ("password", self.password),
                ("ssh_key", self.ssh_key),
            )
            if value
        }


@dataclass
class Step:
    """A unit of work. ``depends_on`` names sibling steps."""

    name: str = ""
    shell: str = ""
    detach: bool = False
    depends_on: List[str] = field(default_factory=list)
    commands: List[str] = field(default_factory=list)
    environment: Dict[str, Variable] = field(default_factory=dict)
    failure: Failure = Failure.FAIL
    when: Conditions = field(default_factory=Conditions)

    @classmethod
    def from_dict(
        cls,
        data: Dict[str, Any],
        shell: str,
        index: int = 0,
        text: Optional[Dict[str, Any]] = None,
    ) -> "Step":
        where = f"steps[{index}]"
        text = data if text is None else text
        environment = {
            key: decode_variable(value, f"{where}.environment.{key}")
            for key, value in (text.get("environment") or {}).items()
        }
        return cls(
            name=data.get("name", ""),
            shell=data.get("shell") or shell,
            detach=data.get("detach", False),
            depends_on=list(data.get("depends_on") or []),
            commands=list(data.get("commands") or []),
            environment=environment,
            failure=Failure.parse(data.get("failure")),
            when=Conditions.from_yaml(data.get("when"), f"{where}.when"),
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"name": self.name}
        if self.shell:
            data["shell"] = self.shell
        if self.detach:
            data["detach"] = True
        if self.depends_on:
            data["depends_on"] = list(self.depends_on)
        if self.commands:
            data["commands"] = list(self.commands)
        if self.environment:
            data["environment"] = {
                key: value.to_yaml() for key, value in self.environment.items()
            }
        if self.failure is not Failure.FAIL:
            data["failure"] = self.failure.value
        when = self.when.to_dict()
        if when:
            data["when"] = when
        return data


@dataclass
class Pipeline:
    """Complete SSH pipeline resource."""

    kind: str = KIND
    type: str = TYPE
    name: str = ""
    version: str = ""
    depends_on: List[str] = field(default_factory=list)
    node: Dict[str, str] = field(default_factory=dict)
    server: Server = field(default_factory=Server)
    workspace: Workspace = field(default_factory=Workspace)
    platform: Platform = field(default_factory=Platform)
    clone: Clone = field(default_factory=Clone)
    trigger: Conditions = field(default_factory=Conditions)
    steps: List[Step] = field(default_factory=list)

    @classmethod
    def from_dict(
        cls, data: Dict[str, Any], text: Optional[Dict[str, Any]] = None
    ) -> "Pipeline":
        """
        Create a pipeline from a schema-checked document.

        Fills in the step shell from the platform and the failure policy.

        Args:
            data: The document with YAML-resolved scalars
            text: The same document with scalars as written; string fields
                (version, node, platform, server and environment values)
                are read from here. Defaults to ``data``.
        """
        text = data if text is None else text
        platform = Platform.from_dict(text.get("platform"))
        shell = default_shell(platform.os)
        version = text.get("version")
        text_steps = text.get("steps") or []

        return cls(
            kind=data.get("kind", KIND),
            type=data.get("type", TYPE),
            name=data["name"],
            version=scalar_text(version) if version is not None else "",
            depends_on=list(data.get("depends_on") or []),
            node={
                key: scalar_text(value)
                for key, value in (text.get("node") or {}).items()
            },
            server=Server.from_dict(text.get("server")),
            workspace=Workspace.from_dict(data.get("workspace")),
            platform=platform,
            clone=Clone.from_dict(data.get("clone")),
            trigger=Conditions.from_yaml(data.get("trigger"), "trigger"),
            steps=[
                Step.from_dict(step_data, shell, i, text_steps[i])
                for i, step_data in enumerate(data.get("steps") or [])
            ],
        )

    def get_step(self, name: str) -> Optional[Step]:
        """Get a step by name."""
        for step in self.steps:
            if step.name == name:
                return step
        return None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"kind": self.kind, "type": self.type, "name": self.name}
        if self.version:
            data["version"] = self.version
        if self.depends_on:
            data["depends_on"] = list(self.depends_on)
        if self.node:
            data["node"] = dict(self.node)

        for key, section in (
            ("server", self.server),
            ("workspace", self.workspace),
            ("platform", self.platform),
            ("clone", self.clone),
        ):
            section_data = section.to_dict()
            if section_data:
                data[key] = section_data

        trigger = self.trigger.to_dict()
        if trigger:
            data["trigger"] = trigger
        data["steps"] = [step.to_dict() for step in self.steps]
        return data
