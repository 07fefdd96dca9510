"""Semantic checks for decoded SSH pipelines."""

from ..manifest.errors import LintError
from ..manifest.variable import is_present
from .pipeline import Pipeline

MISSING_NAME = "missing name"
DUPLICATE_NAME = "duplicate name"
DETACHED_STEP = "detached step not permitted"
MISSING_HOST = "missing host"
MISSING_USER = "missing user"
MISSING_CREDENTIALS = "missing password or ssh key"


def lint(pipeline: Pipeline) -> None:
    """
    Check a pipeline for problems the schema cannot express.

    Rules run in a fixed order, each over every step, and the first
    violation is raised:

    1. every step has a name
    2. step names are unique
    3. no step is detached
    4. the server has a host, a user, and a password or ssh key

    Step ``depends_on`` entries are not resolved against step names.

    Raises:
        LintError: With ``reason`` set to one of the module constants
    """
    _check_step_names(pipeline)
    _check_detached(pipeline)
    _check_server(pipeline)


def _check_step_names(pipeline: Pipeline) -> None:
    for step in pipeline.steps:
        if not step.name:
            raise LintError(MISSING_NAME)

    seen = set()
    for step in pipeline.steps:
        if step.name in seen:
            raise LintError(DUPLICATE_NAME, step=step.name)
        seen.add(step.name)


def _check_detached(pipeline: Pipeline) -> None:
    for step in pipeline.steps:
        if step.detach:
            raise LintError(DETACHED_STEP, step=step.name)


def _check_server(pipeline: Pipeline) -> None:
    server = pipeline.server
    if not is_present(server.host):
        raise LintError(MISSING_HOST, field="host")
    if not is_present(server.user):
        raise LintError(MISSING_USER, field="user")
    if not is_present(server.password) and not is_present(server.ssh_key):
        raise LintError(MISSING_CREDENTIALS, field="password")
