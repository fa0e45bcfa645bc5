from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum

from rci.core.result import Err, Ok, Result
from rci.version.errors import ValidationError


class WorkflowType(Enum):
    """CI trigger category selecting the version derivation branch."""

    MAIN = "main"
    PULL_REQUEST = "pull_request"
    RELEASE = "release"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: str) -> Result[WorkflowType, ValidationError]:
        key = value.strip().lower().replace("-", "_")
        found = _ALIASES.get(key)
        if found is None:
            return Err(ValidationError.unknown_workflow_type(value))
        return Ok(found)


_ALIASES: dict[str, WorkflowType] = {
    "main": WorkflowType.MAIN,
    "push": WorkflowType.MAIN,
    "pull_request": WorkflowType.PULL_REQUEST,
    "pr": WorkflowType.PULL_REQUEST,
    "release": WorkflowType.RELEASE,
}


@dataclass(frozen=True, slots=True)
class WorkflowContext:
    """Everything the resolver needs, supplied by the caller."""

    repository: str  # owner/name
    workflow_type: WorkflowType
    commit_sha: str
    run_number: int
    current_date: date  # UTC
    pr_number: int | None = None
    release_tag: str | None = None
    image_suffix: str = ""


@dataclass(frozen=True, slots=True)
class VersionInfo:
    version: str
    tag_name: str
    image_tag: str
    image_repository: str
    short_sha: str
