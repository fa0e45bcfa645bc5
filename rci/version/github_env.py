"""Build a WorkflowContext from GitHub Actions environment variables.

Raw inputs are collected as strings first (from the environment, then
overridden by command-line options) and only parsed once, so every
parse failure is reported through the same ValidationError family.
"""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from datetime import date
from pathlib import Path

from rci.core.result import Err, Ok, Result
from rci.core.structured import StrDict, as_str_dict, get_int, get_str, get_table
from rci.version.errors import ValidationError
from rci.version.model import WorkflowContext, WorkflowType

__all__ = [
    "EVENT_PATH_ENV_VAR",
    "IMAGE_SUFFIX_ENV_VAR",
    "ContextInputs",
    "build_workflow_context",
    "inputs_from_env",
    "load_event_payload",
    "merge_inputs",
    "workflow_type_for_event",
]

IMAGE_SUFFIX_ENV_VAR = "RCI_IMAGE_SUFFIX"
EVENT_PATH_ENV_VAR = "GITHUB_EVENT_PATH"

# ASCII digits only: int() would otherwise accept any Unicode decimal.
_PR_REF_RE = re.compile(r"^refs/pull/([0-9]+)/(?:merge|head)$")
_TAG_REF_PREFIX = "refs/tags/"
_UINT_RE = re.compile(r"^[0-9]+$")
_DATE_RE = re.compile(r"^([0-9]{4})-([0-9]{2})-([0-9]{2})$")

_MAIN_EVENTS = frozenset({"workflow_dispatch", "schedule", "merge_group"})
_PR_EVENTS = frozenset({"pull_request", "pull_request_target"})


@dataclass(frozen=True, slots=True)
class ContextInputs:
    """Unparsed workflow inputs; None means "not provided"."""

    repository: str | None = None
    workflow_type: str | None = None
    pr_number: str | None = None
    release_tag: str | None = None
    commit_sha: str | None = None
    run_number: str | None = None
    current_date: str | None = None
    image_suffix: str | None = None


def _get(env: Mapping[str, str], key: str) -> str | None:
    value = env.get(key, "").strip()
    return value or None


def workflow_type_for_event(event_name: str, ref: str | None) -> str:
    """Map a GitHub event name to a workflow type name.

    Unrecognized events are returned unchanged so that parsing reports them.
    """
    if event_name == "push":
        if ref is not None and ref.startswith(_TAG_REF_PREFIX):
            return WorkflowType.RELEASE.value
        return WorkflowType.MAIN.value
    if event_name in _PR_EVENTS:
        return WorkflowType.PULL_REQUEST.value
    if event_name == "release":
        return WorkflowType.RELEASE.value
    if event_name in _MAIN_EVENTS:
        return WorkflowType.MAIN.value
    return event_name


def load_event_payload(path: Path) -> Result[StrDict, ValidationError]:
    """Read the webhook payload GitHub stores at $GITHUB_EVENT_PATH."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        detail = f"cannot read {path}: {e}"
        return Err(ValidationError.malformed_field(EVENT_PATH_ENV_VAR, detail))

    try:
        obj: object = json.loads(text)
    except json.JSONDecodeError as e:
        detail = f"invalid JSON in {path}: {e}"
        return Err(ValidationError.malformed_field(EVENT_PATH_ENV_VAR, detail))

    payload = as_str_dict(obj)
    if payload is None:
        detail = f"expected a JSON object in {path}"
        return Err(ValidationError.malformed_field(EVENT_PATH_ENV_VAR, detail))
    return Ok(payload)


def _payload_pr_number(payload: Mapping[str, object]) -> str | None:
    pr = get_table(payload, "pull_request")
    if pr is None:
        return None
    number = get_int(pr, "number")
    return None if number is None else str(number)


def _payload_release_tag(payload: Mapping[str, object]) -> str | None:
    release = get_table(payload, "release")
    if release is None:
        return None
    return get_str(release, "tag_name")


def inputs_from_env(
    env: Mapping[str, str],
    payload: Mapping[str, object] | None = None,
) -> ContextInputs:
    """Collect raw inputs from GitHub Actions variables.

    The event payload, when given, wins over GITHUB_REF for the PR number
    and the release tag. For pull_request_target the ref names the base
    branch, so the payload is the only source of the PR number.
    """
    ref = _get(env, "GITHUB_REF")
    event_name = _get(env, "GITHUB_EVENT_NAME")
    event: Mapping[str, object] = payload or {}

    workflow_type = None
    if event_name is not None:
        workflow_type = workflow_type_for_event(event_name, ref)

    pr_number = _payload_pr_number(event)
    if pr_number is None and ref is not None:
        m = _PR_REF_RE.match(ref)
        if m is not None:
            pr_number = m.group(1)

    release_tag = None
    if workflow_type == WorkflowType.RELEASE.value:
        release_tag = _payload_release_tag(event) or _get(env, "GITHUB_REF_NAME")
        if release_tag is None and ref is not None and ref.startswith(_TAG_REF_PREFIX):
            release_tag = ref[len(_TAG_REF_PREFIX) :] or None

    # The suffix is used verbatim, so it is not stripped.
    suffix = env.get(IMAGE_SUFFIX_ENV_VAR) or None

    return ContextInputs(
        repository=_get(env, "GITHUB_REPOSITORY"),
        workflow_type=workflow_type,
        pr_number=pr_number,
        release_tag=release_tag,
        commit_sha=_get(env, "GITHUB_SHA"),
        run_number=_get(env, "GITHUB_RUN_NUMBER"),
        image_suffix=suffix,
    )


def merge_inputs(base: ContextInputs, overrides: ContextInputs) -> ContextInputs:
    """Return base with every provided (non-empty) override applied."""
    changes: dict[str, str] = {}
    for f in fields(ContextInputs):
        value = getattr(overrides, f.name)
        if value:
            changes[f.name] = value
    return replace(base, **changes)


def _parse_uint(name: str, raw: str) -> Result[int, ValidationError]:
    text = raw.strip()
    if not _UINT_RE.match(text):
        detail = f"expected a non-negative integer, got {raw!r}"
        return Err(ValidationError.malformed_field(name, detail))
    return Ok(int(text))


def _parse_date(raw: str) -> Result[date, ValidationError]:
    m = _DATE_RE.match(raw.strip())
    if m is None:
        detail = f"expected YYYY-MM-DD, got {raw!r}"
        return Err(ValidationError.malformed_field("current_date", detail))
    try:
        return Ok(date(int(m.group(1)), int(m.group(2)), int(m.group(3))))
    except ValueError as e:
        return Err(ValidationError.malformed_field("current_date", str(e)))


def build_workflow_context(
    inputs: ContextInputs,
    *,
    today: date | None = None,
) -> Result[WorkflowContext, ValidationError]:
    """Parse raw inputs into a WorkflowContext.

    Branch-specific requirements (pr_number, release_tag) are left to the
    resolver; only values that cannot be represented at all fail here.
    """
    if not inputs.repository:
        hint = "set GITHUB_REPOSITORY or --repository"
        return Err(ValidationError.missing_field("repository", hint=hint))
    if not inputs.workflow_type:
        return Err(
            ValidationError.missing_field(
                "workflow_type", hint="set GITHUB_EVENT_NAME or --workflow-type"
            )
        )
    if not inputs.commit_sha:
        return Err(ValidationError.missing_field("commit_sha", hint="set GITHUB_SHA or --sha"))

    wt = WorkflowType.parse(inputs.workflow_type)
    if isinstance(wt, Err):
        return wt
    workflow_type = wt.value

    pr_number: int | None = None
    if inputs.pr_number:
        parsed_pr = _parse_uint("pr_number", inputs.pr_number)
        if isinstance(parsed_pr, Err):
            return parsed_pr
        pr_number = parsed_pr.value

    run_number = 0
    if inputs.run_number:
        parsed_run = _parse_uint("run_number", inputs.run_number)
        if isinstance(parsed_run, Err):
            return parsed_run
        run_number = parsed_run.value
    elif workflow_type == WorkflowType.MAIN:
        hint = "set GITHUB_RUN_NUMBER or --run-number"
        return Err(ValidationError.missing_field("run_number", hint=hint))

    if inputs.current_date:
        parsed_date = _parse_date(inputs.current_date)
        if isinstance(parsed_date, Err):
            return parsed_date
        current_date = parsed_date.value
    elif today is not None:
        current_date = today
    else:
        return Err(ValidationError.missing_field("current_date"))

    return Ok(
        WorkflowContext(
            repository=inputs.repository.strip(),
            workflow_type=workflow_type,
            commit_sha=inputs.commit_sha.strip(),
            run_number=run_number,
            current_date=current_date,
            pr_number=pr_number,
            release_tag=inputs.release_tag.strip() if inputs.release_tag else None,
            image_suffix=inputs.image_suffix or "",
        )
    )
