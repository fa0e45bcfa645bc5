"""Version and tag derivation for CI workflows.

``resolve`` is a pure function of its WorkflowContext: the date and run
number come from the caller, so identical inputs always give identical
outputs.

    main          0.0.0-main.2025.12.17.42   main-2025.12.17
    pull request  pr-42                      pr-42
    release       0.2.0                      v0.2.0
"""

from __future__ import annotations

from datetime import date

from rci.core.result import Err, Ok, Result
from rci.version.errors import ValidationError
from rci.version.model import VersionInfo, WorkflowContext, WorkflowType

__all__ = [
    "MAIN_VERSION_PREFIX",
    "SHORT_SHA_LENGTH",
    "format_date",
    "image_repository_name",
    "resolve",
]

MAIN_VERSION_PREFIX = "0.0.0-main"
SHORT_SHA_LENGTH = 7


def format_date(d: date) -> str:
    return f"{d.year:04d}.{d.month:02d}.{d.day:02d}"


def image_repository_name(repository: str, suffix: str) -> str:
    """Append suffix to the last path segment, keeping any owner prefix."""
    owner, sep, name = repository.rpartition("/")
    return f"{owner}{sep}{name}{suffix}"


def resolve(ctx: WorkflowContext) -> Result[VersionInfo, ValidationError]:
    if not ctx.repository.strip():
        return Err(ValidationError.missing_field("repository"))
    if not ctx.repository.rpartition("/")[2]:
        return Err(
            ValidationError.malformed_field(
                "repository",
                f"{ctx.repository!r} has an empty name segment",
                hint="repositories look like owner/name",
            )
        )

    if len(ctx.commit_sha) < SHORT_SHA_LENGTH:
        return Err(
            ValidationError.malformed_field(
                "commit_sha",
                f"expected at least {SHORT_SHA_LENGTH} characters, got {len(ctx.commit_sha)}",
            )
        )

    match ctx.workflow_type:
        case WorkflowType.MAIN:
            day = format_date(ctx.current_date)
            version = f"{MAIN_VERSION_PREFIX}.{day}.{ctx.run_number}"
            tag_name = f"main-{day}"
            image_tag = tag_name
        case WorkflowType.PULL_REQUEST:
            if ctx.pr_number is None:
                return Err(ValidationError.missing_field("pr_number"))
            version = f"pr-{ctx.pr_number}"
            tag_name = version
            image_tag = version
        case WorkflowType.RELEASE:
            tag = ctx.release_tag
            if not tag:
                return Err(ValidationError.missing_field("release_tag"))
            if not tag.startswith("v"):
                return Err(
                    ValidationError.malformed_field(
                        "release_tag",
                        f"{tag!r} does not start with 'v'",
                        hint="release tags look like v1.2.3",
                    )
                )
            # Exactly one leading 'v' is removed: vv1.0.0 -> v1.0.0.
            version = tag[1:]
            tag_name = tag
            image_tag = tag
        case _:
            return Err(ValidationError.unknown_workflow_type(str(ctx.workflow_type)))

    return Ok(
        VersionInfo(
            version=version,
            tag_name=tag_name,
            image_tag=image_tag,
            image_repository=image_repository_name(ctx.repository, ctx.image_suffix),
            short_sha=ctx.commit_sha[:SHORT_SHA_LENGTH],
        )
    )
