"""Version command - derive version/tag names for the current workflow run."""

from __future__ import annotations

import json
import os
from datetime import UTC, date, datetime
from pathlib import Path

import typer

from rci.cli.commands._helpers import exit_on_error
from rci.cli.context import build_context
from rci.core.errors import ErrorCode
from rci.version.github_env import (
    EVENT_PATH_ENV_VAR,
    ContextInputs,
    build_workflow_context,
    inputs_from_env,
    load_event_payload,
    merge_inputs,
)
from rci.version.outputs import GITHUB_OUTPUT_ENV_VAR, step_outputs, write_github_output
from rci.version.resolver import resolve


def _utc_today() -> date:
    return datetime.now(UTC).date()


def version(
    workflow_type: str | None = typer.Option(
        None,
        "--workflow-type",
        help="main, pull_request or release (default: from GITHUB_EVENT_NAME)",
        show_default=False,
    ),
    repository: str | None = typer.Option(
        None, "--repository", help="owner/name (default: GITHUB_REPOSITORY)", show_default=False
    ),
    pr_number: str | None = typer.Option(
        None, "--pr-number", help="Pull request number", show_default=False
    ),
    release_tag: str | None = typer.Option(
        None, "--release-tag", help="Release tag, e.g. v1.2.3", show_default=False
    ),
    sha: str | None = typer.Option(
        None, "--sha", help="Commit SHA (default: GITHUB_SHA)", show_default=False
    ),
    run_number: str | None = typer.Option(
        None, "--run-number", help="CI run number (default: GITHUB_RUN_NUMBER)", show_default=False
    ),
    on_date: str | None = typer.Option(
        None, "--date", help="UTC date as YYYY-MM-DD (default: today)", show_default=False
    ),
    image_suffix: str | None = typer.Option(
        None,
        "--image-suffix",
        help="Suffix for the image name, e.g. -distroless",
        show_default=False,
    ),
    registry: str | None = typer.Option(
        None, "--registry", help="Registry host for image_ref, e.g. ghcr.io", show_default=False
    ),
    no_env: bool = typer.Option(
        False, "--no-env", help="Ignore GITHUB_* environment variables"
    ),
    github_output: Path | None = typer.Option(
        None,
        "--github-output",
        help="Step output file (default: $GITHUB_OUTPUT)",
        show_default=False,
    ),
    as_json: bool = typer.Option(False, "--json", help="Print outputs as JSON"),
    config: Path | None = typer.Option(
        None, "--config", help="Path to rci.toml", show_default=False
    ),
) -> None:
    """Resolve version, tag and image names for this workflow run."""
    ctx = build_context(config)

    if no_env:
        base = ContextInputs()
    else:
        payload = None
        event_path = os.environ.get(EVENT_PATH_ENV_VAR, "").strip()
        if event_path:
            payload = exit_on_error(
                load_event_payload(Path(event_path)), ctx, ErrorCode.ENV_ERROR
            )
        base = inputs_from_env(os.environ, payload)
    if not base.image_suffix and ctx.config.image.suffix:
        base = merge_inputs(base, ContextInputs(image_suffix=ctx.config.image.suffix))

    inputs = merge_inputs(
        base,
        ContextInputs(
            repository=repository,
            workflow_type=workflow_type,
            pr_number=pr_number,
            release_tag=release_tag,
            commit_sha=sha,
            run_number=run_number,
            current_date=on_date,
            image_suffix=image_suffix,
        ),
    )

    workflow_ctx = exit_on_error(build_workflow_context(inputs, today=_utc_today()), ctx)
    info = exit_on_error(resolve(workflow_ctx), ctx)

    outputs = step_outputs(info, registry=registry or ctx.config.image.registry)

    if as_json:
        ctx.console.print(json.dumps(outputs, indent=2))
    else:
        for key, value in outputs.items():
            ctx.console.print(f"{key}={value}")

    output_path = github_output
    if output_path is None and not no_env:
        env_path = os.environ.get(GITHUB_OUTPUT_ENV_VAR, "").strip()
        if env_path:
            output_path = Path(env_path)

    if output_path is not None:
        exit_on_error(write_github_output(output_path, outputs), ctx, ErrorCode.IO_ERROR)
        ctx.console.success(f"step outputs written: {output_path}")
