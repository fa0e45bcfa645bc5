"""Build-tool command - pick cargo or cross for a target triple."""

from __future__ import annotations

import os
from pathlib import Path

import typer

from rci.build.target import host_triple, select_build_tool
from rci.cli.commands._helpers import exit_on_error
from rci.cli.context import build_context
from rci.core.errors import ErrorCode
from rci.output.console import Style
from rci.version.outputs import GITHUB_OUTPUT_ENV_VAR, write_github_output


def build_tool(
    target: str | None = typer.Option(
        None, "--target", help="Rust target triple (default: host)", show_default=False
    ),
    host: str | None = typer.Option(
        None, "--host", help="Host triple (default: detected)", show_default=False
    ),
    force_cross: bool = typer.Option(False, "--force-cross", help="Always use cross"),
    github_output: Path | None = typer.Option(
        None,
        "--github-output",
        help="Step output file (default: $GITHUB_OUTPUT)",
        show_default=False,
    ),
    config: Path | None = typer.Option(
        None, "--config", help="Path to rci.toml", show_default=False
    ),
) -> None:
    """Print the build tool (cargo or cross) to use for a target."""
    ctx = build_context(config)

    host_name = host or ctx.config.build.host or host_triple(ctx.platform)
    if host_name is None:
        ctx.console.error(f"cannot determine host triple for platform: {ctx.platform}")
        ctx.console.print("hint: pass --host or set [build].host in rci.toml", Style.DIM)
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))

    tool = exit_on_error(
        select_build_tool(
            target,
            host_name,
            force_cross=force_cross or ctx.config.build.force_cross,
        ),
        ctx,
    )
    ctx.console.print(str(tool))

    output_path = github_output
    if output_path is None:
        env_path = os.environ.get(GITHUB_OUTPUT_ENV_VAR, "").strip()
        if env_path:
            output_path = Path(env_path)

    if output_path is not None:
        exit_on_error(
            write_github_output(output_path, {"tool": str(tool)}), ctx, ErrorCode.IO_ERROR
        )
