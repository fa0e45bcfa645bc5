"""Publish resolved values as GitHub Actions step outputs."""

from __future__ import annotations

import uuid
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from rci.core.result import Err, Ok, Result
from rci.platform.files import append_text
from rci.version.model import VersionInfo

__all__ = [
    "GITHUB_OUTPUT_ENV_VAR",
    "OutputError",
    "format_github_output",
    "image_reference",
    "step_outputs",
    "write_github_output",
]

GITHUB_OUTPUT_ENV_VAR = "GITHUB_OUTPUT"


@dataclass(frozen=True, slots=True)
class OutputError:
    message: str
    path: Path
    hint: str | None = None


def image_reference(info: VersionInfo, registry: str | None) -> str | None:
    """Full image reference, or None when no registry is configured."""
    if not registry:
        return None
    host = registry.rstrip("/")
    return f"{host}/{info.image_repository}:{info.image_tag}"


def step_outputs(info: VersionInfo, *, registry: str | None = None) -> dict[str, str]:
    outputs = {
        "version": info.version,
        "tag_name": info.tag_name,
        "image_tag": info.image_tag,
        "image_repository": info.image_repository,
        "short_sha": info.short_sha,
    }
    ref = image_reference(info, registry)
    if ref is not None:
        outputs["image_ref"] = ref
    return outputs


def format_github_output(outputs: Mapping[str, str]) -> str:
    lines: list[str] = []
    for key, value in outputs.items():
        if "\n" in value or "\r" in value:
            delimiter = f"ghadelimiter_{uuid.uuid4()}"
            lines.append(f"{key}<<{delimiter}")
            lines.append(value)
            lines.append(delimiter)
        else:
            lines.append(f"{key}={value}")
    return "".join(f"{line}\n" for line in lines)


def write_github_output(path: Path, outputs: Mapping[str, str]) -> Result[None, OutputError]:
    try:
        append_text(path, format_github_output(outputs))
    except OSError as e:
        return Err(
            OutputError(
                message=f"failed to write step outputs: {path}",
                path=path,
                hint=str(e),
            )
        )
    return Ok(None)
