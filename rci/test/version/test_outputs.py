from __future__ import annotations

from pathlib import Path

from rci.core.result import Err, Ok
from rci.version.model import VersionInfo
from rci.version.outputs import (
    format_github_output,
    image_reference,
    step_outputs,
    write_github_output,
)

INFO = VersionInfo(
    version="0.2.0",
    tag_name="v0.2.0",
    image_tag="v0.2.0",
    image_repository="owner/app-distroless",
    short_sha="a1b2c3d",
)


def test_step_outputs_without_registry() -> None:
    assert step_outputs(INFO) == {
        "version": "0.2.0",
        "tag_name": "v0.2.0",
        "image_tag": "v0.2.0",
        "image_repository": "owner/app-distroless",
        "short_sha": "a1b2c3d",
    }


def test_step_outputs_with_registry() -> None:
    outputs = step_outputs(INFO, registry="ghcr.io/")
    assert outputs["image_ref"] == "ghcr.io/owner/app-distroless:v0.2.0"


def test_image_reference_requires_registry() -> None:
    assert image_reference(INFO, None) is None
    assert image_reference(INFO, "") is None


def test_format_github_output_single_line() -> None:
    assert format_github_output({"version": "0.2.0", "short_sha": "a1b2c3d"}) == (
        "version=0.2.0\nshort_sha=a1b2c3d\n"
    )


def test_format_github_output_multiline_uses_delimiter() -> None:
    text = format_github_output({"notes": "line one\nline two"})
    lines = text.splitlines()
    assert lines[0].startswith("notes<<ghadelimiter_")
    delimiter = lines[0].split("<<", 1)[1]
    assert lines[1:] == ["line one", "line two", delimiter]


def test_write_github_output_appends(tmp_path: Path) -> None:
    path = tmp_path / "out" / "github_output"
    assert write_github_output(path, {"a": "1"}) == Ok(None)
    assert write_github_output(path, {"b": "2"}) == Ok(None)
    assert path.read_text(encoding="utf-8") == "a=1\nb=2\n"


def test_write_github_output_reports_os_error(tmp_path: Path) -> None:
    path = tmp_path / "is_a_dir"
    path.mkdir()
    result = write_github_output(path, {"a": "1"})
    assert isinstance(result, Err)
    assert result.error.path == path
    assert "failed to write step outputs" in result.error.message
