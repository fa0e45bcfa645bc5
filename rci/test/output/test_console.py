from __future__ import annotations

import pytest

from rci.output.console import MockConsole, RichConsole, Style


def test_mock_console_captures_styles() -> None:
    console = MockConsole()
    console.print("version=0.2.0")
    console.success("written")
    console.error("missing required field: pr_number")
    console.warning("ignoring rci.toml")

    assert console.messages == [
        "version=0.2.0",
        "OK written",
        "error: missing required field: pr_number",
        "warning: ignoring rci.toml",
    ]
    assert console.has_error()
    assert console.has_warning()
    assert console.outputs[0].style == Style.DEFAULT


def test_mock_console_find_and_clear() -> None:
    console = MockConsole()
    console.info("a")
    console.header("b")
    console.newline()
    assert len(console.find("info")) == 1
    assert console.text == "info: a\nb\n"
    console.clear()
    assert console.messages == []


def test_style_str() -> None:
    assert str(Style.HEADER) == "header"


def test_rich_console_keeps_stdout_for_values(capsys: pytest.CaptureFixture[str]) -> None:
    console = RichConsole()
    console.print("tag_name=v0.2.0")
    console.error("malformed field release_tag: '[v1]'")

    captured = capsys.readouterr()
    assert captured.out.strip() == "tag_name=v0.2.0"
    assert "error: malformed field release_tag: '[v1]'" in captured.err
