from __future__ import annotations

import inspect
from dataclasses import dataclass

import pytest
import typer

from rci.cli.commands._helpers import exit_on_error
from rci.cli.context import CLIContext
from rci.core.config import Config
from rci.core.errors import ErrorCode
from rci.core.result import Err, Ok
from rci.output.console import MockConsole, Style
from rci.platform.detection import Arch, Platform, PlatformInfo


@dataclass(frozen=True, slots=True)
class _Problem:
    message: str
    hint: str | None = None


def _ctx() -> CLIContext:
    return CLIContext(
        config=Config(),
        platform=PlatformInfo(platform=Platform.LINUX, arch=Arch.X64),
        console=MockConsole(),
    )


def _console(ctx: CLIContext) -> MockConsole:
    assert isinstance(ctx.console, MockConsole)
    return ctx.console


def test_ok_value_is_returned() -> None:
    ctx = _ctx()
    assert exit_on_error(Ok(3), ctx) == 3
    assert not _console(ctx).outputs


def test_err_prints_message_and_hint() -> None:
    ctx = _ctx()
    with pytest.raises(typer.Exit) as exc:
        exit_on_error(Err(_Problem("bad input", hint="try again")), ctx)

    assert exc.value.exit_code == int(ErrorCode.USER_ERROR)
    console = _console(ctx)
    assert console.messages == ["error: bad input", "hint: try again"]
    assert console.outputs[1].style == Style.DIM


def test_err_uses_given_exit_code() -> None:
    ctx = _ctx()
    with pytest.raises(typer.Exit) as exc:
        exit_on_error(Err(_Problem("disk full")), ctx, ErrorCode.IO_ERROR)

    assert exc.value.exit_code == int(ErrorCode.IO_ERROR)
    assert _console(ctx).messages == ["error: disk full"]


def test_helpers_module_exports_only_exit_on_error() -> None:
    import rci.cli.commands._helpers as helpers

    public = {
        name
        for name, value in vars(helpers).items()
        if inspect.isfunction(value) and value.__module__ == helpers.__name__
    }
    assert public == {"exit_on_error"}
