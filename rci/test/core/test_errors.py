from __future__ import annotations

from rci.core.errors import ErrorCode


def test_exit_code_values_are_stable() -> None:
    assert int(ErrorCode.OK) == 0
    assert int(ErrorCode.USER_ERROR) == 1
    assert int(ErrorCode.ENV_ERROR) == 2
    assert int(ErrorCode.IO_ERROR) == 5


def test_str_is_readable() -> None:
    assert str(ErrorCode.USER_ERROR) == "user error"


def test_success_flags() -> None:
    assert ErrorCode.OK.is_success
    assert not ErrorCode.OK.is_error
    assert ErrorCode.IO_ERROR.is_error
