"""Tests for rci.core.result."""

import pytest

from rci.core.result import Err, Ok, Result, is_err, is_ok


class TestOk:
    def test_value_and_flags(self) -> None:
        result = Ok("0.2.0")
        assert result.value == "0.2.0"
        assert result.is_ok() is True
        assert result.is_err() is False

    def test_unwrap(self) -> None:
        assert Ok(42).unwrap() == 42
        assert Ok(42).unwrap_or(0) == 42

    def test_unwrap_err_raises(self) -> None:
        with pytest.raises(ValueError, match="called unwrap_err on Ok"):
            Ok(42).unwrap_err()

    def test_map(self) -> None:
        assert Ok("v1.0.0").map(lambda t: t[1:]) == Ok("1.0.0")
        assert Ok(1).map_err(lambda e: f"error: {e}") == Ok(1)

    def test_flat_map(self) -> None:
        result: Result[int, str] = Ok(0)
        flat = result.flat_map(lambda x: Err("zero") if x == 0 else Ok(100 // x))
        assert flat == Err("zero")

    def test_frozen(self) -> None:
        result = Ok(42)
        with pytest.raises(AttributeError):
            result.value = 0  # type: ignore[misc]

    def test_repr(self) -> None:
        assert repr(Ok("pr-42")) == "Ok('pr-42')"


class TestErr:
    def test_error_and_flags(self) -> None:
        result = Err("missing")
        assert result.error == "missing"
        assert result.is_ok() is False
        assert result.is_err() is True

    def test_unwrap_raises(self) -> None:
        with pytest.raises(ValueError, match="called unwrap on Err"):
            Err("missing").unwrap()

    def test_unwrap_or_and_unwrap_err(self) -> None:
        assert Err("missing").unwrap_or("fallback") == "fallback"
        assert Err("missing").unwrap_err() == "missing"

    def test_map_is_skipped(self) -> None:
        assert Err("missing").map(lambda x: x) == Err("missing")
        assert Err("missing").flat_map(lambda x: Ok(x)) == Err("missing")

    def test_map_err(self) -> None:
        assert Err("missing").map_err(str.upper) == Err("MISSING")

    def test_repr(self) -> None:
        assert repr(Err("bad")) == "Err('bad')"


def test_type_guards() -> None:
    ok: Result[int, str] = Ok(1)
    err: Result[int, str] = Err("x")
    assert is_ok(ok) and not is_err(ok)
    assert is_err(err) and not is_ok(err)


def test_pattern_matching() -> None:
    result: Result[int, str] = Ok(42)
    match result:
        case Ok(value):
            assert value == 42
        case Err(_):
            pytest.fail("expected Ok")
