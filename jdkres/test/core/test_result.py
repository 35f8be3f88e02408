"""Tests for jdkres.core.result and jdkres.core.structured."""

from __future__ import annotations

import pytest

from jdkres.core.errors import ErrorCode
from jdkres.core.result import Err, Ok, Result, is_err, is_ok
from jdkres.core.structured import as_str_dict, get_float, get_int, get_str, get_table


def _half(n: int) -> Result[int, str]:
    if n % 2:
        return Err(f"{n} is odd")
    return Ok(n // 2)


class TestResult:
    def test_ok(self) -> None:
        result = _half(4)
        assert is_ok(result)
        assert not is_err(result)
        assert result == Ok(2)

    def test_err(self) -> None:
        result = _half(3)
        assert is_err(result)
        assert result == Err("3 is odd")

    def test_flat_map_chains(self) -> None:
        assert Ok(8).flat_map(_half) == Ok(4)
        assert Ok(8).flat_map(_half).flat_map(_half).flat_map(_half) == Ok(1)

    def test_flat_map_short_circuits(self) -> None:
        calls: list[int] = []

        def record(n: int) -> Result[int, str]:
            calls.append(n)
            return Ok(n)

        assert Ok(3).flat_map(_half).flat_map(record) == Err("3 is odd")
        assert calls == []

    def test_repr(self) -> None:
        assert repr(Ok("x")) == "Ok('x')"
        assert repr(Err(1)) == "Err(1)"

    def test_pattern_matching(self) -> None:
        match _half(6):
            case Ok(value):
                assert value == 3
            case Err():
                pytest.fail("expected Ok")


class TestErrorCode:
    def test_values_stable(self) -> None:
        assert int(ErrorCode.OK) == 0
        assert int(ErrorCode.USER_ERROR) == 1
        assert int(ErrorCode.ENV_ERROR) == 2
        assert int(ErrorCode.NOT_FOUND) == 3
        assert int(ErrorCode.NETWORK_ERROR) == 4
        assert int(ErrorCode.IO_ERROR) == 5


class TestStructured:
    def test_as_str_dict(self) -> None:
        assert as_str_dict({"a": 1}) == {"a": 1}
        assert as_str_dict({1: "a"}) is None
        assert as_str_dict([1]) is None

    def test_get_str(self) -> None:
        assert get_str({"k": "  v  "}, "k") == "v"
        assert get_str({"k": "   "}, "k") is None
        assert get_str({"k": 1}, "k") is None

    def test_get_int(self) -> None:
        assert get_int({"k": 8}, "k") == 8
        assert get_int({"k": " 11 "}, "k") == 11
        assert get_int({"k": True}, "k") is None
        assert get_int({"k": "8.1"}, "k") is None
        assert get_int({"k": "\uff18"}, "k") is None
        assert get_int({"k": "\u0661\u0661"}, "k") is None

    def test_get_float(self) -> None:
        assert get_float({"k": 5}, "k") == 5.0
        assert get_float({"k": 2.5}, "k") == 2.5
        assert get_float({"k": False}, "k") is None

    def test_get_table(self) -> None:
        assert get_table({"t": {"a": 1}}, "t") == {"a": 1}
        assert get_table({"t": [1]}, "t") is None
