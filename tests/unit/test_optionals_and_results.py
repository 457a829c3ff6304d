"""Tests for optional-value and result helpers."""

from __future__ import annotations

from typing import List

import pytest

from delamain.optionals import (
    MissingValueError,
    apply,
    is_none,
    is_not_none,
    or_default,
    or_else,
    or_raise,
)
from delamain.results import Failure, Success, capture, capture_async


class ValidationProblem(Exception):
    pass


def test_or_raise_returns_value_or_raises():
    assert or_raise("name", ValidationProblem("missing")) == "name"
    assert or_raise(0) == 0

    with pytest.raises(ValidationProblem):
        or_raise(None, ValidationProblem("missing"))
    with pytest.raises(ValidationProblem):
        or_raise(None, ValidationProblem)
    with pytest.raises(MissingValueError):
        or_raise(None)


def test_or_raise_factory_only_called_for_none():
    calls: List[str] = []

    def factory() -> Exception:
        calls.append("built")
        return ValidationProblem("missing")

    assert or_raise("x", factory) == "x"
    assert calls == []
    with pytest.raises(ValidationProblem):
        or_raise(None, factory)
    assert calls == ["built"]


def test_none_checks_and_apply():
    seen: List[str] = []

    assert is_none(None)
    assert not is_none("")
    assert is_not_none(False)

    apply("Ada", lambda name: seen.append(f"Hello, {name}"))
    apply(None, lambda name: seen.append("never"))
    assert seen == ["Hello, Ada"]


def test_or_default_and_or_else():
    assert or_default(None, "Anonymous") == "Anonymous"
    assert or_default("", "Anonymous") == ""

    calls: List[int] = []

    def expensive() -> int:
        calls.append(1)
        return 42

    assert or_else(7, expensive) == 7
    assert calls == []
    assert or_else(None, expensive) == 42
    assert calls == [1]


def test_success_accessors_and_callbacks():
    result = Success(42)
    seen: List[object] = []

    assert result.is_success and not result.is_failure
    assert result.value_or_none == 42
    assert result.error_or_none is None
    assert result.on_success(seen.append).on_failure(seen.append) is result
    assert seen == [42]
    assert result.map_error(lambda e: RuntimeError(str(e))) is result
    assert result.recover(lambda e: 0) == 42


def test_failure_accessors_and_callbacks():
    error = KeyError("missing")
    result = Failure(error)
    seen: List[object] = []

    assert result.is_failure and not result.is_success
    assert result.value_or_none is None
    assert result.error_or_none is error
    assert result.on_success(seen.append).on_failure(seen.append) is result
    assert seen == [error]

    mapped = result.map_error(lambda e: RuntimeError(f"wrapped {e}"))
    assert isinstance(mapped, Failure)
    assert isinstance(mapped.error, RuntimeError)
    assert result.recover(lambda e: 0) == 0


def test_capture_wraps_return_value_and_exception():
    assert capture(int, "12") == Success(12)

    failed = capture(int, "twelve")
    assert isinstance(failed, Failure)
    assert isinstance(failed.error, ValueError)


def test_capture_lets_base_exceptions_through():
    def interrupt() -> None:
        raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        capture(interrupt)


@pytest.mark.asyncio
async def test_capture_async():
    async def ok() -> str:
        return "fine"

    async def broken() -> str:
        raise ValidationProblem("bad")

    assert await capture_async(ok) == Success("fine")
    failed = await capture_async(broken)
    assert isinstance(failed.error_or_none, ValidationProblem)
