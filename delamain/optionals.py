"""Helpers for values that may be ``None``."""

from __future__ import annotations

from typing import Callable, Optional, Type, TypeVar, Union

T = TypeVar("T")

ErrorSpec = Union[BaseException, Type[BaseException], Callable[[], BaseException], None]


class MissingValueError(ValueError):
    """Raised by :func:`or_raise` when no explicit error was supplied."""


def _build_error(error: ErrorSpec) -> BaseException:
    if error is None:
        return MissingValueError("Expected a value but received None")
    if isinstance(error, BaseException):
        return error
    return error()


def or_raise(value: Optional[T], error: ErrorSpec = None) -> T:
    """Return *value* or raise *error* when it is ``None``.

    *error* may be an exception instance, an exception class or a zero-arg
    factory; the latter two are only invoked when *value* is ``None``.
    """

    if value is None:
        raise _build_error(error)
    return value


def is_none(value: object) -> bool:
    return value is None


def is_not_none(value: object) -> bool:
    return value is not None


def apply(value: Optional[T], func: Callable[[T], object]) -> None:
    """Call *func* with *value* unless it is ``None``."""

    if value is not None:
        func(value)


def or_default(value: Optional[T], default: T) -> T:
    return default if value is None else value


def or_else(value: Optional[T], factory: Callable[[], T]) -> T:
    """Like :func:`or_default` but only computes the default when needed."""

    if value is not None:
        return value
    return factory()


__all__ = [
    "MissingValueError",
    "apply",
    "is_none",
    "is_not_none",
    "or_default",
    "or_else",
    "or_raise",
]
