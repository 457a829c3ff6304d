"""Success/failure values for code that prefers returning errors over raising."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, Optional, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E", bound=BaseException)
F = TypeVar("F", bound=BaseException)


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    @property
    def value_or_none(self) -> Optional[T]:
        return self.value

    @property
    def error_or_none(self) -> None:
        return None

    def on_success(self, func: Callable[[T], object]) -> "Success[T]":
        func(self.value)
        return self

    def on_failure(self, func: Callable[[Any], object]) -> "Success[T]":
        return self

    def map_error(self, transform: Callable[[Any], BaseException]) -> "Success[T]":
        return self

    def recover(self, transform: Callable[[Any], T]) -> T:
        return self.value


@dataclass(frozen=True)
class Failure(Generic[E]):
    error: E

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    @property
    def value_or_none(self) -> None:
        return None

    @property
    def error_or_none(self) -> Optional[E]:
        return self.error

    def on_success(self, func: Callable[[Any], object]) -> "Failure[E]":
        return self

    def on_failure(self, func: Callable[[E], object]) -> "Failure[E]":
        func(self.error)
        return self

    def map_error(self, transform: Callable[[E], F]) -> "Failure[F]":
        return Failure(transform(self.error))

    def recover(self, transform: Callable[[E], T]) -> T:
        return transform(self.error)


Result = Union[Success[T], Failure[BaseException]]


def capture(func: Callable[..., T], *args: Any, **kwargs: Any) -> "Result[T]":
    """Call *func* and wrap its return value or raised :class:`Exception`.

    Exceptions outside the :class:`Exception` hierarchy (``KeyboardInterrupt``,
    ``asyncio.CancelledError``) propagate.
    """

    try:
        return Success(func(*args, **kwargs))
    except Exception as exc:
        return Failure(exc)


async def capture_async(operation: Callable[[], Awaitable[T]]) -> "Result[T]":
    """Await *operation* and wrap the outcome like :func:`capture`."""

    try:
        return Success(await operation())
    except Exception as exc:
        return Failure(exc)


__all__ = ["Failure", "Result", "Success", "capture", "capture_async"]
