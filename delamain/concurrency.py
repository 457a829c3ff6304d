"""Deadline-bounded execution of asynchronous operations."""

from __future__ import annotations

import asyncio
import functools
import logging
from datetime import timedelta
from typing import Any, Awaitable, Callable, Optional, TypeVar, Union

from .config import get_settings

logger = logging.getLogger(__name__)

T = TypeVar("T")

Seconds = Union[int, float, timedelta]


class OperationTimeoutError(TimeoutError):
    """Raised when an operation does not resolve before its deadline."""

    def __init__(self, timeout: float) -> None:
        super().__init__(f"Operation timed out after {timeout:g} seconds")
        self.timeout = timeout


def to_seconds(value: Seconds) -> float:
    """Normalise *value* (seconds or :class:`~datetime.timedelta`) to float seconds."""

    if isinstance(value, timedelta):
        return value.total_seconds()
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"Expected seconds or timedelta, received {value!r}")
    return float(value)


async def _countdown(seconds: float) -> None:
    await asyncio.sleep(max(0.0, seconds))


def _discard_outcome(task: "asyncio.Future[Any]") -> None:
    # Abandoned operations may still finish with an error after cancellation.
    if not task.cancelled():
        task.exception()


async def run_with_timeout(
    seconds: Seconds,
    operation: Callable[[], Awaitable[T]],
) -> T:
    """Run *operation* and give up once *seconds* have elapsed.

    The operation and a countdown run as two independent tasks; whichever
    completes first decides the outcome and the other one is cancelled.

    Parameters
    ----------
    seconds:
        Deadline relative to the call. Values ``<= 0`` expire immediately: the
        countdown is a zero-length sleep, so only an operation that is already
        complete when the race is first inspected can still win.
    operation:
        Zero-argument callable returning an awaitable. Called exactly once.

    Returns
    -------
    T
        Whatever the operation produced.

    Raises
    ------
    OperationTimeoutError
        When the countdown completes first. The operation is cancelled and
        its eventual result is never observed.
    Exception
        Any exception raised by the operation, unmodified.

    Notes
    -----
    If both sides are found complete in the same wake-up, the operation's
    outcome wins. Which side completes first otherwise follows the event
    loop's scheduling order and is not guaranteed.

    Cancellation of the losing operation is cooperative: the executor stops
    waiting right away, but the operation only stops at its next suspension
    point. When the caller itself is cancelled, both tasks are cancelled and
    awaited before ``CancelledError`` propagates.
    """

    timeout = to_seconds(seconds)
    work = asyncio.ensure_future(operation())
    timer = asyncio.ensure_future(_countdown(timeout))

    try:
        done, _pending = await asyncio.wait(
            {work, timer}, return_when=asyncio.FIRST_COMPLETED
        )
    except asyncio.CancelledError:
        # The caller is going away: both tasks must be unwound before it does.
        work.cancel()
        timer.cancel()
        await asyncio.gather(work, timer, return_exceptions=True)
        raise

    for task in (work, timer):
        if not task.done():
            task.cancel()
            task.add_done_callback(_discard_outcome)

    if work in done:
        return work.result()

    logger.warning(
        "Operation exceeded its deadline and was cancelled",
        extra={"timeout_seconds": timeout},
    )
    raise OperationTimeoutError(timeout)


def with_timeout(seconds: Optional[Seconds] = None):
    """Decorate an ``async def`` so each call is bounded by *seconds*.

    When *seconds* is omitted the ``DELAMAIN_DEFAULT_TIMEOUT`` setting is read
    at call time.
    """

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> T:
            deadline = get_settings().default_timeout if seconds is None else seconds
            return await run_with_timeout(deadline, lambda: func(*args, **kwargs))

        return wrapper

    return decorator


__all__ = [
    "OperationTimeoutError",
    "Seconds",
    "run_with_timeout",
    "to_seconds",
    "with_timeout",
]
