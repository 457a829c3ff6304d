"""Sequential retries with exponential backoff for asynchronous operations."""

from __future__ import annotations

import asyncio
import functools
import logging
from datetime import timedelta
from typing import Any, Awaitable, Callable, List, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from .config import (
    DEFAULT_RETRY_INITIAL_DELAY,
    DEFAULT_RETRY_MAX_ATTEMPTS,
    get_settings,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_MAX_ATTEMPTS: int = DEFAULT_RETRY_MAX_ATTEMPTS
DEFAULT_INITIAL_DELAY: float = DEFAULT_RETRY_INITIAL_DELAY
BACKOFF_FACTOR: int = 2


class RetryPolicy(BaseModel):
    """Attempt bound and first delay for a retry loop.

    The delay before attempt ``n + 1`` is ``initial_delay * 2 ** (n - 1)``.
    There is no cap and no jitter, so callers pick values whose worst-case
    total wait is acceptable.
    """

    model_config = ConfigDict(frozen=True)

    max_attempts: int = Field(ge=1)
    initial_delay: float = Field(default=DEFAULT_INITIAL_DELAY, ge=0.0)

    @field_validator("initial_delay", mode="before")
    def _timedelta_to_seconds(cls, v: Any) -> Any:
        if isinstance(v, timedelta):
            return v.total_seconds()
        return v

    @classmethod
    def from_settings(cls) -> "RetryPolicy":
        current = get_settings()
        return cls(
            max_attempts=current.retry_max_attempts,
            initial_delay=current.retry_initial_delay,
        )

    def delays(self) -> List[float]:
        """Return the sleeps a fully failing run goes through, in order."""

        return [
            self.initial_delay * BACKOFF_FACTOR**index
            for index in range(self.max_attempts - 1)
        ]

    def wait_strategy(self) -> wait_exponential:
        return wait_exponential(multiplier=self.initial_delay, exp_base=BACKOFF_FACTOR)


async def _sleep(seconds: float) -> None:
    await asyncio.sleep(seconds)


def _log_retry(retry_state: RetryCallState) -> None:
    delay = retry_state.next_action.sleep if retry_state.next_action else 0.0
    error = retry_state.outcome.exception() if retry_state.outcome else None
    logger.warning(
        "Attempt %d failed with %r; retrying in %.3fs",
        retry_state.attempt_number,
        error,
        delay,
        extra={"attempt": retry_state.attempt_number, "delay_seconds": delay},
    )


async def run_with_policy(
    policy: RetryPolicy,
    operation: Callable[[], Awaitable[T]],
) -> T:
    """Run *operation* until it succeeds or ``policy.max_attempts`` is reached.

    Attempts never overlap: each one is awaited to completion and the backoff
    sleep has elapsed before the next starts. After the last failed attempt
    its exception is re-raised as-is.

    Only :class:`Exception` subclasses count as failed attempts. Cancellation
    (``asyncio.CancelledError``) during an attempt or a backoff sleep ends the
    whole loop immediately.
    """

    retrying = AsyncRetrying(
        stop=stop_after_attempt(policy.max_attempts),
        wait=policy.wait_strategy(),
        retry=retry_if_exception_type(Exception),
        before_sleep=_log_retry,
        sleep=_sleep,
        reraise=True,
    )

    try:
        async for attempt in retrying:
            with attempt:
                result = await operation()
    except Exception:
        logger.error(
            "Operation failed after %d attempt(s)",
            policy.max_attempts,
            extra={"attempt": policy.max_attempts},
        )
        raise

    return result


def _resolve_policy(
    max_attempts: Optional[int],
    delay: Union[int, float, timedelta, None],
) -> RetryPolicy:
    current = get_settings()
    return RetryPolicy(
        max_attempts=current.retry_max_attempts if max_attempts is None else max_attempts,
        initial_delay=current.retry_initial_delay if delay is None else delay,
    )


async def retry(
    max_attempts: int,
    operation: Callable[[], Awaitable[T]],
    *,
    delay: Union[int, float, timedelta, None] = None,
) -> T:
    """Retry *operation* up to *max_attempts* times with doubling delays.

    ``delay`` is the wait after the first failure; it defaults to the
    ``DELAMAIN_RETRY_INITIAL_DELAY`` setting (one second unless configured).

    Example::

        data = await retry(3, fetch_data, delay=0.5)
    """

    return await run_with_policy(_resolve_policy(max_attempts, delay), operation)


def with_retry(
    max_attempts: Optional[int] = None,
    delay: Union[int, float, timedelta, None] = None,
):
    """Decorate an ``async def`` so each call is retried with backoff.

    Omitted parameters are read from settings on every call.
    """

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> T:
            policy = _resolve_policy(max_attempts, delay)
            return await run_with_policy(policy, lambda: func(*args, **kwargs))

        return wrapper

    return decorator


__all__ = [
    "BACKOFF_FACTOR",
    "DEFAULT_INITIAL_DELAY",
    "DEFAULT_MAX_ATTEMPTS",
    "RetryPolicy",
    "retry",
    "run_with_policy",
    "with_retry",
]
