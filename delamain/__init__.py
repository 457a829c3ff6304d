"""Stateless helpers for built-in types plus deadline and retry primitives.

``retry`` itself lives in :mod:`delamain.retry`; it is not re-exported here so
the submodule name stays importable as ``delamain.retry``.
"""

from .concurrency import OperationTimeoutError, run_with_timeout, with_timeout
from .retry import RetryPolicy, run_with_policy, with_retry

__all__ = [
    "OperationTimeoutError",
    "RetryPolicy",
    "run_with_policy",
    "run_with_timeout",
    "with_retry",
    "with_timeout",
]
