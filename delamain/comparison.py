"""Ordering helpers."""

from __future__ import annotations

from typing import Any, TypeVar

C = TypeVar("C", bound=Any)


def clamp(value: C, lower: C, upper: C) -> C:
    """Return *value* limited to the closed range ``[lower, upper]``.

    >>> clamp(15, 0, 10)
    10
    >>> clamp(1.5, 0.0, 1.0)
    1.0
    """

    if lower > upper:
        raise ValueError(f"Invalid range: lower bound {lower!r} exceeds upper bound {upper!r}")
    return min(max(value, lower), upper)


__all__ = ["clamp"]
