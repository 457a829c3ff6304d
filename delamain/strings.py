"""Utility helpers for blank checks and trimming of free-form text."""

from __future__ import annotations

from typing import Optional


def trimmed(text: str) -> str:
    """Strip leading and trailing whitespace, newlines included."""

    return text.strip()


def is_blank(text: Optional[str]) -> bool:
    """Return ``True`` for ``None``, ``""`` and whitespace-only strings."""

    return text is None or not text.strip()


def is_not_blank(text: Optional[str]) -> bool:
    return not is_blank(text)


def none_if_empty(text: Optional[str]) -> Optional[str]:
    """Map ``""`` to ``None``. Whitespace-only strings are kept as they are."""

    return text or None


def none_if_blank(text: Optional[str]) -> Optional[str]:
    return None if is_blank(text) else text


def truncate(text: str, length: int, trailing: str = "...") -> str:
    """Shorten *text* to at most *length* characters.

    The *trailing* marker counts towards *length*. When the marker alone
    does not fit, the plain prefix is returned instead.

    >>> truncate("hello world", 8)
    'hello...'
    >>> truncate("hello world", 8, trailing="…")
    'hello w…'
    """

    if len(text) <= length:
        return text

    keep = length - len(trailing)
    if keep <= 0:
        return text[: max(0, length)]
    return text[:keep] + trailing


__all__ = [
    "is_blank",
    "is_not_blank",
    "none_if_blank",
    "none_if_empty",
    "trimmed",
    "truncate",
]
