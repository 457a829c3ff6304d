"""Helpers for lists, sequences and mappings."""

from __future__ import annotations

from typing import (
    Any,
    Callable,
    Dict,
    Hashable,
    Iterable,
    List,
    Mapping,
    Optional,
    Sequence,
    Sized,
    TypeVar,
    Union,
)

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def safe_get(items: Sequence[T], index: int, default: Optional[T] = None) -> Optional[T]:
    """Return ``items[index]`` or *default* when *index* is out of range.

    Negative indexes count as out of range rather than wrapping around.
    """

    if 0 <= index < len(items):
        return items[index]
    return default


def is_not_empty(collection: Sized) -> bool:
    return len(collection) > 0


def chunked(items: Sequence[T], size: int) -> List[List[T]]:
    """Split *items* into consecutive lists of at most *size* elements.

    >>> chunked([1, 2, 3, 4, 5], 2)
    [[1, 2], [3, 4], [5]]

    A non-positive *size* yields the whole input as a single chunk.
    """

    values = list(items)
    if not values:
        return []
    if size <= 0:
        return [values]
    return [values[start : start + size] for start in range(0, len(values), size)]


def unique(items: Iterable[T]) -> List[T]:
    """Drop repeated elements, keeping the first occurrence of each."""

    return list(dict.fromkeys(items))


def unique_by(items: Iterable[T], key: Union[str, Callable[[T], Hashable]]) -> List[T]:
    """Drop elements whose *key* was already seen.

    *key* is either a callable or the name of an attribute on each element.
    """

    key_func: Callable[[T], Any]
    if isinstance(key, str):
        attribute = key
        key_func = lambda item: getattr(item, attribute)  # noqa: E731
    else:
        key_func = key

    seen = set()
    result: List[T] = []
    for item in items:
        marker = key_func(item)
        if marker in seen:
            continue
        seen.add(marker)
        result.append(item)
    return result


def map_keys(mapping: Mapping[Any, V], transform: Callable[[Any], K]) -> Dict[K, V]:
    """Return a new dict with every key passed through *transform*.

    Raises
    ------
    ValueError
        If two keys map to the same transformed key.
    """

    result: Dict[K, V] = {}
    for key, value in mapping.items():
        new_key = transform(key)
        if new_key in result:
            raise ValueError(f"Duplicate key after transform: {new_key!r}")
        result[new_key] = value
    return result


__all__ = ["chunked", "is_not_empty", "map_keys", "safe_get", "unique", "unique_by"]
