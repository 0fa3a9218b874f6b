"""Read-only sequence helpers (lists, tuples, ranges)."""

from typing import Any, List, Optional, Sequence, TypeVar

T = TypeVar("T")


def is_null_or_empty(source: Optional[Sequence[Any]]) -> bool:
    return source is None or len(source) == 0


def index_of(source: Sequence[T], item: T) -> int:
    """Position of the first equal item, or -1."""
    for index, candidate in enumerate(source):
        if candidate == item:
            return index
    return -1


def last_index_of(source: Sequence[T], item: T) -> int:
    for index in range(len(source) - 1, -1, -1):
        if source[index] == item:
            return index
    return -1


def binary_search(source: Sequence[T], value: T) -> int:
    """Search an ascending sequence.

    Returns the index of a matching item, or the bitwise complement of
    the insertion point (``~index``, always negative) when there is none.
    """
    lo, hi = 0, len(source) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        candidate = source[mid]
        if candidate == value:
            return mid
        if candidate < value:
            lo = mid + 1
        else:
            hi = mid - 1
    return ~lo


def slice_range(source: Sequence[T], start: int, length: int) -> List[T]:
    if not 0 <= start <= len(source):
        raise ValueError("start is out of range")
    if length < 0 or start + length > len(source):
        raise ValueError("length is out of range")
    return list(source[start:start + length])
