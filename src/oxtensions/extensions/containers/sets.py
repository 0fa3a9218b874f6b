"""Set helpers."""

from typing import AbstractSet, Any, Callable, Iterable, List, MutableSet, Optional, Set, TypeVar

T = TypeVar("T")


def is_null_or_empty(source: Optional[AbstractSet[Any]]) -> bool:
    return not source


def add_range(source: MutableSet[T], items: Iterable[T]) -> int:
    """Add `items` and return how many were not already present."""
    added = 0
    for item in items:
        if item not in source:
            source.add(item)
            added += 1
    return added


def remove_where(source: MutableSet[T], predicate: Callable[[T], bool]) -> int:
    doomed = [item for item in source if predicate(item)]
    for item in doomed:
        source.discard(item)
    return len(doomed)


def to_sorted(source: AbstractSet[T]) -> List[T]:
    return sorted(source)


def overlaps_with(source: AbstractSet[T], other: Iterable[T]) -> bool:
    return not source.isdisjoint(other)


def symmetric_difference(source: AbstractSet[T], other: Iterable[T]) -> Set[T]:
    return set(source).symmetric_difference(other)
