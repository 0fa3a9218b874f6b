"""List and iterable helpers.

Functions documented as "in place" mutate the list they are given; the
rest leave their input alone and return new lists or lazy generators.
"""

import random
from collections.abc import Hashable, Sized
from typing import Any, Callable, Dict, Iterable, Iterator, List, MutableSequence, Optional, Sequence, Set, TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)

_MISSING = object()


def is_null_or_empty(source: Optional[Iterable[Any]]) -> bool:
    if source is None:
        return True
    if isinstance(source, Sized):
        return len(source) == 0
    return next(iter(source), _MISSING) is _MISSING


def chunk(source: Sequence[T], size: int) -> Iterator[List[T]]:
    """Yield consecutive slices of `size` items; the last may be shorter."""
    if size <= 0:
        raise ValueError("size must be positive")
    for start in range(0, len(source), size):
        yield list(source[start:start + size])


def shuffle(source: MutableSequence[Any]) -> None:
    """Fisher-Yates shuffle, in place."""
    random.shuffle(source)


def distinct_by(source: Iterable[T], key: Callable[[T], Hashable]) -> Iterator[T]:
    """Yield the first item seen for each key, preserving order."""
    seen: Set[Hashable] = set()
    for item in source:
        item_key = key(item)
        if item_key not in seen:
            seen.add(item_key)
            yield item


def for_each(source: Iterable[T], action: Callable[[T], Any]) -> None:
    for item in source:
        action(item)


def to_set(source: Iterable[T]) -> Set[T]:
    return set(source)


def paginate(source: Iterable[T], page_index: int, page_size: int) -> Iterator[T]:
    """Zero-based page `page_index` of `page_size` items."""
    if page_index < 0:
        raise ValueError("page_index must be non-negative")
    if page_size <= 0:
        raise ValueError("page_size must be positive")
    skip = page_index * page_size
    for index, item in enumerate(source):
        if index < skip:
            continue
        if index >= skip + page_size:
            return
        yield item


def add_range_if_not_exists(source: List[T], items: Iterable[T]) -> None:
    """Append each item not already present, in place."""
    for item in items:
        if item not in source:
            source.append(item)


def remove_where(source: List[T], predicate: Callable[[T], bool]) -> int:
    """Drop matching items in place and return how many were removed."""
    kept = [item for item in source if not predicate(item)]
    removed = len(source) - len(kept)
    source[:] = kept
    return removed


def min_by(source: Iterable[T], key: Callable[[T], Any]) -> Optional[T]:
    """First item with the smallest key, or None for an empty iterable."""
    return min(source, key=key, default=None)


def max_by(source: Iterable[T], key: Callable[[T], Any]) -> Optional[T]:
    """First item with the largest key, or None for an empty iterable."""
    return max(source, key=key, default=None)


def flatten(source: Iterable[Iterable[T]]) -> Iterator[T]:
    for inner in source:
        yield from inner


def random_item(source: Sequence[T]) -> T:
    if not source:
        raise ValueError("source must not be empty")
    return random.choice(source)


def random_items(source: Sequence[T], count: int) -> List[T]:
    """`count` distinct positions sampled without replacement."""
    if not 0 <= count <= len(source):
        raise ValueError("count must be between 0 and len(source)")
    return random.sample(list(source), count)


def rotate(source: List[Any], count: int) -> None:
    """Rotate left by `count` in place: [1, 2, 3, 4, 5] by 2 -> [3, 4, 5, 1, 2].

    Negative counts rotate right.
    """
    n = len(source)
    if n <= 1:
        return
    count %= n
    if count:
        source[:] = source[count:] + source[:count]


def interleave(first: Iterable[T], second: Iterable[T]) -> Iterator[T]:
    """Alternate items from both iterables, then drain whichever is longer."""
    left, right = iter(first), iter(second)
    left_open = right_open = True
    while left_open or right_open:
        if left_open:
            item = next(left, _MISSING)
            if item is _MISSING:
                left_open = False
            else:
                yield item
        if right_open:
            item = next(right, _MISSING)
            if item is _MISSING:
                right_open = False
            else:
                yield item


def count_by(source: Iterable[T], key: Callable[[T], K]) -> Dict[K, int]:
    counts: Dict[K, int] = {}
    for item in source:
        item_key = key(item)
        counts[item_key] = counts.get(item_key, 0) + 1
    return counts


def none(source: Iterable[T], predicate: Optional[Callable[[T], bool]] = None) -> bool:
    if predicate is None:
        return next(iter(source), _MISSING) is _MISSING
    return not any(predicate(item) for item in source)


def has_duplicates(source: Iterable[Hashable]) -> bool:
    seen: Set[Hashable] = set()
    for item in source:
        if item in seen:
            return True
        seen.add(item)
    return False


def duplicates(source: Iterable[T], key: Callable[[T], Hashable]) -> Iterator[T]:
    """Yield the item at which each key is first repeated, once per key."""
    seen: Set[Hashable] = set()
    reported: Set[Hashable] = set()
    for item in source:
        item_key = key(item)
        if item_key in seen:
            if item_key not in reported:
                reported.add(item_key)
                yield item
        else:
            seen.add(item_key)
