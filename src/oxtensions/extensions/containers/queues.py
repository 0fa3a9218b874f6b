"""FIFO helpers over ``collections.deque``: items are appended on the right
and dequeued from the left."""

from collections import deque
from typing import Deque, Iterable, List, Optional, TypeVar

T = TypeVar("T")


def is_null_or_empty(queue: Optional[Deque[T]]) -> bool:
    return not queue


def peek_or_default(queue: Deque[T], default: Optional[T] = None) -> Optional[T]:
    return queue[0] if queue else default


def dequeue_or_default(queue: Deque[T], default: Optional[T] = None) -> Optional[T]:
    return queue.popleft() if queue else default


def enqueue_range(queue: Deque[T], items: Iterable[T]) -> None:
    queue.extend(items)


def dequeue_many(queue: Deque[T], count: int) -> List[T]:
    """Dequeue up to `count` items in FIFO order."""
    if count < 0:
        raise ValueError("count must be non-negative")
    return [queue.popleft() for _ in range(min(count, len(queue)))]


def clone(queue: Deque[T]) -> Deque[T]:
    return deque(queue, maxlen=queue.maxlen)
