"""LIFO helpers over plain lists, with the top of the stack at the end."""

from typing import Iterable, List, Optional, TypeVar

T = TypeVar("T")


def is_null_or_empty(stack: Optional[List[T]]) -> bool:
    return not stack


def peek_or_default(stack: List[T], default: Optional[T] = None) -> Optional[T]:
    return stack[-1] if stack else default


def pop_or_default(stack: List[T], default: Optional[T] = None) -> Optional[T]:
    return stack.pop() if stack else default


def push_range(stack: List[T], items: Iterable[T]) -> None:
    # the last item pushed ends up on top
    stack.extend(items)


def pop_many(stack: List[T], count: int) -> List[T]:
    """Pop up to `count` items, top first."""
    if count < 0:
        raise ValueError("count must be non-negative")
    return [stack.pop() for _ in range(min(count, len(stack)))]


def clone(stack: List[T]) -> List[T]:
    return list(stack)
