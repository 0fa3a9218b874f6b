"""Object-level helpers: None checks, JSON round-trips and fluent chaining.

JSON conversion goes through pydantic's `TypeAdapter`, so models,
dataclasses, datetimes and plain containers all serialise the same way.
"""

import copy
from typing import Any, Callable, Optional, Type, TypeVar

from pydantic import TypeAdapter, ValidationError

T = TypeVar("T")
R = TypeVar("R")

_ANY_ADAPTER: TypeAdapter[Any] = TypeAdapter(Any)


def is_none(obj: Any) -> bool:
    return obj is None


def is_not_none(obj: Any) -> bool:
    return obj is not None


def throw_if_none(obj: Optional[T], param_name: str) -> T:
    """Return `obj` unchanged, or raise ValueError naming `param_name`."""
    if obj is None:
        raise ValueError(f"{param_name} must not be None")
    return obj


def is_in(value: Any, *values: Any) -> bool:
    return value in values


def clone(obj: T) -> T:
    return copy.deepcopy(obj)


def to_json(obj: Any) -> str:
    """Compact JSON text; None becomes "null"."""
    return _ANY_ADAPTER.dump_json(obj).decode("utf-8")


def from_json(json: Optional[str], type_: Type[T] = Any) -> Optional[T]:
    """Parse `json` into `type_`.

    Returns None for None, empty, malformed, or non-conforming input
    instead of raising.
    """
    if not json:
        return None
    adapter = _ANY_ADAPTER if type_ is Any else TypeAdapter(type_)
    try:
        return adapter.validate_json(json)
    except ValidationError:
        return None


def pipe(value: T, func: Callable[[T], R]) -> R:
    return func(value)


def also(value: T, action: Callable[[T], Any]) -> T:
    """Run `action` for its side effect and hand `value` back."""
    action(value)
    return value


def if_not_none(value: Optional[T], action: Callable[[T], Any]) -> Optional[T]:
    if value is not None:
        action(value)
    return value
