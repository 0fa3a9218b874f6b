"""Mutable dict helpers."""

from typing import Any, Callable, Dict, Mapping, MutableMapping, Optional, TypeVar
from urllib.parse import quote

from oxtensions.extensions.generic import to_json as _to_json

K = TypeVar("K")
V = TypeVar("V")


def is_null_or_empty(source: Optional[Mapping[Any, Any]]) -> bool:
    return not source


def get_or_default(source: Mapping[K, V], key: K, default: Optional[V] = None) -> Optional[V]:
    return source.get(key, default)


def get_or_add(source: MutableMapping[K, V], key: K, factory: Callable[[K], V]) -> V:
    """Return the stored value, creating it with `factory(key)` on first access."""
    if key in source:
        return source[key]
    value = factory(key)
    source[key] = value
    return value


def merge(source: MutableMapping[K, V], other: Mapping[K, V], overwrite: bool = False) -> None:
    """Copy entries of `other` into `source`; existing keys win unless `overwrite`."""
    for key, value in other.items():
        if overwrite or key not in source:
            source[key] = value


def to_query_string(source: Mapping[Any, Any]) -> str:
    """Percent-encoded "k1=v1&k2=v2" in insertion order; None values become empty."""
    pairs = []
    for key, value in source.items():
        encoded_key = quote("" if key is None else str(key), safe="")
        encoded_value = quote("" if value is None else str(value), safe="")
        pairs.append(f"{encoded_key}={encoded_value}")
    return "&".join(pairs)


def invert(source: Mapping[K, V]) -> Dict[V, K]:
    """Swap keys and values. Raises ValueError if two keys share a value."""
    result: Dict[V, K] = {}
    for key, value in source.items():
        if value in result:
            raise ValueError(f"duplicate value {value!r} cannot become a key")
        result[value] = key
    return result


def add_or_update(source: MutableMapping[K, V], key: K, value: V) -> None:
    source[key] = value


def remove_where(source: MutableMapping[K, V], predicate: Callable[[K, V], bool]) -> int:
    doomed = [key for key, value in source.items() if predicate(key, value)]
    for key in doomed:
        del source[key]
    return len(doomed)


def to_json(source: Mapping[Any, Any]) -> str:
    return _to_json(dict(source))
