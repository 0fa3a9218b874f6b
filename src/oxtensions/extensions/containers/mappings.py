"""Read-only mapping helpers; none of these mutate their input."""

from typing import Dict, Iterable, Mapping, TypeVar

K = TypeVar("K")
V = TypeVar("V")


def contains_all_keys(source: Mapping[K, V], keys: Iterable[K]) -> bool:
    return all(key in source for key in keys)


def contains_any_key(source: Mapping[K, V], keys: Iterable[K]) -> bool:
    return any(key in source for key in keys)


def to_dict(source: Mapping[K, V]) -> Dict[K, V]:
    return dict(source)


def filter_by_keys(source: Mapping[K, V], keys: Iterable[K]) -> Dict[K, V]:
    """Entries of `source` whose key appears in `keys`, in `keys` order."""
    return {key: source[key] for key in keys if key in source}
