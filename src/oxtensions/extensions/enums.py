"""Enum helpers.

Members can carry human-readable labels through `description` and
`display_name` attributes, typically as properties::

    class Status(Enum):
        ACTIVE = 1
        INACTIVE = 2

        @property
        def description(self):
            return {1: "Currently active"}.get(self.value)

Members whose label is missing or not a string fall back to their name.
"""

from enum import Enum, Flag
from typing import Any, List, Optional, Type, TypeVar

E = TypeVar("E", bound=Enum)


def _label(member: Enum, attribute: str) -> str:
    value = getattr(member, attribute, None)
    return value if isinstance(value, str) else member.name


def get_description(member: Enum) -> str:
    """The member's `description` attribute, or its name."""
    return _label(member, "description")


def get_display_name(member: Enum) -> str:
    """The member's `display_name` attribute, or its name."""
    return _label(member, "display_name")


def to_list(enum_cls: Type[E]) -> List[E]:
    return list(enum_cls)


def has_flag(value: Flag, flag: Flag) -> bool:
    return (value & flag) == flag


def parse(
    enum_cls: Type[E],
    value: Any,
    ignore_case: bool = True,
    default: Optional[E] = None,
) -> Optional[E]:
    """Look a member up by name, then by value; `default` when neither matches."""
    if isinstance(value, str):
        name = value.strip()
        for member_name, member in enum_cls.__members__.items():
            if member_name == name or (ignore_case and member_name.casefold() == name.casefold()):
                return member
    try:
        return enum_cls(value)
    except ValueError:
        return default


def is_valid(enum_cls: Type[Enum], value: Any) -> bool:
    """True when `value` is the value of a defined member."""
    return any(member.value == value for member in enum_cls)
