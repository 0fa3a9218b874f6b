"""timedelta factories and formatting."""

from datetime import timedelta
from typing import List, Tuple, Union

Amount = Union[int, float]


def days(value: Amount) -> timedelta:
    return timedelta(days=value)


def hours(value: Amount) -> timedelta:
    return timedelta(hours=value)


def minutes(value: Amount) -> timedelta:
    return timedelta(minutes=value)


def seconds(value: Amount) -> timedelta:
    return timedelta(seconds=value)


def milliseconds(value: Amount) -> timedelta:
    return timedelta(milliseconds=value)


def is_positive(value: timedelta) -> bool:
    return value > timedelta(0)


def is_negative(value: timedelta) -> bool:
    return value < timedelta(0)


def is_zero(value: timedelta) -> bool:
    return value == timedelta(0)


def absolute(value: timedelta) -> timedelta:
    return abs(value)


def total_weeks(value: timedelta) -> float:
    return value.total_seconds() / (7 * 86400)


def _components(value: timedelta) -> Tuple[int, int, int, int]:
    magnitude = abs(value)
    hours_part, remainder = divmod(magnitude.seconds, 3600)
    minutes_part, seconds_part = divmod(remainder, 60)
    return magnitude.days, hours_part, minutes_part, seconds_part


def to_human_readable(value: timedelta) -> str:
    """Compact form that omits leading zero units.

    >>> to_human_readable(timedelta(hours=2, seconds=5))
    '2h 0m 5s'
    >>> to_human_readable(-timedelta(seconds=42))
    '-42s'
    """
    d, h, m, s = _components(value)
    parts: List[str] = []
    if d > 0:
        parts.append(f"{d}d")
    if d > 0 or h > 0:
        parts.append(f"{h}h")
    if d > 0 or h > 0 or m > 0:
        parts.append(f"{m}m")
    parts.append(f"{s}s")
    sign = "-" if is_negative(value) else ""
    return sign + " ".join(parts)


def to_iso8601_duration(value: timedelta) -> str:
    """ISO 8601 duration with whole seconds: 150 minutes -> "PT2H30M0S"."""
    d, h, m, s = _components(value)
    sign = "-" if is_negative(value) else ""
    day_part = f"{d}D" if d > 0 else ""
    return f"{sign}P{day_part}T{h}H{m}M{s}S"
