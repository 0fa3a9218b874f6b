"""Calendar helpers for `date` and `datetime` values.

Functions that accept either type return the same type they were given;
`datetime` results keep the input's `tzinfo`. Naive datetimes are read as
UTC wherever an absolute instant is needed (unix timestamps, ISO 8601
strings) and as local wall-clock time when compared against "now".
"""

import calendar
from datetime import date, datetime, time, timedelta, timezone
from typing import Optional, TypeVar

D = TypeVar("D", date, datetime)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_SATURDAY, _SUNDAY = calendar.SATURDAY, calendar.SUNDAY


def _as_utc(value: date) -> datetime:
    if not isinstance(value, datetime):
        return datetime.combine(value, time.min, tzinfo=timezone.utc)
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _midnight(value: D) -> D:
    if isinstance(value, datetime):
        return value.replace(hour=0, minute=0, second=0, microsecond=0)
    return value


def to_unix_timestamp(value: date) -> int:
    """Whole seconds since 1970-01-01T00:00:00Z, truncated towards zero."""
    return int((_as_utc(value) - _EPOCH).total_seconds())


def from_unix_timestamp(timestamp: int) -> datetime:
    return _EPOCH + timedelta(seconds=timestamp)


def is_weekend(value: date) -> bool:
    return value.weekday() in (_SATURDAY, _SUNDAY)


def is_weekday(value: date) -> bool:
    return not is_weekend(value)


def start_of_day(value: datetime) -> datetime:
    return _midnight(value)


def end_of_day(value: datetime) -> datetime:
    return datetime.combine(value.date(), time.max, tzinfo=value.tzinfo)


def start_of_month(value: D) -> D:
    return _midnight(value).replace(day=1)


def end_of_month(value: D) -> D:
    last_day = calendar.monthrange(value.year, value.month)[1]
    if isinstance(value, datetime):
        return datetime.combine(value.date().replace(day=last_day), time.max, tzinfo=value.tzinfo)
    return value.replace(day=last_day)


def start_of_year(value: D) -> D:
    return _midnight(value).replace(month=1, day=1)


def end_of_year(value: D) -> D:
    if isinstance(value, datetime):
        return datetime.combine(date(value.year, 12, 31), time.max, tzinfo=value.tzinfo)
    return value.replace(month=12, day=31)


def start_of_week(value: D, start_day: int = calendar.MONDAY) -> D:
    """Midnight of the first day of the week containing `value`.

    `start_day` uses the `calendar` constants (MONDAY=0 .. SUNDAY=6).
    """
    diff = (value.weekday() - start_day) % 7
    return _midnight(value) - timedelta(days=diff)


def to_datetime(value: date, at: time = time.min) -> datetime:
    return datetime.combine(value, at)


def age(birth_date: date, today: Optional[date] = None) -> int:
    """Completed years between `birth_date` and `today` (defaults to the local date)."""
    if isinstance(birth_date, datetime):
        birth_date = birth_date.date()
    if today is None:
        today = date.today()
    elif isinstance(today, datetime):
        today = today.date()
    years = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        years -= 1
    return years


def is_today(value: date) -> bool:
    if isinstance(value, datetime):
        local = value.astimezone() if value.tzinfo is not None else value
        return local.date() == date.today()
    return value == date.today()


def is_past(value: date) -> bool:
    return _compare_to_now(value) < 0


def is_future(value: date) -> bool:
    return _compare_to_now(value) > 0


def _compare_to_now(value: date) -> int:
    if isinstance(value, datetime):
        now = datetime.now(timezone.utc) if value.tzinfo is not None else datetime.now()
    else:
        now = date.today()
    return (value > now) - (value < now)


def next_workday(value: D) -> D:
    """The first Monday-to-Friday day strictly after `value`, at midnight."""
    candidate = _midnight(value) + timedelta(days=1)
    while is_weekend(candidate):
        candidate += timedelta(days=1)
    return candidate


def previous_workday(value: D) -> D:
    candidate = _midnight(value) - timedelta(days=1)
    while is_weekend(candidate):
        candidate -= timedelta(days=1)
    return candidate


def to_iso8601_string(value: date) -> str:
    """UTC timestamp to the second, e.g. "2026-02-22T15:30:00Z"."""
    return _as_utc(value).strftime("%Y-%m-%dT%H:%M:%SZ")
