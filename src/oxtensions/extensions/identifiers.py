"""UUID helpers."""

import base64
import uuid
from datetime import datetime, timezone
from typing import Optional

_NIL = uuid.UUID(int=0)
_TICK_EPOCH = datetime(1, 1, 1, tzinfo=timezone.utc)


def is_empty(value: uuid.UUID) -> bool:
    return value == _NIL


def is_none_or_empty(value: Optional[uuid.UUID]) -> bool:
    return value is None or value == _NIL


def to_short_string(value: uuid.UUID) -> str:
    """22-character URL-safe base64 rendering of the 16 UUID bytes."""
    return base64.urlsafe_b64encode(value.bytes).decode("ascii").rstrip("=")


def _ticks(now: datetime) -> int:
    # 100-nanosecond intervals since 0001-01-01T00:00:00Z
    delta = now - _TICK_EPOCH
    return (delta.days * 86400 + delta.seconds) * 10_000_000 + delta.microseconds * 10


def new_comb(now: Optional[datetime] = None) -> uuid.UUID:
    """Random UUID whose last six bytes hold the current timestamp.

    The trailing bytes are the six most significant bytes of the tick
    count, so values generated later sort after earlier ones in databases
    that order UUIDs by their final bytes.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    raw = bytearray(uuid.uuid4().bytes)
    raw[10:16] = _ticks(now).to_bytes(8, "big")[:6]
    return uuid.UUID(bytes=bytes(raw))
