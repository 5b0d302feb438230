"""Core identifier types for Deep Dissect."""

from __future__ import annotations

import string
import time
import uuid
from typing import NewType

RecordId = NewType("RecordId", str)

_BASE36 = string.digits + string.ascii_lowercase


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits: list[str] = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def now_ms() -> int:
    """Milliseconds since the epoch."""
    return int(time.time() * 1000)


def generate_record_id(timestamp_ms: int | None = None) -> RecordId:
    """Generate a history record id.

    Base-36 millisecond timestamp followed by a random suffix. Ids sort
    roughly by creation time; uniqueness is practical, not guaranteed.
    """
    ts = now_ms() if timestamp_ms is None else timestamp_ms
    return RecordId(_to_base36(ts) + uuid.uuid4().hex[:10])
