# app/utils/time_utils.py

import math
from datetime import datetime, timezone
from typing import Optional


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Timestamps are stored naive in UTC so that aware and stored values can be subtracted."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def calculate_duration(start: datetime, end: datetime) -> int:
    """
    Minutes between start and end, rounded half up (90s -> 2, 150s -> 3).
    A negative result is returned as-is when end precedes start.
    """
    minutes = (end - start).total_seconds() / 60
    return math.floor(minutes + 0.5)


def format_hhmm(value: datetime) -> str:
    return value.strftime("%H:%M")


def format_minutes(minutes: int) -> str:
    hours, mins = divmod(int(minutes), 60)
    return f"{hours}h {mins}m"
