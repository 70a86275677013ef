# amuse/services/durations.py
from __future__ import annotations

import math
from typing import Union

Number = Union[int, float]


def _whole(value: Number) -> Number:
    # 65.0 formats like 65
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def to_duration_human(duration: Number) -> str:
    """
    Seconds → "m:ss" (65 → "1:05", 3600 → "60:00"). Minutes are not rolled into hours.
    Expects duration >= 0; anything else gives a string nobody should show.
    """
    duration = _whole(duration)
    minutes = math.floor(duration / 60)
    seconds = _whole(duration % 60)
    return f"{minutes}:{seconds:02}"


def percent(position: Number, total: Number) -> float:
    """
    position / total as a fraction (0.0 → 1.0 while playing).

    A zero total does not raise: it yields nan (0/0) or a signed inf, the same
    values float division gives everywhere else. Callers pass them on as-is.
    """
    try:
        return position / total
    except ZeroDivisionError:
        if position == 0 or math.isnan(position):
            return math.nan
        return math.copysign(math.inf, position) * math.copysign(1.0, total)
